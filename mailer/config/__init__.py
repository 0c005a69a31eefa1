"""Configuration module for the mailer.

Loads and validates mailer settings from environment variables or .env file.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from mailer.config.settings import MailerSettings

__all__ = ["MailerSettings"]
