"""Models module for the mailer.

Defines the configuration, sender identity and message models.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from mailer.models.config import MailerConfig
from mailer.models.identity import Identity
from mailer.models.message import Message, build_message, encode_body

__all__ = [
    "MailerConfig",
    "Identity",
    "Message",
    "build_message",
    "encode_body",
]
