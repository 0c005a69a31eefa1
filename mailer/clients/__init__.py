"""Clients module for the mailer.

Contains the delivery strategies: SMTP and the local sendmail command.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from mailer.clients.base import Transport
from mailer.clients.sendmail import CommandTransport
from mailer.clients.smtp import SMTPContext, SMTPTransport

__all__ = ["Transport", "SMTPContext", "SMTPTransport", "CommandTransport"]
