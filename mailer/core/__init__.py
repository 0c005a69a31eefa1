"""Core module for the mailer.

Provides exceptions and logging configuration.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from mailer.core.exceptions import (
    CommandTransportError,
    InvalidMessageError,
    InvalidRecipientsError,
    MailerConfigError,
    MailerError,
    SMTPTransportError,
)
from mailer.core.logger import (
    configure_logging,
    get_logger,
    get_logs_directory,
    log_context,
    mask_secret,
    setup_logging,
)

__all__ = [
    # Exceptions
    "MailerError",
    "MailerConfigError",
    "InvalidRecipientsError",
    "InvalidMessageError",
    "SMTPTransportError",
    "CommandTransportError",
    # Logging
    "get_logger",
    "setup_logging",
    "configure_logging",
    "get_logs_directory",
    "log_context",
    "mask_secret",
]
