"""Mailer - a minimal e-mail dispatch library.

Sends one HTML message to a list of recipients, either over an
authenticated SMTP session or by piping it to the local sendmail command.

Modules:
    - core: Exceptions, logger
    - config: Pydantic v2 settings
    - models: MailerConfig, Identity, Message
    - clients: Delivery strategies (SMTP, sendmail command)
    - mailer: The Mailer itself

Usage:
    from mailer import Mailer, MailerConfig

    mailer = Mailer(MailerConfig(
        host="smtp.example.com",
        port=587,
        username="alice@example.com",
        password="secret",
    ))
    mailer.send("Report ready", "<h1>Done</h1>", "bob@example.com")

    # Switch to the local sendmail binary at runtime
    mailer.update_config(MailerConfig(use_command=True, from_addr="alice@example.com"))

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

__version__ = "1.0.0"

# Clients
from mailer.clients import CommandTransport, SMTPContext, SMTPTransport, Transport

# Configuration
from mailer.config import MailerSettings

# Core utilities
from mailer.core import (
    CommandTransportError,
    InvalidMessageError,
    InvalidRecipientsError,
    MailerConfigError,
    MailerError,
    SMTPTransportError,
    configure_logging,
    get_logger,
    setup_logging,
)

# Mailer
from mailer.mailer import Mailer, MailService

# Models
from mailer.models import Identity, MailerConfig, Message, build_message

__all__ = [
    # Version
    "__version__",
    # Core exceptions
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
    # Configuration
    "MailerSettings",
    # Models
    "MailerConfig",
    "Identity",
    "Message",
    "build_message",
    # Clients
    "Transport",
    "SMTPContext",
    "SMTPTransport",
    "CommandTransport",
    # Mailer
    "Mailer",
    "MailService",
]
