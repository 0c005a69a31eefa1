"""Mailer: the single entry point for sending mail.

A Mailer is built once from a MailerConfig and reused. Each send picks a
delivery strategy from the configuration (SMTP or the local sendmail
command), builds the message and hands it over synchronously.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

import threading
from typing import Protocol, Sequence

from mailer.clients.base import Transport
from mailer.clients.sendmail import CommandTransport
from mailer.clients.smtp import SMTPContext, SMTPTransport
from mailer.config.settings import MailerSettings
from mailer.core.exceptions import InvalidRecipientsError
from mailer.core.logger import get_logger, log_context
from mailer.models.config import MailerConfig
from mailer.models.identity import Identity
from mailer.models.message import Message, build_message

logger = get_logger(__name__)


class MailService(Protocol):
    """Interface a mail sender implements."""

    def send(self, subject: str, body: str, *recipients: str) -> None:
        """Send a mail to recipients; the body can be HTML."""
        ...

    def update_config(self, config: MailerConfig) -> None:
        """Replace the current configuration."""
        ...


class Mailer:
    """Sends mail over SMTP or through the local sendmail command.

    The configuration, the derived sender identity and the cached SMTP
    context are guarded by one lock. Sends snapshot them under the lock and
    do their I/O outside it, so a reconfiguration never blocks on a slow
    server and never leaves a send with mixed settings.

    Example:
        mailer = Mailer(MailerConfig(
            host="smtp.example.com",
            port=587,
            username="alice@example.com",
            password="secret",
        ))
        mailer.send("Hello", "<p>Hi there</p>", "bob@example.com")
    """

    def __init__(self, config: MailerConfig | None = None) -> None:
        """Initialize the mailer. The configuration is not validated here.

        Args:
            config: Mailer configuration (empty default if None).
        """
        config = config if config is not None else MailerConfig.default()

        self._lock = threading.RLock()
        self._config = config
        self._identity = Identity.from_config(config)
        self._smtp_context: SMTPContext | None = None

        logger.info(
            f"Mailer initialized: mode={self._mode(config)}, from={self._identity}"
        )

    @classmethod
    def from_settings(cls, settings: MailerSettings | None = None) -> Mailer:
        """Build a mailer from environment-driven settings.

        Args:
            settings: Loaded settings (read from the environment if None).

        Returns:
            Configured mailer.
        """
        settings = settings if settings is not None else MailerSettings()
        logger.info(f"Loaded mailer settings: {settings.describe()}")
        return cls(settings.to_mailer_config())

    @staticmethod
    def _mode(config: MailerConfig) -> str:
        return CommandTransport.name if config.use_command else SMTPTransport.name

    @property
    def config(self) -> MailerConfig:
        """Current configuration."""
        with self._lock:
            return self._config

    @property
    def identity(self) -> Identity:
        """Sender identity derived from the current configuration."""
        with self._lock:
            return self._identity

    @property
    def use_command(self) -> bool:
        """Whether sends go through the local command."""
        with self._lock:
            return self._config.use_command

    @property
    def authenticated(self) -> bool:
        """Whether an SMTP context is cached for the current configuration."""
        with self._lock:
            return self._smtp_context is not None

    def update_config(self, config: MailerConfig) -> None:
        """Replace the configuration wholesale.

        The sender identity is derived again and the cached SMTP context
        is dropped, so the next send uses only the new settings.

        Args:
            config: New configuration.
        """
        identity = Identity.from_config(config)
        with self._lock:
            self._config = config
            self._identity = identity
            self._smtp_context = None

        logger.info(f"Mailer reconfigured: mode={self._mode(config)}, from={identity}")

    def send(self, subject: str, body: str, *recipients: str) -> None:
        """Send a mail to recipients.

        The body is sent as UTF-8 text/html, base64-encoded.

        Args:
            subject: Subject line.
            body: Message body, HTML allowed.
            *recipients: One or more recipient addresses.

        Raises:
            InvalidRecipientsError: If no recipient (or a blank one) is given.
            InvalidMessageError: If the subject or a recipient contains CR/LF.
            MailerConfigError: If SMTP settings are missing.
            SMTPTransportError: If the SMTP exchange fails.
            CommandTransportError: If the local command fails.
        """
        if not recipients:
            raise InvalidRecipientsError("At least one recipient is required")
        if any(not recipient or not recipient.strip() for recipient in recipients):
            raise InvalidRecipientsError("Recipient addresses must not be blank")

        transport, message, identity = self._prepare(subject, body, recipients)

        context = log_context(transport.name, recipients, subject=subject[:50])
        logger.info(f"Sending mail: {context}")

        transport.deliver(message, recipients, identity)

        logger.info(f"Mail accepted: {context}")

    def _prepare(
        self, subject: str, body: str, recipients: Sequence[str]
    ) -> tuple[Transport, Message, Identity]:
        """Snapshot settings and build the transport and message for one send."""
        with self._lock:
            config = self._config
            identity = self._identity

            if config.use_command:
                transport: Transport = CommandTransport(
                    path=config.sendmail_path, timeout=config.timeout
                )
                # sendmail gets the sender via -F/-f, not a From header
                return transport, build_message(subject, body, recipients), identity

            if self._smtp_context is None:
                self._smtp_context = SMTPContext.from_config(config)
                logger.debug(f"SMTP context created for {self._smtp_context.address}")

            transport = SMTPTransport(self._smtp_context)
            message = build_message(subject, body, recipients, sender=identity)
            return transport, message, identity
