"""SMTP transport for mail delivery.

Delivers a built message over one SMTP session per send: connect, upgrade
with STARTTLS when the server offers it, authenticate with PLAIN, send the
envelope (DATA only once every recipient is accepted), quit. There is no
connection reuse and no retry.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import base64
import smtplib
import ssl
from dataclasses import dataclass, field
from typing import Sequence

from mailer.core.exceptions import MailerConfigError, SMTPTransportError
from mailer.core.logger import get_logger
from mailer.models.config import MailerConfig
from mailer.models.identity import Identity
from mailer.models.message import Message

logger = get_logger(__name__)


@dataclass(frozen=True)
class SMTPContext:
    """Resolved SMTP connection settings and credential.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port.
        username: PLAIN authentication identity, also the envelope sender.
        password: PLAIN authentication password.
        timeout: Socket timeout in seconds (None blocks).
    """

    host: str
    port: int
    username: str
    password: str = field(repr=False)
    timeout: float | None = None

    @property
    def address(self) -> str:
        """Target address as ``host:port``."""
        return f"{self.host}:{self.port}"

    @classmethod
    def from_config(cls, config: MailerConfig) -> SMTPContext:
        """Build the context, requiring every SMTP field.

        Args:
            config: Mailer configuration.

        Returns:
            SMTP context for the configuration.

        Raises:
            MailerConfigError: If username, password, host or port is unset.
        """
        missing = [
            name
            for name, present in (
                ("username", bool(config.username)),
                ("password", bool(config.password)),
                ("host", bool(config.host)),
                ("port", config.port > 0),
            )
            if not present
        ]
        if missing:
            raise MailerConfigError(
                f"Missing SMTP credentials: {', '.join(missing)}. "
                "Username, password, host and port are required when using SMTP."
            )

        return cls(
            host=config.host,
            port=config.port,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
        )


class SMTPTransport:
    """SMTP delivery strategy.

    Attributes:
        context: Connection settings and credential for the session.
    """

    name = "smtp"

    def __init__(self, context: SMTPContext) -> None:
        """Initialize SMTP transport.

        Args:
            context: Resolved SMTP context.
        """
        self.context = context

    def _connect(self) -> smtplib.SMTP:
        ctx = self.context
        logger.debug(f"Connecting to SMTP: {ctx.address}")
        if ctx.timeout is None:
            return smtplib.SMTP(ctx.host, ctx.port)
        return smtplib.SMTP(ctx.host, ctx.port, timeout=ctx.timeout)

    def deliver(
        self, message: Message, recipients: Sequence[str], identity: Identity
    ) -> None:
        """Send a message through one SMTP session.

        The envelope sender is the authenticated username, not the From
        identity.

        Args:
            message: Built message, From header included.
            recipients: Envelope recipients.
            identity: Sender identity (only logged here).

        Raises:
            SMTPTransportError: If any step of the session fails or any
                recipient is refused.
        """
        ctx = self.context
        try:
            smtp = self._connect()
        except (smtplib.SMTPException, OSError, UnicodeError) as e:
            logger.error(f"Failed to connect to SMTP server {ctx.address}: {e}")
            raise SMTPTransportError(
                f"Failed to connect to SMTP server {ctx.address}: {e}",
                is_transient=self._is_transient_error(e),
            ) from e

        try:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                logger.debug("Starting TLS...")
                smtp.starttls(context=ssl.create_default_context())
                smtp.ehlo()

            self._authenticate(smtp)
            self._transmit(smtp, message, recipients)

        # smtplib encodes envelope commands as ASCII
        except (smtplib.SMTPException, OSError, UnicodeError) as e:
            logger.error(f"SMTP delivery via {ctx.address} failed: {e}")
            raise SMTPTransportError(
                f"Failed to send mail via {ctx.address}: {e}",
                is_transient=self._is_transient_error(e),
            ) from e
        finally:
            self._close(smtp)

        logger.debug(f"SMTP delivery accepted by {ctx.address} for {identity.address}")

    def _authenticate(self, smtp: smtplib.SMTP) -> None:
        """Run AUTH PLAIN with a UTF-8 initial response.

        Raises:
            SMTPAuthenticationError: If the server does not reply 235.
        """
        ctx = self.context
        logger.debug(f"Authenticating as {ctx.username} (PLAIN)")

        credential = b"\0".join(
            [b"", ctx.username.encode("utf-8"), ctx.password.encode("utf-8")]
        )
        token = base64.b64encode(credential).decode("ascii")
        code, resp = smtp.docmd("AUTH", f"PLAIN {token}")
        if code != 235:
            raise smtplib.SMTPAuthenticationError(code, resp)

    def _transmit(
        self, smtp: smtplib.SMTP, message: Message, recipients: Sequence[str]
    ) -> None:
        """Send the envelope, then DATA only if every recipient was accepted.

        Raises:
            SMTPSenderRefused: If MAIL FROM is rejected.
            SMTPRecipientsRefused: On the first rejected RCPT TO; no DATA
                is sent.
            SMTPDataError: If the message body is rejected.
        """
        sender = self.context.username

        code, resp = smtp.mail(sender)
        if code != 250:
            self._reset(smtp)
            raise smtplib.SMTPSenderRefused(code, resp, sender)

        for recipient in recipients:
            code, resp = smtp.rcpt(recipient)
            if code not in (250, 251):
                self._reset(smtp)
                raise smtplib.SMTPRecipientsRefused({recipient: (code, resp)})

        code, resp = smtp.data(message.serialize())
        if code != 250:
            raise smtplib.SMTPDataError(code, resp)

    @staticmethod
    def _reset(smtp: smtplib.SMTP) -> None:
        try:
            smtp.rset()
        except (smtplib.SMTPException, OSError) as e:
            logger.debug(f"RSET after refusal failed (non-critical): {e}")

    @staticmethod
    def _close(smtp: smtplib.SMTP) -> None:
        try:
            smtp.quit()
        except (smtplib.SMTPException, OSError) as e:
            logger.debug(f"Error closing SMTP connection (non-critical): {e}")
            smtp.close()

    @staticmethod
    def _is_transient_error(error: Exception) -> bool:
        """Determine if error is temporary (retryable).

        Args:
            error: Exception to analyze.

        Returns:
            True if error is likely transient and retry may succeed.
        """
        if isinstance(error, smtplib.SMTPResponseException):
            return 400 <= error.smtp_code < 500
        if isinstance(error, smtplib.SMTPRecipientsRefused) and error.recipients:
            return all(400 <= code < 500 for code, _ in error.recipients.values())
        if isinstance(error, UnicodeError):
            return False

        error_str = str(error).lower()
        transient_keywords = [
            "timeout",
            "timed out",
            "connection",
            "temporarily",
            "try again",
            "unavailable",
            "refused",
            "reset",
            "broken pipe",
        ]
        return any(keyword in error_str for keyword in transient_keywords)
