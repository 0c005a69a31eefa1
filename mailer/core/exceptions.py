"""Custom exceptions for the mailer.

Defines specific exception types for configuration, message and delivery
failures so callers can react precisely to each one.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""


class MailerError(Exception):
    """Base exception for all mailer errors.

    Every error raised by ``Mailer.send`` derives from this class, so
    consumers can catch all delivery-related failures with a single clause.

    Example:
        try:
            mailer.send("Hello", "<p>Hi</p>", "user@example.com")
        except MailerError as e:
            logger.error(f"Mail delivery failed: {e}")
    """

    pass


class MailerConfigError(MailerError):
    """Exception raised for configuration errors.

    Indicates that required SMTP settings (username, password, host, port)
    are missing when a send needs them.

    Example:
        raise MailerConfigError("Missing SMTP credentials: password")
    """

    pass


class InvalidRecipientsError(MailerError, ValueError):
    """Exception raised when a send has no usable recipients."""

    pass


class InvalidMessageError(MailerError, ValueError):
    """Exception raised when a message cannot be built safely.

    Attributes:
        header (str, optional): Name of the offending header.
    """

    def __init__(self, message: str, header: str | None = None):
        """Initialize message error.

        Args:
            message: Error description.
            header: Optional name of the header that failed validation.
        """
        super().__init__(message)
        self.header = header


class SMTPTransportError(MailerError):
    """Exception raised for SMTP connection/delivery failures.

    Covers DNS and connect failures, authentication rejection, recipient
    rejection and errors during DATA transmission.

    Attributes:
        message (str): Description of the SMTP error.
        is_transient (bool): Whether the error looks temporary. The mailer
            never retries on its own; this is a hint for the caller.

    Example:
        raise SMTPTransportError(
            "Connection timeout to smtp.example.com:587",
            is_transient=True
        )
    """

    def __init__(self, message: str, is_transient: bool = False):
        """Initialize SMTP transport error.

        Args:
            message: Error description.
            is_transient: Whether error is temporary and retryable.
        """
        super().__init__(message)
        self.is_transient = is_transient


class CommandTransportError(MailerError):
    """Exception raised when the local mail-transfer command fails.

    Attributes:
        message (str): Description of the failure.
        output (str): Combined stdout/stderr of the command (may be empty).
        returncode (int, optional): Exit status, None if it never ran.

    Example:
        raise CommandTransportError(
            "sendmail exited with status 75",
            output="sendmail: fatal: queue file write error",
            returncode=75,
        )
    """

    def __init__(
        self,
        message: str,
        output: str = "",
        returncode: int | None = None,
    ):
        """Initialize command transport error.

        Args:
            message: Error description.
            output: Combined output captured from the command.
            returncode: Exit status of the command, if it ran.
        """
        super().__init__(message)
        self.output = output
        self.returncode = returncode
