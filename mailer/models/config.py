"""Mailer configuration model.

Defines the immutable Pydantic model a Mailer is built from.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MailerConfig(BaseModel):
    """Mailer configuration model.

    Holds SMTP connection parameters and the sender overrides. Construction
    never enforces completeness: use ``is_valid`` to check it, or let the
    SMTP path raise ``MailerConfigError`` when it needs a missing field.

    Attributes:
        host: SMTP server hostname, IP or address (may be empty).
        port: SMTP server port, 0 means unset.
        username: SMTP authentication username (``user@domain``).
        password: SMTP authentication password.
        from_addr: Address for the From header, overrides ``username``.
        from_alias: Display name for the From header. When empty, the part
            of ``username`` before ``@`` is used in SMTP mode.
        use_command: Send through the local sendmail command instead of
            SMTP. Host, port and password are ignored. UNIX only.
        timeout: Seconds to wait on the SMTP socket or the command (None
            waits forever).
        sendmail_path: Executable used in command mode.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="", description="SMTP server hostname")
    port: int = Field(default=0, ge=0, le=65535, description="SMTP server port")
    username: str = Field(default="", description="SMTP authentication username")
    password: str = Field(default="", description="SMTP authentication password")
    from_addr: str = Field(default="", description="From address override")
    from_alias: str = Field(default="", description="From display name override")
    use_command: bool = Field(
        default=False, description="Deliver through the local sendmail command"
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Transport timeout (seconds)"
    )
    sendmail_path: str = Field(
        default="sendmail", min_length=1, description="Mail-transfer executable"
    )

    @classmethod
    def default(cls) -> MailerConfig:
        """Return the empty default configuration."""
        return cls()

    def is_valid(self) -> bool:
        """Return True if the configuration can deliver mail.

        SMTP mode needs host, port, username and password; command mode
        needs nothing else.
        """
        return (
            bool(self.host)
            and self.port > 0
            and bool(self.username)
            and bool(self.password)
        ) or self.use_command
