"""Mailer configuration with Pydantic v2.

Loads SMTP, sender and logging settings from environment variables or a
.env file. Host applications that wire their own configuration can build a
MailerConfig directly instead.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mailer.core.exceptions import MailerConfigError
from mailer.core.logger import mask_secret
from mailer.models.config import MailerConfig


class MailerSettings(BaseSettings):
    """Environment-driven mailer settings.

    Attributes:
        MAILER_HOST: SMTP server hostname.
        MAILER_PORT: SMTP server port (0 = unset).
        MAILER_USERNAME: SMTP authentication username.
        MAILER_PASSWORD: SMTP authentication password.
        MAILER_FROM_ADDR: From address override.
        MAILER_FROM_ALIAS: From display name override.
        MAILER_USE_COMMAND: Deliver through the local sendmail command.
        MAILER_TIMEOUT: Transport timeout in seconds (unset = no timeout).
        MAILER_SENDMAIL_PATH: Mail-transfer executable for command mode.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # SMTP Configuration
    # ========================================================================
    MAILER_HOST: str = Field(default="", description="SMTP server hostname")
    MAILER_PORT: int = Field(
        default=0,
        ge=0,
        le=65535,
        description="SMTP server port",
    )
    MAILER_USERNAME: str = Field(
        default="",
        description="SMTP authentication username",
    )
    MAILER_PASSWORD: str = Field(
        default="",
        description="SMTP authentication password",
    )
    MAILER_TIMEOUT: float | None = Field(
        default=None,
        gt=0,
        le=300,
        description="Transport timeout in seconds",
    )

    # ========================================================================
    # Sender Configuration
    # ========================================================================
    MAILER_FROM_ADDR: str = Field(default="", description="From address override")
    MAILER_FROM_ALIAS: str = Field(
        default="",
        description="From display name override",
    )

    # ========================================================================
    # Command Mode
    # ========================================================================
    MAILER_USE_COMMAND: bool = Field(
        default=False,
        description="Send with the local sendmail command instead of SMTP",
    )
    MAILER_SENDMAIL_PATH: str = Field(
        default="sendmail",
        min_length=1,
        description="Mail-transfer executable",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )

    @field_validator("MAILER_HOST")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Strip surrounding whitespace from the SMTP host."""
        return v.strip()

    @field_validator("MAILER_PASSWORD")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Validate and clean SMTP password.

        Automatically removes spaces from SMTP password (Gmail app passwords
        are displayed with spaces for readability but must be used without spaces).

        Args:
            v: Password value to validate.

        Returns:
            Cleaned password (spaces removed).

        Examples:
            >>> # Gmail generates: "wrce fmkh xlvn jiht"
            >>> # Automatically converted to: "wrcefmkhxlvnjiht"
        """
        return v.replace(" ", "")

    def validate_smtp_config(self) -> None:
        """Validate complete SMTP configuration.

        Raises:
            MailerConfigError: If command mode is off and required SMTP
                settings are missing.
        """
        if self.MAILER_USE_COMMAND:
            return

        missing_fields = [
            name
            for name, present in (
                ("MAILER_HOST", bool(self.MAILER_HOST)),
                ("MAILER_PORT", self.MAILER_PORT > 0),
                ("MAILER_USERNAME", bool(self.MAILER_USERNAME.strip())),
                ("MAILER_PASSWORD", bool(self.MAILER_PASSWORD)),
            )
            if not present
        ]

        if missing_fields:
            raise MailerConfigError(
                f"Required SMTP settings missing: {', '.join(missing_fields)}. "
                f"Set these environment variables or enable MAILER_USE_COMMAND."
            )

    def describe(self) -> str:
        """Summarize the settings for logs, with the password masked.

        Returns:
            One-line summary.
        """
        mode = "command" if self.MAILER_USE_COMMAND else "smtp"
        return (
            f"mode={mode}, host={self.MAILER_HOST or '(not set)'}, "
            f"port={self.MAILER_PORT}, user={self.MAILER_USERNAME or '(not set)'}, "
            f"password={mask_secret(self.MAILER_PASSWORD)}, "
            f"from={self.MAILER_FROM_ALIAS!r} <{self.MAILER_FROM_ADDR}>, "
            f"sendmail={self.MAILER_SENDMAIL_PATH}"
        )

    def to_mailer_config(self) -> MailerConfig:
        """Get the settings as a MailerConfig.

        Returns:
            MailerConfig suitable for passing to Mailer.
        """
        return MailerConfig(
            host=self.MAILER_HOST,
            port=self.MAILER_PORT,
            username=self.MAILER_USERNAME,
            password=self.MAILER_PASSWORD,
            from_addr=self.MAILER_FROM_ADDR,
            from_alias=self.MAILER_FROM_ALIAS,
            use_command=self.MAILER_USE_COMMAND,
            timeout=self.MAILER_TIMEOUT,
            sendmail_path=self.MAILER_SENDMAIL_PATH,
        )
