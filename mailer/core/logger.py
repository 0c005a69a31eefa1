"""Centralized logging configuration for the mailer.

Provides a logger factory plus an opt-in setup routine with file rotation
and consistent formatting. The library itself only calls ``get_logger``;
host applications decide whether to call ``setup_logging``.

Features:
    - Dual output: Console (stdout) + File handlers
    - Automatic log file rotation (10MB, 5 backups)
    - Separate error log
    - Configurable log levels per module

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from mailer.config.settings import MailerSettings

# Global configuration
_ROOT_LOGGER: logging.Logger | None = None
_LOG_DIR = Path.cwd() / "logs"
_LOG_FORMAT_DETAILED = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)
_LOG_FORMAT_SIMPLE = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level logger configuration
_MODULE_LEVELS = {
    "mailer.clients": logging.DEBUG,
    "mailer.mailer": logging.DEBUG,
    "mailer.config": logging.INFO,
}


def mask_secret(secret: str) -> str:
    """Mask a secret for display, showing only first and last char.

    Args:
        secret: Password or token to mask.

    Returns:
        Masked string.
    """
    if not secret:
        return "(not set)"
    if len(secret) <= 2:
        return "***"
    return f"{secret[0]}{'*' * (len(secret) - 2)}{secret[-1]}"


def setup_logging(
    log_dir: Path | str | None = None,
    log_level: str = "INFO",
    file_level: str = "DEBUG",
    console_level: str = "INFO",
    enable_file: bool = True,
) -> None:
    """Configure root logger with file and console handlers.

    Should be called once at application startup by the host application.

    Args:
        log_dir: Directory for log files. Defaults to ./logs.
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_level: File handler level (usually DEBUG for comprehensive logging).
        console_level: Console handler level (usually INFO to reduce noise).
        enable_file: Whether to write logs to files.

    Example:
        setup_logging(
            log_level="INFO",
            console_level="WARNING",  # Only show warnings and errors on console
            enable_file=False,
        )
    """
    global _ROOT_LOGGER, _LOG_DIR

    _LOG_DIR = Path(log_dir) if log_dir else Path.cwd() / "logs"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT_SIMPLE, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if enable_file:
        _LOG_DIR.mkdir(parents=True, exist_ok=True)

        # RotatingFileHandler: 10MB per file, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mailer.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        file_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mailer.error.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(error_handler)

    for module_name, level in _MODULE_LEVELS.items():
        logging.getLogger(module_name).setLevel(level)

    _ROOT_LOGGER = root_logger


def configure_logging(settings: "MailerSettings") -> None:
    """Apply the logging fields of MailerSettings.

    Args:
        settings: Loaded MailerSettings instance.
    """
    setup_logging(
        log_dir=settings.LOG_DIR,
        log_level=settings.LOG_LEVEL,
        console_level=settings.LOG_LEVEL,
        enable_file=settings.LOG_TO_FILE,
    )


def get_logger(name: str, log_level: str | None = None) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__ of calling module).
        log_level: Optional override for logger level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Logger instance ready for use.

    Example:
        from mailer.core.logger import get_logger

        logger = get_logger(__name__)
        logger.info("Sending mail")
    """
    logger = logging.getLogger(name)

    if log_level:
        logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


def get_logs_directory() -> Path:
    """Get the logs directory path used by the last setup_logging call."""
    return _LOG_DIR


def log_context(
    operation: str,
    recipients: Iterable[str] | None = None,
    **kwargs,
) -> str:
    """Format a log context string with metadata.

    Args:
        operation: Operation name (e.g., "smtp", "command").
        recipients: Recipient addresses, if applicable.
        **kwargs: Additional context key-value pairs.

    Returns:
        Formatted context string for logging.

    Example:
        msg = log_context("smtp", ["a@x.com", "b@y.com"], target="mx:25")
        logger.info(f"Sending: {msg}")
        # Output: Sending: smtp | →a@x.com,b@y.com (target=mx:25)
    """
    context = operation

    if recipients:
        context = f"{context} | →{','.join(recipients)}"

    if kwargs:
        extra = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        context = f"{context} ({extra})"

    return context
