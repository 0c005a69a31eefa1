"""Unit tests for logging helpers.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from mailer.config.settings import MailerSettings
from mailer.core.logger import (
    configure_logging,
    get_logger,
    get_logs_directory,
    log_context,
    mask_secret,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self, restore_root_logger, tmp_path):
        """Test file handlers are skipped when disabled."""
        setup_logging(log_dir=tmp_path / "logs", enable_file=False)

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert not (tmp_path / "logs").exists()

    def test_file_handlers(self, restore_root_logger, tmp_path):
        """Test rotating main and error log files are installed."""
        setup_logging(log_dir=tmp_path, log_level="DEBUG", enable_file=True)

        rotating = [
            h for h in restore_root_logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        names = sorted(Path(h.baseFilename).name for h in rotating)
        assert names == ["mailer.error.log", "mailer.log"]
        assert get_logs_directory() == tmp_path
        assert restore_root_logger.level == logging.DEBUG

    def test_setup_is_idempotent(self, restore_root_logger):
        """Test calling setup twice does not duplicate handlers."""
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(restore_root_logger.handlers) == 1

    def test_configure_from_settings(self, restore_root_logger, tmp_path):
        """Test MailerSettings logging fields are applied."""
        settings = MailerSettings(
            _env_file=None, LOG_LEVEL="WARNING", LOG_TO_FILE=False, LOG_DIR=str(tmp_path)
        )

        configure_logging(settings)

        assert restore_root_logger.level == logging.WARNING
        assert restore_root_logger.handlers[0].level == logging.WARNING


class TestHelpers:
    """Tests for logger helpers."""

    def test_get_logger_level_override(self):
        """Test an explicit level is applied to the logger."""
        logger = get_logger("mailer.tests.override", log_level="error")

        assert logger.level == logging.ERROR

    @pytest.mark.parametrize("secret,expected", [
        ("", "(not set)"),
        ("ab", "***"),
        ("secret", "s****t"),
    ])
    def test_mask_secret(self, secret, expected):
        """Test secrets are masked for display."""
        assert mask_secret(secret) == expected

    def test_log_context(self):
        """Test context formatting with recipients and extras."""
        context = log_context("smtp", ["a@x.com", "b@y.com"], target="mx:25")

        assert context == "smtp | →a@x.com,b@y.com (target=mx:25)"

    def test_log_context_operation_only(self):
        """Test context formatting with just an operation."""
        assert log_context("command") == "command"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
