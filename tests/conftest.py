"""Pytest configuration and fixtures for mailer tests.

Provides reusable fixtures for configurations, a mocked SMTP connection and
a mocked sendmail process.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Generator
from unittest.mock import MagicMock

import pytest

# Set test environment before importing application modules
os.environ.setdefault("LOG_TO_FILE", "false")

from mailer.models.config import MailerConfig  # noqa: E402


# =============================================================================
# Configuration Fixtures
# =============================================================================
@pytest.fixture
def smtp_config() -> MailerConfig:
    """Create a complete SMTP-mode configuration."""
    return MailerConfig(
        host="smtp.test.com",
        port=587,
        username="alice@example.com",
        password="testpassword",
    )


@pytest.fixture
def command_config() -> MailerConfig:
    """Create a command-mode configuration with an explicit sender."""
    return MailerConfig(
        use_command=True,
        from_addr="support@example.com",
        from_alias="Support Team",
    )


# =============================================================================
# SMTP Fixtures
# =============================================================================
@pytest.fixture
def mock_smtp_connection() -> MagicMock:
    """Create a mock SMTP connection without STARTTLS support."""
    smtp = MagicMock()
    smtp.ehlo.return_value = (250, b"OK")
    smtp.has_extn.return_value = False
    smtp.starttls.return_value = (220, b"TLS ready")
    smtp.docmd.return_value = (235, b"Authentication successful")
    smtp.mail.return_value = (250, b"OK")
    smtp.rcpt.return_value = (250, b"OK")
    smtp.data.return_value = (250, b"Queued")
    smtp.rset.return_value = (250, b"OK")
    smtp.quit.return_value = (221, b"Bye")
    return smtp


# =============================================================================
# Command Fixtures
# =============================================================================
@pytest.fixture
def completed_process() -> subprocess.CompletedProcess:
    """Create a successful sendmail run."""
    return subprocess.CompletedProcess(args=["sendmail"], returncode=0, stdout=b"")


# =============================================================================
# Logging Fixtures
# =============================================================================
@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Restore root logger handlers and level after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
