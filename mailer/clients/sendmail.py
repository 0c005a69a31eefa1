"""Local mail-transfer command transport.

Pipes a built message into a sendmail-compatible executable, which reads
the recipients from the To header itself (``-t``). UNIX only.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from mailer.core.exceptions import CommandTransportError
from mailer.core.logger import get_logger
from mailer.models.identity import Identity
from mailer.models.message import Message

logger = get_logger(__name__)


def _decode_output(output: bytes | str | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


class CommandTransport:
    """Sendmail delivery strategy.

    Attributes:
        path: Executable name or path.
        timeout: Seconds to wait for the command (None waits forever).
    """

    name = "command"

    def __init__(self, path: str = "sendmail", timeout: float | None = None) -> None:
        self.path = path
        self.timeout = timeout

    def build_args(self, identity: Identity) -> list[str]:
        """Command line: ``<path> -F <name> -f <address> -t``."""
        return [self.path, "-F", identity.name, "-f", identity.address, "-t"]

    def deliver(
        self, message: Message, recipients: Sequence[str], identity: Identity
    ) -> None:
        """Run the command with the message on stdin.

        Args:
            message: Built message, without a From header.
            recipients: Recipients, already present in the To header.
            identity: Sender identity, passed as ``-F``/``-f``.

        Raises:
            CommandTransportError: If the command cannot start, times out or
                exits non-zero. Carries the combined output.
        """
        args = self.build_args(identity)
        logger.debug(f"Running {self.path} for {len(recipients)} recipient(s)")

        try:
            result = subprocess.run(
                args,
                input=message.serialize(),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            output = _decode_output(e.output)
            logger.error(f"{self.path} timed out after {self.timeout}s")
            raise CommandTransportError(
                f"{self.path} timed out after {self.timeout}s",
                output=output,
            ) from e
        except OSError as e:
            logger.error(f"Failed to launch {self.path}: {e}")
            raise CommandTransportError(
                f"Failed to launch {self.path}: {e}",
                output=str(e),
            ) from e

        output = _decode_output(result.stdout)
        if result.returncode != 0:
            logger.error(f"{self.path} exited with status {result.returncode}")
            raise CommandTransportError(
                f"{self.path} exited with status {result.returncode}: {output.strip()}",
                output=output,
                returncode=result.returncode,
            )

        logger.debug(f"{self.path} accepted message from {identity.address}")
