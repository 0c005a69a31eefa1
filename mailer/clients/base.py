"""Delivery capability shared by the SMTP and command transports.

Author: Odiseo
Created: 2026-10-19
"""

from __future__ import annotations

from typing import Protocol, Sequence

from mailer.models.identity import Identity
from mailer.models.message import Message


class Transport(Protocol):
    """Something that can hand a built message to the next mail hop."""

    name: str

    def deliver(
        self, message: Message, recipients: Sequence[str], identity: Identity
    ) -> None:
        """Deliver ``message`` to ``recipients`` as ``identity``.

        Raises:
            MailerError: If the hop rejects or cannot take the message.
        """
        ...
