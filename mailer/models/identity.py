"""Sender identity model.

The identity is the display name and address a Mailer sends as. It is
derived from a MailerConfig whenever one is applied.

Author: Odiseo
Created: 2026-10-19
"""

from __future__ import annotations

from email.utils import formataddr

from pydantic import BaseModel, ConfigDict

from mailer.models.config import MailerConfig


class Identity(BaseModel):
    """Sender display name and address."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    address: str = ""

    @classmethod
    def from_config(cls, config: MailerConfig) -> Identity:
        """Derive the sender identity from a configuration.

        The address is ``from_addr`` if set, else ``username``. The display
        name is ``from_alias`` if set, else (SMTP mode only) the local part
        of ``username``, else empty.

        Args:
            config: Configuration to derive from.

        Returns:
            Derived identity.
        """
        address = config.from_addr or config.username

        if config.from_alias:
            name = config.from_alias
        elif not config.use_command and "@" in config.username:
            name = config.username.split("@", 1)[0]
        else:
            name = ""

        return cls(name=name, address=address)

    def formatted(self) -> str:
        """Return the RFC 5322 form, ``Name <address>`` or the bare address."""
        return formataddr((self.name, self.address))

    def __str__(self) -> str:
        return self.formatted()
