"""MIME-lite message model.

A Message is an ordered header block plus a base64-encoded HTML body. It is
built per send and serialized to the exact bytes handed to a transport.

Author: Odiseo
Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from email.header import Header
from typing import Sequence

from mailer.core.exceptions import InvalidMessageError
from mailer.models.identity import Identity

CRLF = "\r\n"

# Base64 output is folded to stay well under the SMTP line-length limit
BODY_LINE_LENGTH = 76

MIME_HEADERS: tuple[tuple[str, str], ...] = (
    ("MIME-Version", "1.0"),
    ("Content-Type", 'text/html; charset="utf-8"'),
    ("Content-Transfer-Encoding", "base64"),
)


def encode_body(body: str) -> str:
    """Base64-encode a UTF-8 body, folded into CRLF-separated lines.

    Args:
        body: Raw body text (HTML or plain).

    Returns:
        Base64 payload.
    """
    encoded = base64.b64encode(body.encode("utf-8")).decode("ascii")
    return CRLF.join(
        encoded[i : i + BODY_LINE_LENGTH]
        for i in range(0, len(encoded), BODY_LINE_LENGTH)
    )


def _encode_header_value(name: str, value: str) -> str:
    if "\r" in value or "\n" in value:
        raise InvalidMessageError(
            f"Header {name} must not contain line breaks", header=name
        )
    if value.isascii():
        return value
    return Header(value, "utf-8", header_name=name).encode(linesep=CRLF)


@dataclass
class Message:
    """Ordered headers plus an encoded body.

    Attributes:
        headers: (name, value) pairs in serialization order.
        body: Base64 payload, already encoded.
    """

    headers: list[tuple[str, str]] = field(default_factory=list)
    body: str = ""

    def get(self, name: str) -> str | None:
        """Return the first value of a header, matched case-insensitively."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def serialize(self) -> bytes:
        """Render headers, a blank line and the body as wire bytes."""
        head = "".join(f"{name}: {value}{CRLF}" for name, value in self.headers)
        return (head + CRLF + self.body).encode("ascii")


def build_message(
    subject: str,
    body: str,
    recipients: Sequence[str],
    sender: Identity | None = None,
) -> Message:
    """Build the message for one send.

    Headers are emitted in a fixed order: From (only when ``sender`` is
    given), To, Subject, then the MIME headers.

    Args:
        subject: Subject line.
        body: Raw body text, sent as text/html.
        recipients: Addresses for the To header, joined by commas.
        sender: Identity for the From header; omit it for command mode,
            where the sender travels as command arguments.

    Returns:
        Built message.

    Raises:
        InvalidMessageError: If a header value contains CR or LF.
    """
    headers: list[tuple[str, str]] = []
    if sender is not None:
        headers.append(("From", _encode_header_value("From", sender.formatted())))
    headers.append(("To", _encode_header_value("To", ",".join(recipients))))
    headers.append(("Subject", _encode_header_value("Subject", subject)))
    headers.extend(MIME_HEADERS)

    return Message(headers=headers, body=encode_body(body))
