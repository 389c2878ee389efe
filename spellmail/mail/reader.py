"""Bounded input reading and mail decoding: raw bytes → :class:`InboundMail`."""

from __future__ import annotations

import logging
from email import message_from_bytes, policy
from email.message import EmailMessage
from typing import BinaryIO

from spellmail.errors import InputError, MailParseError
from spellmail.mail.models import InboundMail

logger = logging.getLogger(__name__)


def read_input(stream: BinaryIO, max_bytes: int) -> bytes:
    """Read at most *max_bytes* from *stream*.

    Anything past the cap is dropped; that is a silent cap, not an error.

    Raises:
        InputError: If reading from *stream* fails.
    """
    try:
        data = stream.read(max_bytes + 1)
    except (OSError, ValueError) as exc:
        raise InputError("Failed to read input") from exc

    if data is None:
        raise InputError("Input stream is non-blocking and had no data")
    if len(data) > max_bytes:
        logger.warning("Input capped at %d bytes; the remainder is ignored", max_bytes)
        data = data[:max_bytes]
    logger.debug("Read %d bytes of input", len(data))
    return data


def parse_mail(raw: bytes) -> InboundMail:
    """Decode *raw* as a mail message and pull out its subject and body.

    Multipart messages use their HTML part, falling back to plain text.
    Transfer encodings and charsets are undone by :mod:`email`.

    Raises:
        MailParseError: If *raw* is empty or has no decodable text body.
    """
    if not raw.strip():
        raise MailParseError("Input is empty")

    try:
        message: EmailMessage = message_from_bytes(raw, policy=policy.default)
    except (TypeError, ValueError) as exc:
        raise MailParseError("Cannot parse mail message") from exc

    part = message.get_body(preferencelist=("html", "plain"))
    if part is None:
        raise MailParseError(
            f"No text body found in {message.get_content_type()} message"
        )

    try:
        body = part.get_content()
    except (LookupError, ValueError, KeyError) as exc:
        raise MailParseError("Cannot decode mail body") from exc

    if not isinstance(body, str):
        raise MailParseError(f"Mail body is not text ({part.get_content_type()})")

    subject = message["Subject"]
    return InboundMail(
        subject=str(subject) if subject is not None else None,
        body=body,
    )
