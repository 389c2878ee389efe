"""Outgoing message assembly.

The reviewer gets the annotated document as the HTML body and the untouched
form body as a base64 ``text/html`` attachment, so the original can always be
checked against the flagged copy.
"""

from __future__ import annotations

from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Optional

from spellmail.config import EmailConfig
from spellmail.errors import DispatchError

SUBJECT_PREFIX = "[SPELL]: "
NO_SUBJECT = "(no subject)"
ATTACHMENT_NAME = "spellcheck.html"


def build_subject(original_subject: Optional[str]) -> str:
    return SUBJECT_PREFIX + (original_subject or NO_SUBJECT)


def build_message(
    rendered: str,
    original_body: str,
    original_subject: Optional[str],
    email_config: EmailConfig,
) -> EmailMessage:
    """Assemble the review message.

    Raises:
        DispatchError: If a header or part cannot be built (for example a
            subject containing a bare newline).
    """
    message = EmailMessage()
    try:
        message["From"] = email_config.sender.formatted()
        message["To"] = email_config.to.formatted()
        message["Subject"] = build_subject(original_subject)
        message["Return-Path"] = email_config.return_path
        message["Date"] = formatdate(localtime=True)
        message["Message-ID"] = make_msgid()

        message.set_content(rendered, subtype="html", charset="utf-8")
        message.add_attachment(
            original_body,
            subtype="html",
            charset="utf-8",
            cte="base64",
            filename=ATTACHMENT_NAME,
        )
    except (TypeError, ValueError) as exc:
        raise DispatchError("Cannot build review message") from exc
    return message


def serialize(message: EmailMessage) -> bytes:
    """Flatten *message* to wire bytes.

    Raises:
        DispatchError: If the message cannot be flattened.
    """
    try:
        return message.as_bytes()
    except (TypeError, ValueError, UnicodeError) as exc:
        raise DispatchError("Cannot serialize review message") from exc
