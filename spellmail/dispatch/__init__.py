"""Dispatch package — outgoing message assembly and delivery."""

from spellmail.dispatch.message import build_message, serialize
from spellmail.dispatch.transport import (
    DispatchResult,
    FileTransport,
    SendmailTransport,
    dispatch,
)

__all__ = [
    "build_message",
    "serialize",
    "dispatch",
    "DispatchResult",
    "FileTransport",
    "SendmailTransport",
]
