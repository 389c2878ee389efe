"""Delivery: write the message to disk for review, or hand it to sendmail."""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
import uuid
from dataclasses import dataclass
from email.message import EmailMessage
from pathlib import Path
from typing import Optional, Sequence, TextIO

from spellmail.config import EmailConfig
from spellmail.dispatch.message import serialize
from spellmail.errors import DispatchError

logger = logging.getLogger(__name__)

DRY_RUN = "dry-run"
LIVE = "live"


@dataclass(frozen=True)
class DispatchResult:
    mode: str
    location: Optional[Path] = None


class FileTransport:
    """Writes each message to ``<directory>/<uuid>.eml``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def send(self, message: EmailMessage) -> Path:
        data = serialize(message)
        path = self.directory / f"{uuid.uuid4()}.eml"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise DispatchError(f"Cannot write message to {str(path)!r}") from exc
        logger.info("Wrote message to %s", path)
        return path


class SendmailTransport:
    """Pipes each message to a sendmail-compatible binary."""

    def __init__(self, command: str = "/usr/sbin/sendmail") -> None:
        self.command = command

    def send(self, message: EmailMessage, envelope_from: str, recipients: Sequence[str]) -> None:
        argv = [*shlex.split(self.command), "-i", "-f", envelope_from, "--", *recipients]
        data = serialize(message)
        logger.debug("Running %s", " ".join(argv))
        try:
            completed = subprocess.run(argv, input=data, capture_output=True, check=False)
        except OSError as exc:
            raise DispatchError(f"Cannot run {argv[0]!r}") from exc

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise DispatchError(
                f"{argv[0]} exited with status {completed.returncode}"
                + (f": {stderr}" if stderr else "")
            )
        logger.info("Sent message to %s", ", ".join(recipients))


def dispatch(
    message: EmailMessage,
    rendered: str,
    email_config: EmailConfig,
    outbox_dir: Path = Path("."),
    sendmail_command: str = "/usr/sbin/sendmail",
    stdout: Optional[TextIO] = None,
) -> DispatchResult:
    """Deliver *message* according to ``email_config.dry_run``.

    Dry run: the message goes to *outbox_dir* and *rendered* is written to
    *stdout* for inspection; nothing is sent.  Live: the message is piped to
    sendmail and nothing is written locally.

    Raises:
        DispatchError: If writing or sending fails.
    """
    if email_config.dry_run:
        path = FileTransport(outbox_dir).send(message)
        out = stdout if stdout is not None else sys.stdout
        out.write(rendered)
        out.flush()
        return DispatchResult(mode=DRY_RUN, location=path)

    SendmailTransport(sendmail_command).send(
        message,
        envelope_from=email_config.return_path,
        recipients=[email_config.to.address],
    )
    return DispatchResult(mode=LIVE)
