"""Spelling oracle: a long-lived GNU Aspell process in pipe mode.

Aspell's ``-a`` mode speaks the Ispell pipe protocol:

* on start it prints a version banner beginning with ``@(#)``;
* ``@word`` accepts *word* for the rest of the session (no reply);
* ``^text`` checks *text* and replies with one line per word found, followed
  by a blank line.  The ``^`` prefix keeps a token that starts with a command
  character (``*``, ``@``, ``#`` …) from being read as a command.

Reply lines:

``*``                         correct
``+ ROOT``                    correct via affix removal
``-``                         correct as a compound
``& orig count offset: a, b`` misspelled, with suggestions
``# orig offset``             misspelled, no suggestions

The session is stateful, so a failed round trip is never retried: the
process is either gone or out of sync and the run has to stop.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import tempfile
from typing import IO, Iterable, Optional, Protocol

from spellmail.check.models import SpellResult
from spellmail.errors import OracleError

logger = logging.getLogger(__name__)

_BANNER_PREFIX = "@(#)"
_CLOSE_TIMEOUT = 5.0


class SpellOracle(Protocol):
    """What the annotator needs from a spell checker."""

    def seed(self, word: str) -> None: ...

    def lookup(self, word: str) -> SpellResult: ...

    def check(self, word: str) -> bool: ...

    def close(self) -> None: ...


def _parse_reply(line: str) -> SpellResult:
    """Turn one pipe-mode reply line into a :class:`SpellResult`."""
    if line in ("*", "-") or line.startswith("+ "):
        return SpellResult(misspelled=False)
    if line.startswith("& "):
        head, sep, tail = line.partition(": ")
        if not sep or len(head.split()) != 4:
            raise OracleError(f"Malformed reply from spell checker: {line!r}")
        suggestions = tuple(s.strip() for s in tail.split(", ") if s.strip())
        return SpellResult(misspelled=True, suggestions=suggestions)
    if line.startswith("# ") and len(line.split()) == 3:
        return SpellResult(misspelled=True)
    raise OracleError(f"Malformed reply from spell checker: {line!r}")


class AspellOracle:
    """Exclusive handle on one ``aspell -a`` process bound to *lang*.

    Not safe to share between threads; the pipeline owns exactly one.

    Usage::

        with AspellOracle("en_GB") as oracle:
            oracle.seed("Pyloto")
            oracle.check("teh")   # True
    """

    def __init__(self, lang: str, command: str = "aspell") -> None:
        self.lang = lang
        self._argv = [*shlex.split(command), "-a", f"--lang={lang}", "--encoding=utf-8"]
        self._proc: Optional[subprocess.Popen[str]] = None
        # A file, not a pipe: nobody drains stderr while the session runs.
        self._stderr: Optional[IO[str]] = None

    # ------------------------------------------------------------------
    # Process lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Launch the checker and consume its version banner.

        Raises:
            OracleError: If the process cannot be started or does not greet.
        """
        if self._proc is not None:
            return

        logger.debug("Starting spell checker: %s", " ".join(self._argv))
        self._stderr = tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace")
        try:
            self._proc = subprocess.Popen(
                self._argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=self._stderr,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            self._stderr.close()
            self._stderr = None
            raise OracleError(f"Cannot start spell checker {self._argv[0]!r}") from exc

        banner = self._proc.stdout.readline()
        if not banner.startswith(_BANNER_PREFIX):
            detail = self._stderr_tail() or banner.strip() or "no output"
            self.close()
            raise OracleError(f"Spell checker for {self.lang!r} did not start: {detail}")
        logger.debug("Spell checker ready: %s", banner.strip())

    def close(self) -> None:
        """Shut the checker down.  Safe to call more than once."""
        proc, self._proc = self._proc, None
        if proc is None:
            return
        try:
            if proc.stdin and not proc.stdin.closed:
                proc.stdin.close()
        except OSError:
            logger.debug("Spell checker stdin already closed")
        try:
            proc.wait(timeout=_CLOSE_TIMEOUT)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
        if proc.stdout is not None:
            proc.stdout.close()
        if self._stderr is not None:
            self._stderr.close()
            self._stderr = None

    def __enter__(self) -> "AspellOracle":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------

    def seed(self, word: str) -> None:
        """Accept *word* for the rest of the session."""
        if not word.strip():
            return
        self._send(f"@{word}")

    def lookup(self, word: str) -> SpellResult:
        """Check *word* and return the verdict with any suggestions.

        Raises:
            OracleError: If the process is gone or the reply is malformed.
        """
        self._send(f"^{word}")

        result = SpellResult(misspelled=False)
        while True:
            line = self._read_line()
            if not line:
                return result
            reply = _parse_reply(line)
            # A token can hold several words ("re-use"); the first bad one wins.
            if reply.misspelled and not result.misspelled:
                result = reply

    def check(self, word: str) -> bool:
        return self.lookup(word).misspelled

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_proc(self) -> subprocess.Popen[str]:
        if self._proc is None:
            raise OracleError("Spell checker is not running")
        return self._proc

    def _send(self, line: str) -> None:
        proc = self._require_proc()
        try:
            proc.stdin.write(line + "\n")
            proc.stdin.flush()
        except (BrokenPipeError, OSError, ValueError) as exc:
            raise OracleError("Spell checker stopped accepting input") from exc

    def _read_line(self) -> str:
        proc = self._require_proc()
        line = proc.stdout.readline()
        if not line:
            detail = self._stderr_tail()
            raise OracleError(
                "Spell checker exited unexpectedly" + (f": {detail}" if detail else "")
            )
        return line.rstrip("\r\n")

    def _stderr_tail(self) -> str:
        """Return whatever the process wrote to stderr, once it has exited."""
        proc = self._proc
        if proc is None or self._stderr is None:
            return ""
        try:
            proc.wait(timeout=_CLOSE_TIMEOUT)
        except subprocess.TimeoutExpired:
            return ""
        self._stderr.seek(0)
        return self._stderr.read().strip()


def open_oracle(lang: str, allow: Iterable[str] = (), command: str = "aspell") -> AspellOracle:
    """Start an :class:`AspellOracle` for *lang* and seed it with *allow*.

    Seeding happens before the oracle is handed out, so no word in *allow* is
    ever reported misspelled by the dictionary.
    """
    oracle = AspellOracle(lang, command=command)
    oracle.start()
    try:
        words = sorted(allow)
        for word in words:
            oracle.seed(word)
    except OracleError:
        oracle.close()
        raise
    logger.debug("Seeded spell checker with %d allowed words", len(words))
    return oracle
