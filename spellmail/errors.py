"""Error hierarchy for the spellmail pipeline.

Every stage raises its own subclass of :class:`SpellmailError`.  The ``stage``
attribute is what the CLI prints in front of the diagnostic, so a failed run
says where it failed without needing a traceback.  Nothing in the pipeline
recovers from these: a run either produces the whole document or nothing.
"""

from __future__ import annotations


class SpellmailError(Exception):
    """Base class for every fatal pipeline error."""

    stage = "spellmail"

    def __str__(self) -> str:
        message = super().__str__()
        cause = self.__cause__
        if cause is not None and str(cause) and str(cause) not in message:
            return f"{message}: {cause}"
        return message


class ConfigError(SpellmailError):
    """Config file missing, unreadable, not valid TOML, or failing validation."""

    stage = "config"


class InputError(SpellmailError):
    """Standard input could not be read."""

    stage = "input"


class MailParseError(SpellmailError):
    """The input is not a mail message with an extractable body."""

    stage = "mail"


class ExtractionError(SpellmailError):
    """A table row is missing its question or answer cell."""

    stage = "extract"


class OracleError(SpellmailError):
    """The spell checker failed to start, died, or answered with garbage."""

    stage = "oracle"


class RenderError(SpellmailError):
    """Reserved; rendering is pure and does not raise."""

    stage = "render"


class DispatchError(SpellmailError):
    """The outgoing message could not be built, written or sent."""

    stage = "dispatch"
