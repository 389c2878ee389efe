"""Run configuration: dictionary language, word lists and delivery settings.

The configuration is a TOML file::

    lang = "en_GB"

    [words]
    allow = ["Pyloto", "colour"]
    deny = ["alot"]

    [email]
    max_size_kb = 128
    return_path = "bounces@example.org"
    dry_run = true

    [email.to]
    name = "Reviewers"
    address = "review@example.org"

    [email.from]
    address = "forms@example.org"

Unknown keys are rejected at every level so a typo in the file fails the run
instead of being silently ignored.  The loaded :class:`Config` is frozen and
is passed explicitly to every stage that needs it.
"""

from __future__ import annotations

import logging
import tomllib
from email.utils import formataddr
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spellmail.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE_KB = 128


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)


class Address(_Strict):
    name: Optional[str] = None
    address: str

    def formatted(self) -> str:
        """Return the mailbox as ``Name <address>``, or the bare address."""
        return formataddr((self.name or "", self.address))


class EmailConfig(_Strict):
    max_size_kb: Optional[int] = Field(default=None, ge=0)
    to: Address
    sender: Address = Field(alias="from")
    return_path: str
    dry_run: bool

    @property
    def max_bytes(self) -> int:
        """Input cap in bytes; ``max_size_kb`` defaults to 128 KiB."""
        size_kb = DEFAULT_MAX_SIZE_KB if self.max_size_kb is None else self.max_size_kb
        return size_kb * 1024


class Words(_Strict):
    # Strict mode takes TOML arrays only as lists; Config exposes frozensets.
    allow: list[str] = []
    deny: list[str] = []


class Config(_Strict):
    lang: str
    words: Words = Words()
    email: EmailConfig

    @property
    def allow(self) -> frozenset[str]:
        return frozenset(self.words.allow)

    @property
    def deny(self) -> frozenset[str]:
        return frozenset(self.words.deny)


def parse_config(text: str, source: str = "<string>") -> Config:
    """Parse and validate TOML *text*.

    Raises:
        ConfigError: If *text* is not valid TOML or does not match the schema.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {source}") from exc

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}") from exc


def load_config(path: Path) -> Config:
    """Read and validate the configuration file at *path*.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {str(path)!r}") from exc

    config = parse_config(text, source=str(path))
    logger.debug(
        "Loaded config from %s: lang=%s allow=%d deny=%d dry_run=%s",
        path,
        config.lang,
        len(config.allow),
        len(config.deny),
        config.email.dry_run,
    )
    return config
