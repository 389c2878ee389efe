"""Runtime settings for spellmail.

Everything that depends on the host rather than on the run configuration is
resolved here: where the run configuration lives, which binaries to call and
where dry-run messages are written.  Values can be overridden via environment
variables or a `.env` file in the project root (loaded automatically when this
module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Run configuration
    # ------------------------------------------------------------------
    config_path: Path = field(
        default_factory=lambda: Path(os.environ.get("SPELLMAIL_CONFIG", "spellmail.toml"))
    )

    # ------------------------------------------------------------------
    # External programs
    # ------------------------------------------------------------------
    aspell_command: str = field(
        default_factory=lambda: os.environ.get("SPELLMAIL_ASPELL", "aspell")
    )
    sendmail_command: str = field(
        default_factory=lambda: os.environ.get("SPELLMAIL_SENDMAIL", "/usr/sbin/sendmail")
    )

    # ------------------------------------------------------------------
    # Dry-run output
    # ------------------------------------------------------------------
    outbox_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("SPELLMAIL_OUTBOX", "."))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("SPELLMAIL_LOG_LEVEL", "WARNING")
    )


# Module-level singleton — import this everywhere:
#   from spellmail.settings import settings
settings = Settings()
