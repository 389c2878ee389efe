"""spellmail CLI — spell-check a form submission mail and forward it.

Usage:
    spellmail [CONFIG] < submission.eml
    python cli/main.py --help

The mail is read from standard input.  In dry-run mode the annotated document
is printed to stdout and the message is saved as ``<uuid>.eml``; otherwise the
message goes out through sendmail.  Status and diagnostics go to stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from spellmail.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from spellmail.config import load_config
from spellmail.errors import SpellmailError
from spellmail.mail import read_input
from spellmail.pipeline import run_pipeline
from spellmail.settings import settings

app = typer.Typer(
    name="spellmail",
    help="Flag likely misspellings in a form submission mail and forward it for review.",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    config_path: Optional[Path] = typer.Argument(
        None,
        help="Path to the TOML config file. Defaults to $SPELLMAIL_CONFIG or ./spellmail.toml.",
        show_default=False,
    ),
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Logging level: DEBUG | INFO | WARNING | ERROR.",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        help="Print the annotated document and stop; nothing is saved or sent.",
    ),
) -> None:
    """Read a form submission mail from stdin, annotate it and dispatch it."""
    _configure_logging(log_level)
    path = config_path or settings.config_path

    try:
        config = load_config(path)
        raw = read_input(typer.get_binary_stream("stdin"), config.email.max_bytes)
        result = run_pipeline(
            raw,
            config,
            outbox_dir=settings.outbox_dir,
            sendmail_command=settings.sendmail_command,
            aspell_command=settings.aspell_command,
            preview=preview,
        )
    except SpellmailError as exc:
        typer.echo(f"[{exc.stage}] {exc}", err=True)
        raise typer.Exit(code=1)

    if preview:
        typer.echo(result.rendered, nl=False)
        return

    outcome = result.dispatch
    if outcome is not None and outcome.location is not None:
        typer.echo(f"[dispatch] Dry run: message saved to {outcome.location}", err=True)
    else:
        typer.echo(f"[dispatch] Sent to {config.email.to.address}", err=True)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
