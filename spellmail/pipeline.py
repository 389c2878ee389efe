"""The spellmail pipeline, end to end.

    raw mail → body → rows → annotated sections → document → message → delivery

Stages run strictly in order.  The whole document is rendered in memory
before anything is written or sent, so a failure at any stage leaves no
partial output behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Callable, Iterable, Optional, TextIO

from spellmail.check.annotator import annotate_answer, is_bypassed
from spellmail.check.oracle import SpellOracle, open_oracle
from spellmail.config import Config
from spellmail.dispatch import DispatchResult, build_message, dispatch
from spellmail.mail import Row, extract_rows, parse_html, parse_mail
from spellmail.render import Document, render_answer, render_verbatim

logger = logging.getLogger(__name__)

OracleFactory = Callable[[str, AbstractSet[str]], SpellOracle]


@dataclass(frozen=True)
class PipelineResult:
    rendered: str
    dispatch: Optional[DispatchResult] = None


def render_rows(
    rows: Iterable[Row],
    oracle: SpellOracle,
    allow: AbstractSet[str],
    deny: AbstractSet[str],
) -> Document:
    """Annotate and render every row into a :class:`Document`."""
    document = Document()
    for row in rows:
        if is_bypassed(row.question):
            body_html = render_verbatim(row.answer)
        else:
            body_html = render_answer(annotate_answer(row.answer, oracle, allow, deny))
        document.add(row.question, body_html)
    logger.info("Rendered %d sections", len(document.sections))
    return document


def annotate_document(body: str, oracle: SpellOracle, config: Config) -> Document:
    """Extract the form table from *body* and render the review document."""
    rows = extract_rows(parse_html(body))
    return render_rows(rows, oracle, config.allow, config.deny)


def run_pipeline(
    raw: bytes,
    config: Config,
    oracle_factory: Optional[OracleFactory] = None,
    outbox_dir: Path = Path("."),
    sendmail_command: str = "/usr/sbin/sendmail",
    aspell_command: str = "aspell",
    stdout: Optional[TextIO] = None,
    preview: bool = False,
) -> PipelineResult:
    """Run one submission through every stage.

    Args:
        raw: The mail as read from standard input (already size-capped).
        config: The loaded run configuration.
        oracle_factory: Builds a seeded oracle from ``(lang, allow)``.
            Defaults to an Aspell process started with *aspell_command*.
        outbox_dir: Where dry-run messages are written.
        sendmail_command: The sendmail binary used for live delivery.
        stdout: Where the dry-run document is echoed; defaults to
            ``sys.stdout``.
        preview: Stop after rendering; no message is built or delivered.

    Raises:
        SpellmailError: Any stage failure, as the matching subclass.
    """
    mail = parse_mail(raw)
    logger.info("Parsed mail: subject=%r, %d body characters", mail.subject, len(mail.body))

    if oracle_factory is None:
        def oracle_factory(lang: str, allow: AbstractSet[str]) -> SpellOracle:
            return open_oracle(lang, allow, command=aspell_command)

    oracle = oracle_factory(config.lang, config.allow)
    try:
        document = annotate_document(mail.body, oracle, config)
    finally:
        oracle.close()

    rendered = document.to_html()
    if preview:
        return PipelineResult(rendered=rendered)

    message = build_message(rendered, mail.body, mail.subject, config.email)
    result = dispatch(
        message,
        rendered,
        config.email,
        outbox_dir=outbox_dir,
        sendmail_command=sendmail_command,
        stdout=stdout,
    )
    return PipelineResult(rendered=rendered, dispatch=result)
