"""HTML rendering for annotated answers.

Every piece of literal text goes through :func:`escape` exactly once, at the
point where it is placed into markup.  Callers pass raw text in, never
pre-escaped text.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Iterable, List

from spellmail.check.models import AnnotatedLine, AnnotatedWord
from spellmail.render.template import FOOTER, HEADER

LINE_BREAK = "<br>\n"
# Normalized answer lines are separate paragraphs; render the blank line too.
PARAGRAPH_BREAK = LINE_BREAK * 2

TOP_HEADING_LEVEL = 1
SUB_HEADING_LEVEL = 2


def escape(text: str) -> str:
    """Entity-escape ``< > & ' "`` in *text*."""
    return html.escape(text, quote=True)


def heading_level(index: int) -> int:
    """The first section gets a top-level heading, the rest one level down."""
    return TOP_HEADING_LEVEL if index == 0 else SUB_HEADING_LEVEL


def render_word(word: AnnotatedWord) -> str:
    text = escape(word.surface)
    if not word.flagged:
        return text
    if word.suggestions:
        title = escape(", ".join(word.suggestions))
        return f'<mark title="{title}">{text}</mark>'
    return f"<mark>{text}</mark>"


def render_line(line: AnnotatedLine) -> str:
    """Render one annotated line; words are joined by single spaces."""
    return " ".join(render_word(word) for word in line)


def render_answer(lines: Iterable[AnnotatedLine]) -> str:
    return PARAGRAPH_BREAK.join(render_line(line) for line in lines)


def render_verbatim(answer: str) -> str:
    """Render an answer that bypasses spell checking: escaped, never marked."""
    return escape(answer)


@dataclass(frozen=True)
class Section:
    heading_text: str
    heading_level: int
    body_html: str

    def to_html(self) -> str:
        tag = f"h{self.heading_level}"
        return (
            f"<section>\n<{tag}>{escape(self.heading_text)}</{tag}>\n"
            f"<p>{self.body_html}</p></section>\n"
        )


@dataclass
class Document:
    """Ordered sections plus the fixed page header and footer."""

    sections: List[Section] = field(default_factory=list)

    def add(self, question: str, body_html: str) -> Section:
        """Append a section for *question*, choosing its heading level."""
        section = Section(
            heading_text=question,
            heading_level=heading_level(len(self.sections)),
            body_html=body_html,
        )
        self.sections.append(section)
        return section

    def to_html(self) -> str:
        return HEADER + "".join(s.to_html() for s in self.sections) + FOOTER
