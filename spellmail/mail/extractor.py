"""Form-table extraction: HTML body → ordered :class:`Row` records.

The form mailer renders each submitted field as a ``<tr>`` with the question
in the first ``<td>`` and the answer in the second.  That layout is assumed
fixed, so a row without both cells is fatal rather than skipped.
"""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup

from spellmail.errors import ExtractionError
from spellmail.mail.models import Row


def parse_html(body: str) -> BeautifulSoup:
    """Parse *body* into a tree queryable by tag name."""
    return BeautifulSoup(body, "html.parser")


def extract_rows(tree: BeautifulSoup) -> Iterator[Row]:
    """Yield one :class:`Row` per ``<tr>`` in document order.

    The first two ``<td>`` descendants are the question and the answer.  Cell
    text is every descendant text node concatenated with no separator, so
    ``<br>`` produces nothing and newlines in the source survive as-is.

    Raises:
        ExtractionError: If a row has fewer than two ``<td>`` cells.
    """
    for index, tr in enumerate(tree.find_all("tr")):
        cells = tr.find_all("td", limit=2)
        if len(cells) < 2:
            missing = "question" if not cells else "answer"
            raise ExtractionError(f"Row {index} has no {missing} cell")
        question, answer = cells
        yield Row(question=question.get_text(), answer=answer.get_text())
