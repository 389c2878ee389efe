"""Blank-line squishing for form answers.

The form mailer pads multi-line answers with runs of blank lines.  Dropping
them keeps the review document compact; every non-empty line survives in its
original order.
"""

from __future__ import annotations

PARAGRAPH_SEPARATOR = "\n\n"


def normalize(answer: str) -> list[str]:
    """Return the lines of *answer* that are not blank, in order."""
    return [line for line in answer.splitlines() if line.strip()]


def squish(answer: str) -> str:
    """Return the non-blank lines of *answer*, one blank line between each."""
    return PARAGRAPH_SEPARATOR.join(normalize(answer))
