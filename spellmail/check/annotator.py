"""Per-word highlight decisions for form answers.

Decision rule for a token, after trimming ASCII punctuation from both ends:

    flagged = trimmed in deny or (oracle says misspelled and trimmed not in allow)

``deny`` always wins, even for words the dictionary accepts.  ``allow`` words
are seeded into the oracle before the run (see :func:`open_oracle`), so the
``not in allow`` guard only matters for oracles that ignore seeding.

Trimming is ASCII-only: curly quotes and dashes stay attached to the word and
go to the oracle as-is.
"""

from __future__ import annotations

import string
from typing import AbstractSet

from spellmail.check.models import AnnotatedLine, AnnotatedWord
from spellmail.check.normalizer import normalize
from spellmail.check.oracle import SpellOracle

# Answers to these questions are copied verbatim, never spell-checked.
BYPASS_QUESTIONS = frozenset({"Name", "Date"})


def is_bypassed(question: str) -> bool:
    return question in BYPASS_QUESTIONS


def trim_punctuation(token: str) -> str:
    return token.strip(string.punctuation)


def annotate_word(
    token: str,
    oracle: SpellOracle,
    allow: AbstractSet[str],
    deny: AbstractSet[str],
) -> AnnotatedWord:
    trimmed = trim_punctuation(token)
    if not trimmed:
        return AnnotatedWord(surface=token, flagged=False)

    if trimmed in deny:
        return AnnotatedWord(surface=token, flagged=True)

    result = oracle.lookup(trimmed)
    if result.misspelled and trimmed not in allow:
        return AnnotatedWord(surface=token, flagged=True, suggestions=result.suggestions)
    return AnnotatedWord(surface=token, flagged=False)


def annotate(
    line: str,
    oracle: SpellOracle,
    allow: AbstractSet[str] = frozenset(),
    deny: AbstractSet[str] = frozenset(),
) -> AnnotatedLine:
    """Annotate every whitespace-delimited token of *line*, in order.

    Runs of whitespace collapse; the surface form of each token (punctuation,
    casing) is kept for rendering.
    """
    return [annotate_word(token, oracle, allow, deny) for token in line.split()]


def annotate_answer(
    answer: str,
    oracle: SpellOracle,
    allow: AbstractSet[str] = frozenset(),
    deny: AbstractSet[str] = frozenset(),
) -> list[AnnotatedLine]:
    """Squish blank lines out of *answer* and annotate what is left."""
    return [annotate(line, oracle, allow, deny) for line in normalize(answer)]
