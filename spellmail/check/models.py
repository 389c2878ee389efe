"""Value types shared by the oracle, the annotator and the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SpellResult:
    """The oracle's verdict on a single token."""

    misspelled: bool
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnnotatedWord:
    """A word as it appeared in the answer, plus the highlight decision."""

    surface: str
    flagged: bool
    suggestions: tuple[str, ...] = ()


AnnotatedLine = List[AnnotatedWord]
