"""Spell-check package — normalization, the Aspell oracle and word annotation."""

from spellmail.check.annotator import annotate, annotate_answer, is_bypassed
from spellmail.check.models import AnnotatedLine, AnnotatedWord, SpellResult
from spellmail.check.normalizer import normalize, squish
from spellmail.check.oracle import AspellOracle, SpellOracle, open_oracle

__all__ = [
    "normalize",
    "squish",
    "annotate",
    "annotate_answer",
    "is_bypassed",
    "open_oracle",
    "AspellOracle",
    "SpellOracle",
    "AnnotatedLine",
    "AnnotatedWord",
    "SpellResult",
]
