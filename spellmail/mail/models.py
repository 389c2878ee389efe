"""Data models for the inbound side of the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InboundMail:
    """The parts of the submitted form mail the pipeline needs."""

    subject: Optional[str]
    body: str


@dataclass(frozen=True)
class Row:
    """One question/answer pair from the form table."""

    question: str
    answer: str
