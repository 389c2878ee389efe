"""Shared fixtures: a scripted in-memory oracle, a sample config and form mails."""

from __future__ import annotations

import pytest

from spellmail.check.models import SpellResult
from spellmail.config import Config, parse_config


class FakeOracle:
    """Reports every word in *misspelled* as bad; seeding makes a word good."""

    def __init__(self, misspelled=(), suggestions=None) -> None:
        self.misspelled = set(misspelled)
        self.suggestions = dict(suggestions or {})
        self.seeded: list[str] = []
        self.checked: list[str] = []
        self.closed = False

    def seed(self, word: str) -> None:
        self.seeded.append(word)
        self.misspelled.discard(word)

    def lookup(self, word: str) -> SpellResult:
        self.checked.append(word)
        if word in self.misspelled:
            return SpellResult(True, tuple(self.suggestions.get(word, ())))
        return SpellResult(False)

    def check(self, word: str) -> bool:
        return self.lookup(word).misspelled

    def close(self) -> None:
        self.closed = True


SAMPLE_CONFIG = """\
lang = "en_GB"

[words]
allow = ["Pyloto"]
deny = ["alot"]

[email]
return_path = "bounces@example.org"
dry_run = true

[email.to]
name = "Reviewers"
address = "review@example.org"

[email.from]
address = "forms@example.org"
"""

SAMPLE_BODY = """\
<html><body>
<table>
<tr><td>Name</td><td>Jonh &amp; Smiht</td></tr>
<tr><td>Date</td><td>3 0th Jan</td></tr>
<tr><td>Why do you want to join?</td><td>I beleive in teh cause.


Pyloto is <b>alot</b> of fun!</td></tr>
</table>
</body></html>
"""


def make_mail(body: str = SAMPLE_BODY, subject: str | None = "New application") -> bytes:
    headers = [
        "From: Form <forms@example.org>",
        "To: inbox@example.org",
    ]
    if subject is not None:
        headers.append(f"Subject: {subject}")
    headers += [
        "MIME-Version: 1.0",
        "Content-Type: text/html; charset=utf-8",
        "Content-Transfer-Encoding: 8bit",
    ]
    return ("\n".join(headers) + "\n\n" + body).encode("utf-8")


@pytest.fixture
def fake_oracle() -> FakeOracle:
    return FakeOracle(
        misspelled={"beleive", "teh", "Jonh", "Smiht", "0th", "Pyloto"},
        suggestions={"beleive": ["believe", "belief"], "teh": ["the"]},
    )


@pytest.fixture
def config() -> Config:
    return parse_config(SAMPLE_CONFIG)


@pytest.fixture
def oracle_factory(fake_oracle):
    """An oracle factory that seeds and hands out :func:`fake_oracle`."""

    def factory(lang, allow):
        for word in sorted(allow):
            fake_oracle.seed(word)
        return fake_oracle

    return factory
