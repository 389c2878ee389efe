"""Tests for HTML escaping, line/section rendering and the page chrome."""

from __future__ import annotations

from spellmail.check.models import AnnotatedWord
from spellmail.render import (
    Document,
    Section,
    escape,
    heading_level,
    render_answer,
    render_line,
    render_verbatim,
)
from spellmail.render.template import FOOTER, HEADER


class TestEscape:
    def test_reserved_characters(self) -> None:
        assert escape("<a&b>") == "&lt;a&amp;b&gt;"
        assert escape("\"it's\"") == "&quot;it&#x27;s&quot;"

    def test_plain_text_unchanged(self) -> None:
        assert escape("plain words") == "plain words"

    def test_escaping_twice_re_escapes(self) -> None:
        # Callers escape exactly once; a second pass is visible.
        assert escape(escape("&")) == "&amp;amp;"


class TestRenderLine:
    def test_flagged_words_are_marked(self) -> None:
        line = [AnnotatedWord("I", False), AnnotatedWord("beleive.", True)]
        assert render_line(line) == "I <mark>beleive.</mark>"

    def test_suggestions_become_title(self) -> None:
        line = [AnnotatedWord("teh", True, ("the", "tea"))]
        assert render_line(line) == '<mark title="the, tea">teh</mark>'

    def test_words_are_escaped(self) -> None:
        line = [AnnotatedWord("<b>", False), AnnotatedWord("a&b", True)]
        assert render_line(line) == "&lt;b&gt; <mark>a&amp;b</mark>"

    def test_empty_line(self) -> None:
        assert render_line([]) == ""


class TestRenderAnswer:
    def test_lines_separated_by_blank_line_breaks(self) -> None:
        lines = [[AnnotatedWord("a", False)], [AnnotatedWord("b", False)]]
        assert render_answer(lines) == "a<br>\n<br>\nb"

    def test_single_line_has_no_break(self) -> None:
        assert render_answer([[AnnotatedWord("a", False)]]) == "a"


class TestRenderVerbatim:
    def test_escaped_never_marked(self) -> None:
        out = render_verbatim("3 0th Jan <x>")
        assert out == "3 0th Jan &lt;x&gt;"
        assert "<mark>" not in out


class TestSections:
    def test_heading_levels(self) -> None:
        assert heading_level(0) == 1
        assert heading_level(1) == heading_level(2) == 2

    def test_section_html_escapes_heading(self) -> None:
        section = Section(heading_text="Q & A?", heading_level=2, body_html="x")
        assert section.to_html() == "<section>\n<h2>Q &amp; A?</h2>\n<p>x</p></section>\n"

    def test_document_assigns_levels_in_order(self) -> None:
        doc = Document()
        doc.add("One", "1")
        doc.add("Two", "2")
        doc.add("Three", "3")
        levels = [s.heading_level for s in doc.sections]
        assert levels[0] != levels[1]
        assert levels[1] == levels[2]

    def test_document_wraps_in_chrome(self) -> None:
        doc = Document()
        doc.add("Q", "A")
        page = doc.to_html()
        assert page.startswith(HEADER)
        assert page.endswith(FOOTER)
        assert "<h1>Q</h1>" in page

    def test_empty_document_is_just_chrome(self) -> None:
        assert Document().to_html() == HEADER + FOOTER


class TestStylesheet:
    def test_print_friendly_rules(self) -> None:
        assert "serif" in HEADER
        assert "@media print" in HEADER
        assert "text-decoration: underline" in HEADER
        assert "@page" in HEADER and "margin: 2cm" in HEADER
        assert "background-color: purple" in HEADER
