"""Render package — HTML output for the reviewer document."""

from spellmail.render.renderer import (
    Document,
    Section,
    escape,
    heading_level,
    render_answer,
    render_line,
    render_verbatim,
)

__all__ = [
    "Document",
    "Section",
    "escape",
    "heading_level",
    "render_answer",
    "render_line",
    "render_verbatim",
]
