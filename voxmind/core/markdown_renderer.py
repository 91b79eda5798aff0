"""Markdown rendering for question text shown in Qt rich-text labels.

QLabel understands a subset of HTML, so question text is converted once per
question with markdown-it and handed to the label as rich text. Raw HTML in
the source is disabled; questions come from a shared remote store.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments suitable for rich-text widgets."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No question text.</em></p>"
        return self._markdown.render(sanitized)


# Shared instance; rendering only ever happens on the Qt GUI thread.
renderer = MarkdownRenderer()
