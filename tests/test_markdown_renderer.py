"""Tests for question text rendering."""

from __future__ import annotations

from voxmind.core.markdown_renderer import MarkdownRenderer


def test_markdown_emphasis_becomes_html():
    html = MarkdownRenderer().render_fragment("What is the capital of **France**?")

    assert "<strong>France</strong>" in html


def test_raw_html_is_escaped():
    html = MarkdownRenderer().render_fragment("<b>bold</b> claim")

    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_blank_question_gets_placeholder():
    assert MarkdownRenderer().render_fragment("   ") == "<p><em>No question text.</em></p>"
