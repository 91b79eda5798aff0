"""Question rendering utilities for the quiz window."""

from __future__ import annotations

from voxmind.core.markdown_renderer import renderer


def render_question(question_text: str) -> str:
    """Render question text (Markdown) as rich text for a QLabel.

    Args:
        question_text: The question text as stored remotely

    Returns:
        HTML fragment ready for ``QLabel.setText`` with ``Qt.RichText``
    """
    return renderer.render_fragment(question_text)
