"""Qt UI components for the quiz player."""

from .dialog_helpers import show_info
from .question_renderer import render_question
from .quiz_list_window import QuizListWindow
from .quiz_window import QuizWindow

__all__ = [
    "QuizListWindow",
    "QuizWindow",
    "render_question",
    "show_info",
]
