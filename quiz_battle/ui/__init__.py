"""Qt UI components for the quiz application."""

from .dialog_helpers import show_info
from .question_renderer import render_prompt_html
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "render_prompt_html",
    "show_info",
]
