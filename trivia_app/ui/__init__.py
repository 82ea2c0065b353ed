"""Qt UI components for the trivia application."""

from .dialog_helpers import show_error, show_info, show_warning
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "show_error",
    "show_info",
    "show_warning",
]
