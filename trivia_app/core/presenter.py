"""Text formatting and answer-choice preparation shared by every view.

Everything here is pure: the Qt window and the test doubles both render the
strings produced by these helpers, so the wording lives in one place.

All API text arrives HTML-entity-encoded. It is decoded before display and
before any comparison used to decide correctness.
"""

from __future__ import annotations

import html
import random
from typing import Protocol, Sequence

from trivia_app.core.models import AnswerChoice, Category, Question

QUIZ_FINISHED_TEXT = "Quiz Finished!"


def decode_html(text: str) -> str:
    """Decode HTML entities (named and numeric) into plain text."""
    return html.unescape(text)


def is_same_answer(left: str, right: str) -> bool:
    return decode_html(left) == decode_html(right)


def build_choices(question: Question, rng: random.Random | None = None) -> list[AnswerChoice]:
    """Return the decoded answers for ``question`` in shuffled order."""
    raw_answers = [*question.incorrect_answers, question.correct_answer]
    (rng or random).shuffle(raw_answers)

    choices: list[AnswerChoice] = []
    correct_assigned = False
    for raw in raw_answers:
        # An incorrect answer may decode to the same text as the correct one;
        # only the first match is flagged.
        is_correct = not correct_assigned and is_same_answer(raw, question.correct_answer)
        correct_assigned = correct_assigned or is_correct
        choices.append(AnswerChoice(text=decode_html(raw), is_correct=is_correct))
    return choices


def correct_choice_index(choices: Sequence[AnswerChoice]) -> int:
    for index, choice in enumerate(choices):
        if choice.is_correct:
            return index
    raise ValueError("No correct choice among the rendered answers.")


def format_progress(current_index: int, total: int) -> str:
    return f"Question {current_index + 1}/{total}"


def format_correct_feedback(points: int) -> str:
    return f"Correct! + {points} Points"


def format_wrong_feedback(correct_answer: str) -> str:
    return f"Wrong! The correct answer was: {decode_html(correct_answer)}"


def format_current_score(score: int) -> str:
    return f"Current Score: {score}"


def format_high_score(score: int) -> str:
    return f"High Score: {score}"


def format_final_score(score: int) -> str:
    return f"Your final score is {score}"


class QuizView(Protocol):
    """Rendering surface driven by :class:`~trivia_app.core.quiz_controller.QuizController`."""

    def show_setup(self) -> None: ...

    def show_quiz(self) -> None: ...

    def show_categories_loading(self) -> None: ...

    def populate_categories(self, categories: Sequence[Category]) -> None: ...

    def show_categories_error(self, message: str) -> None: ...

    def render_question(self, text: str, choices: Sequence[AnswerChoice]) -> None: ...

    def render_progress(self, text: str) -> None: ...

    def render_feedback(
        self,
        text: str,
        selected_index: int,
        correct_index: int,
        is_correct: bool,
    ) -> None: ...

    def clear_feedback(self) -> None: ...

    def render_current_score(self, text: str) -> None: ...

    def render_high_score(self, text: str) -> None: ...

    def render_results(self, title: str, final_score_text: str) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...
