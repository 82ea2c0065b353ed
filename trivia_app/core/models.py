"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trivia_app.constants.quiz_constants import MAX_QUESTION_AMOUNT, MIN_QUESTION_AMOUNT


class Difficulty(Enum):
    """Difficulty levels understood by the question endpoint."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuizPhase(Enum):
    """Phases of a quiz session."""

    SETUP = auto()
    LOADING = auto()
    AWAITING_ANSWER = auto()
    SHOWING_FEEDBACK = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Category:
    """Selectable trivia category."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question as received from the API (entity-encoded)."""

    text: str
    correct_answer: str
    incorrect_answers: tuple[str, ...]
    category: str | None = None
    difficulty: str | None = None

    def __post_init__(self) -> None:
        if not self.incorrect_answers:
            raise ValueError("A question needs at least one incorrect answer.")


@dataclass(frozen=True, slots=True)
class AnswerChoice:
    """Decoded answer option shown for the current question."""

    text: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class QuizRequest:
    """Values chosen on the setup form."""

    amount: int
    category_id: int | None = None
    difficulty: Difficulty | None = None

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError("Number of questions must be a whole number.")
        if not MIN_QUESTION_AMOUNT <= self.amount <= MAX_QUESTION_AMOUNT:
            raise ValueError(
                f"Number of questions must be between {MIN_QUESTION_AMOUNT} and {MAX_QUESTION_AMOUNT}."
            )


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    """Result of submitting one answer."""

    selected_index: int
    correct_index: int
    is_correct: bool
    points: int
    correct_text: str
