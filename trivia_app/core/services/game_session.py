"""Service holding the state of one quiz session."""

from __future__ import annotations

import random
import time
from typing import Callable

from trivia_app.core.models import AnswerChoice, Question
from trivia_app.core.presenter import build_choices


class GameSession:
    """Question list, position, running score and the current question's choices."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._questions: list[Question] = []
        self._current_index: int = 0
        self._score: int = 0
        self._question_started_at: float | None = None
        self._generation: int = 0

        # Shuffle state
        self._shuffle_rng = random.Random()
        self._current_choices: list[AnswerChoice] = []

    def new_generation(self) -> int:
        """Invalidate everything issued for earlier sessions."""
        self._generation += 1
        self._questions = []
        self._current_index = 0
        self._score = 0
        self._question_started_at = None
        self._current_choices = []
        return self._generation

    @property
    def generation(self) -> int:
        return self._generation

    def load_questions(self, questions: list[Question]) -> None:
        self._questions = list(questions)
        self._current_index = 0
        self._score = 0
        self._question_started_at = None
        self._current_choices = []

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_current_index(self) -> int:
        return self._current_index

    def get_score(self) -> int:
        return self._score

    def is_exhausted(self) -> bool:
        return self._current_index >= len(self._questions)

    def get_current_question(self) -> Question | None:
        if self.is_exhausted():
            return None
        return self._questions[self._current_index]

    def start_question(self) -> list[AnswerChoice]:
        """Shuffle the current question's answers for display."""
        question = self.get_current_question()
        if question is None:
            raise IndexError("No question left to start.")
        self._current_choices = build_choices(question, self._shuffle_rng)
        self._question_started_at = None
        return list(self._current_choices)

    def start_clock(self) -> None:
        """Mark the instant the current question became visible."""
        self._question_started_at = self._clock()

    def get_current_choices(self) -> list[AnswerChoice]:
        return list(self._current_choices)

    def elapsed_seconds(self) -> float:
        if self._question_started_at is None:
            return 0.0
        return max(self._clock() - self._question_started_at, 0.0)

    def add_points(self, points: int) -> int:
        if points < 0:
            raise ValueError("Points must not be negative.")
        self._score += points
        return self._score

    def advance(self) -> None:
        if self.is_exhausted():
            raise IndexError("Session already finished.")
        self._current_index += 1
        self._question_started_at = None
        self._current_choices = []

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)
