"""Service for time-decayed scoring and the persisted high score."""

from __future__ import annotations

import logging
import math

from trivia_app.constants.quiz_constants import (
    BASE_SCORE_PER_QUESTION,
    HIGH_SCORE_KEY,
    PENALTY_PER_SECOND,
)
from trivia_app.core.services.high_score_store import KeyValueStore

logger = logging.getLogger(__name__)


def compute_points(elapsed_seconds: float) -> int:
    """Points for a correct answer given after ``elapsed_seconds``.

    Every full second costs ``PENALTY_PER_SECOND`` points; the result never
    drops below zero.
    """
    whole_seconds = math.floor(max(elapsed_seconds, 0.0))
    return max(BASE_SCORE_PER_QUESTION - PENALTY_PER_SECOND * whole_seconds, 0)


def score_answer(selected: str, correct: str, elapsed_seconds: float) -> int:
    """Points awarded for ``selected``; both answers must already be decoded."""
    if selected != correct:
        return 0
    return compute_points(elapsed_seconds)


def parse_high_score(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring unreadable stored high score %r", raw)
        return 0
    return max(value, 0)


class HighScoreKeeper:
    """Reads and updates the high score kept in a :class:`KeyValueStore`."""

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY) -> None:
        self._store = store
        self._key = key
        self._high_score: int = parse_high_score(store.get(key))

    @property
    def high_score(self) -> int:
        return self._high_score

    def update(self, final_score: int) -> bool:
        """Persist ``final_score`` when it strictly beats the stored value."""
        if final_score <= self._high_score:
            return False
        logger.info("New high score %d (previous %d)", final_score, self._high_score)
        self._high_score = final_score
        self._store.set(self._key, str(final_score))
        return True
