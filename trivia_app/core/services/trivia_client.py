"""HTTP client for the Open Trivia Database category and question endpoints."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ValidationError
import requests

from trivia_app.constants.network_constants import (
    CATEGORY_ENDPOINT_URL,
    QUESTION_ENDPOINT_URL,
    QUESTION_TYPE,
    REQUEST_TIMEOUT_SECONDS,
)
from trivia_app.core.models import Category, Difficulty, Question

logger = logging.getLogger(__name__)

_RESPONSE_CODE_MESSAGES = {
    1: "The trivia database does not have enough questions for this selection.",
    2: "The trivia database rejected the request parameters.",
    3: "The trivia session token was not found.",
    4: "The trivia session token has run out of questions.",
    5: "Too many requests; wait a few seconds and try again.",
}


class TriviaApiError(Exception):
    """Raised when categories or questions cannot be retrieved."""


class CategoryPayload(BaseModel):
    id: int
    name: str


class CategoryListPayload(BaseModel):
    trivia_categories: list[CategoryPayload]


class QuestionPayload(BaseModel):
    question: str
    correct_answer: str
    incorrect_answers: list[str]
    category: str | None = None
    difficulty: str | None = None


class QuestionListPayload(BaseModel):
    response_code: int = 0
    results: list[QuestionPayload]


def build_question_params(
    amount: int,
    category: int | None = None,
    difficulty: Difficulty | None = None,
) -> dict[str, str]:
    """Query parameters for the question endpoint; unset filters are omitted."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValueError("amount must be a positive integer")
    params = {"amount": str(amount)}
    if category is not None:
        params["category"] = str(category)
    if difficulty is not None:
        params["difficulty"] = difficulty.value
    params["type"] = QUESTION_TYPE
    return params


class TriviaClient:
    """Synchronous client; callers decide which thread it runs on."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        category_url: str = CATEGORY_ENDPOINT_URL,
        question_url: str = QUESTION_ENDPOINT_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        self._category_url = category_url
        self._question_url = question_url
        self._timeout = timeout

    def fetch_categories(self) -> list[Category]:
        """Return every category in the order the API lists them."""
        data = self._get_json(self._category_url, params=None)
        try:
            payload = CategoryListPayload.model_validate(data)
        except ValidationError as exc:
            raise TriviaApiError(f"Unexpected category response: {exc}") from exc
        categories = [Category(id=item.id, name=item.name) for item in payload.trivia_categories]
        logger.info("Loaded %d categories", len(categories))
        return categories

    def fetch_questions(
        self,
        amount: int,
        category: int | None = None,
        difficulty: Difficulty | None = None,
    ) -> list[Question]:
        """Return up to ``amount`` multiple-choice questions."""
        params = build_question_params(amount, category, difficulty)
        data = self._get_json(self._question_url, params=params)
        try:
            payload = QuestionListPayload.model_validate(data)
        except ValidationError as exc:
            raise TriviaApiError(f"Unexpected question response: {exc}") from exc

        if payload.response_code != 0:
            message = _RESPONSE_CODE_MESSAGES.get(
                payload.response_code,
                f"The trivia database answered with code {payload.response_code}.",
            )
            raise TriviaApiError(message)

        try:
            questions = [
                Question(
                    text=item.question,
                    correct_answer=item.correct_answer,
                    incorrect_answers=tuple(item.incorrect_answers),
                    category=item.category,
                    difficulty=item.difficulty,
                )
                for item in payload.results
            ]
        except ValueError as exc:
            raise TriviaApiError(f"Unexpected question response: {exc}") from exc
        logger.info("Loaded %d questions", len(questions))
        return questions

    def _get_json(self, url: str, params: dict[str, str] | None) -> object:
        logger.info("GET %s params=%s", url, params)
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise TriviaApiError(str(exc)) from exc
        except ValueError as exc:
            raise TriviaApiError(f"Response was not valid JSON: {exc}") from exc
