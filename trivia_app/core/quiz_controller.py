"""Session controller: the quiz state machine shared by every front end."""

from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Any, Callable

from trivia_app.constants.quiz_constants import FEEDBACK_DELAY_MS
from trivia_app.core.models import AnswerOutcome, Category, Question, QuizPhase, QuizRequest
from trivia_app.core.presenter import (
    QUIZ_FINISHED_TEXT,
    QuizView,
    correct_choice_index,
    decode_html,
    format_correct_feedback,
    format_current_score,
    format_final_score,
    format_high_score,
    format_progress,
    format_wrong_feedback,
)
from trivia_app.core.runtime import Scheduler, TaskRunner
from trivia_app.core.services.game_session import GameSession
from trivia_app.core.services.scorer import HighScoreKeeper, score_answer
from trivia_app.core.services.trivia_client import TriviaClient

logger = logging.getLogger(__name__)

QUESTION_FETCH_FAILED_TITLE = "Could not load questions"


class QuizEvent(Enum):
    """Messages that drive the controller."""

    CATEGORIES_REQUESTED = auto()
    CATEGORIES_LOADED = auto()
    CATEGORIES_FAILED = auto()
    START_REQUESTED = auto()
    QUESTIONS_LOADED = auto()
    QUESTIONS_FAILED = auto()
    ANSWER_SUBMITTED = auto()
    FEEDBACK_ELAPSED = auto()
    RESTART_REQUESTED = auto()


_ANY_PHASE = frozenset(QuizPhase)

# Phases in which each event is accepted; anything else is ignored.
_ACCEPTED_PHASES: dict[QuizEvent, frozenset[QuizPhase]] = {
    QuizEvent.CATEGORIES_REQUESTED: _ANY_PHASE,
    QuizEvent.CATEGORIES_LOADED: _ANY_PHASE,
    QuizEvent.CATEGORIES_FAILED: _ANY_PHASE,
    QuizEvent.START_REQUESTED: frozenset({QuizPhase.SETUP}),
    QuizEvent.QUESTIONS_LOADED: frozenset({QuizPhase.LOADING}),
    QuizEvent.QUESTIONS_FAILED: frozenset({QuizPhase.LOADING}),
    QuizEvent.ANSWER_SUBMITTED: frozenset({QuizPhase.AWAITING_ANSWER}),
    QuizEvent.FEEDBACK_ELAPSED: frozenset({QuizPhase.SHOWING_FEEDBACK}),
    QuizEvent.RESTART_REQUESTED: frozenset({QuizPhase.LOADING, QuizPhase.FINISHED}),
}


class QuizController:
    """Owns a :class:`GameSession` and moves it through setup, play and results.

    All methods must be called from the event loop thread. Network work goes
    through the injected :class:`TaskRunner`; the post-answer pause goes
    through the :class:`Scheduler`. Completions remember the session
    generation they were issued for and are dropped once a newer session
    exists.
    """

    def __init__(
        self,
        client: TriviaClient,
        view: QuizView,
        runner: TaskRunner,
        scheduler: Scheduler,
        high_scores: HighScoreKeeper,
        session: GameSession | None = None,
        feedback_delay_ms: int = FEEDBACK_DELAY_MS,
    ) -> None:
        self._client = client
        self._view = view
        self._runner = runner
        self._scheduler = scheduler
        self._high_scores = high_scores
        self._session = session or GameSession()
        self._feedback_delay_ms = feedback_delay_ms

        self._phase = QuizPhase.SETUP
        self._categories: list[Category] = []
        self._category_request_id: int = 0

        self._handlers: dict[QuizEvent, Callable[..., Any]] = {
            QuizEvent.CATEGORIES_REQUESTED: self._on_categories_requested,
            QuizEvent.CATEGORIES_LOADED: self._on_categories_loaded,
            QuizEvent.CATEGORIES_FAILED: self._on_categories_failed,
            QuizEvent.START_REQUESTED: self._on_start_requested,
            QuizEvent.QUESTIONS_LOADED: self._on_questions_loaded,
            QuizEvent.QUESTIONS_FAILED: self._on_questions_failed,
            QuizEvent.ANSWER_SUBMITTED: self._on_answer_submitted,
            QuizEvent.FEEDBACK_ELAPSED: self._on_feedback_elapsed,
            QuizEvent.RESTART_REQUESTED: self._on_restart_requested,
        }

    # --- Public API ---

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def high_score(self) -> int:
        return self._high_scores.high_score

    def get_categories(self) -> list[Category]:
        return list(self._categories)

    def initialize(self) -> None:
        """Show the setup view with the stored high score and fetch categories."""
        self._view.render_high_score(format_high_score(self._high_scores.high_score))
        self._view.render_current_score(format_current_score(0))
        self._view.show_setup()
        self.load_categories()

    def load_categories(self) -> None:
        self.dispatch(QuizEvent.CATEGORIES_REQUESTED)

    def start(self, request: QuizRequest) -> None:
        self.dispatch(QuizEvent.START_REQUESTED, request=request)

    def submit_answer(self, choice_index: int) -> AnswerOutcome | None:
        return self.dispatch(QuizEvent.ANSWER_SUBMITTED, choice_index=choice_index)

    def restart(self) -> None:
        self.dispatch(QuizEvent.RESTART_REQUESTED)

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._session.set_shuffle_seed(seed)

    def dispatch(self, event: QuizEvent, **payload: Any) -> Any:
        """Apply ``event`` when the current phase accepts it."""
        if self._phase not in _ACCEPTED_PHASES[event]:
            logger.debug("Ignoring %s while in %s", event.name, self._phase.name)
            return None
        return self._handlers[event](**payload)

    # --- Categories ---

    def _on_categories_requested(self) -> None:
        self._category_request_id += 1
        request_id = self._category_request_id
        self._view.show_categories_loading()
        self._runner.run(
            self._client.fetch_categories,
            lambda categories: self.dispatch(
                QuizEvent.CATEGORIES_LOADED, request_id=request_id, categories=categories
            ),
            lambda error: self.dispatch(
                QuizEvent.CATEGORIES_FAILED, request_id=request_id, error=error
            ),
        )

    def _on_categories_loaded(self, request_id: int, categories: list[Category]) -> None:
        if request_id != self._category_request_id:
            logger.debug("Discarding stale category list (request %d)", request_id)
            return
        self._categories = list(categories)
        self._view.populate_categories(self._categories)

    def _on_categories_failed(self, request_id: int, error: Exception) -> None:
        if request_id != self._category_request_id:
            return
        logger.warning("Category fetch failed: %s", error)
        self._view.show_categories_error(str(error))

    # --- Session lifecycle ---

    def _on_start_requested(self, request: QuizRequest) -> None:
        generation = self._session.new_generation()
        self._phase = QuizPhase.LOADING
        logger.info(
            "Starting quiz: amount=%d category=%s difficulty=%s",
            request.amount,
            request.category_id,
            request.difficulty.value if request.difficulty else None,
        )
        self._view.show_quiz()
        self._runner.run(
            lambda: self._client.fetch_questions(
                request.amount, request.category_id, request.difficulty
            ),
            lambda questions: self.dispatch(
                QuizEvent.QUESTIONS_LOADED, generation=generation, questions=questions
            ),
            lambda error: self.dispatch(
                QuizEvent.QUESTIONS_FAILED, generation=generation, error=error
            ),
        )

    def _on_questions_loaded(self, generation: int, questions: list[Question]) -> None:
        if generation != self._session.generation:
            logger.debug("Discarding questions for stale session %d", generation)
            return
        self._session.load_questions(questions)
        self._view.render_current_score(format_current_score(0))
        self._show_current_question()

    def _on_questions_failed(self, generation: int, error: Exception) -> None:
        if generation != self._session.generation:
            return
        logger.warning("Question fetch failed: %s", error)
        self._session.new_generation()
        self._phase = QuizPhase.SETUP
        self._view.show_error(QUESTION_FETCH_FAILED_TITLE, f"Error: {error}")
        self._view.show_setup()

    def _on_answer_submitted(self, choice_index: int) -> AnswerOutcome | None:
        choices = self._session.get_current_choices()
        question = self._session.get_current_question()
        if question is None or not 0 <= choice_index < len(choices):
            logger.warning("Ignoring answer with invalid choice index %s", choice_index)
            return None

        elapsed = self._session.elapsed_seconds()
        selected = choices[choice_index]
        correct_text = decode_html(question.correct_answer)
        is_correct = selected.text == correct_text
        points = score_answer(selected.text, correct_text, elapsed)
        self._session.add_points(points)
        self._phase = QuizPhase.SHOWING_FEEDBACK

        if is_correct:
            feedback = format_correct_feedback(points)
        else:
            feedback = format_wrong_feedback(question.correct_answer)
        outcome = AnswerOutcome(
            selected_index=choice_index,
            correct_index=correct_choice_index(choices),
            is_correct=is_correct,
            points=points,
            correct_text=correct_text,
        )
        logger.info(
            "Question %d answered %s after %.1fs (+%d)",
            self._session.get_current_index() + 1,
            "correctly" if is_correct else "incorrectly",
            elapsed,
            points,
        )
        self._view.render_feedback(
            feedback, outcome.selected_index, outcome.correct_index, outcome.is_correct
        )
        self._view.render_current_score(format_current_score(self._session.get_score()))

        generation = self._session.generation
        self._scheduler.call_later(
            self._feedback_delay_ms,
            lambda: self._on_feedback_timer(generation),
        )
        return outcome

    def _on_feedback_timer(self, generation: int) -> None:
        if generation != self._session.generation:
            logger.debug("Discarding feedback timer for stale session %d", generation)
            return
        self.dispatch(QuizEvent.FEEDBACK_ELAPSED)

    def _on_feedback_elapsed(self) -> None:
        self._session.advance()
        self._view.clear_feedback()
        self._show_current_question()

    def _on_restart_requested(self) -> None:
        self._session.new_generation()
        self._phase = QuizPhase.SETUP
        self._view.render_current_score(format_current_score(0))
        self._view.show_setup()
        self.load_categories()

    # --- Helpers ---

    def _show_current_question(self) -> None:
        question = self._session.get_current_question()
        if question is None:
            self._finish()
            return
        choices = self._session.start_question()
        self._view.render_question(decode_html(question.text), choices)
        self._view.render_progress(
            format_progress(self._session.get_current_index(), self._session.get_question_count())
        )
        self._session.start_clock()
        self._phase = QuizPhase.AWAITING_ANSWER

    def _finish(self) -> None:
        self._phase = QuizPhase.FINISHED
        final_score = self._session.get_score()
        self._high_scores.update(final_score)
        logger.info("Quiz finished with %d points", final_score)
        self._view.render_progress("")
        self._view.render_results(QUIZ_FINISHED_TEXT, format_final_score(final_score))
        self._view.render_high_score(format_high_score(self._high_scores.high_score))
