"""
Unit tests for the QuizController state machine.
"""
import unittest

from trivia_app.core.models import Category, Difficulty, QuizPhase, QuizRequest
from trivia_app.core.quiz_controller import QuizController, QuizEvent
from trivia_app.core.services.game_session import GameSession
from trivia_app.core.services.high_score_store import InMemoryStore
from trivia_app.core.services.scorer import HighScoreKeeper
from trivia_app.core.services.trivia_client import TriviaApiError
from tests.fakes import (
    DeferredRunner,
    FakeClock,
    FakeTriviaClient,
    ImmediateRunner,
    ManualScheduler,
    RecordingView,
    make_question,
    make_questions,
)


class ControllerTestCase(unittest.TestCase):
    """Builds a controller wired to fakes."""

    def setUp(self):
        self.clock = FakeClock()
        self.view = RecordingView()
        self.client = FakeTriviaClient()
        self.runner = ImmediateRunner()
        self.scheduler = ManualScheduler()
        self.store = InMemoryStore()
        self.controller = self.build_controller()

    def build_controller(self):
        session = GameSession(clock=self.clock)
        session.set_shuffle_seed(1234)
        return QuizController(
            client=self.client,
            view=self.view,
            runner=self.runner,
            scheduler=self.scheduler,
            high_scores=HighScoreKeeper(self.store),
            session=session,
        )

    def answer(self, text, after_seconds=0.0):
        self.clock.advance(after_seconds)
        return self.controller.submit_answer(self.view.index_of(text))


class TestInitialization(ControllerTestCase):
    """Test cases for the setup phase."""

    def test_initialize_shows_setup_with_high_score(self):
        self.store.set("HighScoreTrivia", "2500")
        self.controller = self.build_controller()

        self.controller.initialize()

        self.assertEqual(self.controller.phase, QuizPhase.SETUP)
        self.assertEqual(self.view.visible_panel, "setup")
        self.assertEqual(self.view.high_score, "High Score: 2500")
        self.assertEqual(self.view.current_score, "Current Score: 0")

    def test_categories_populated_in_api_order(self):
        self.client.categories = [Category(12, "Music"), Category(9, "General Knowledge")]

        self.controller.initialize()

        self.assertEqual(self.view.categories, [Category(12, "Music"), Category(9, "General Knowledge")])
        self.assertEqual(self.controller.get_categories(), self.view.categories)

    def test_category_failure_offers_retry(self):
        self.client.category_error = TriviaApiError("offline")

        with self.assertLogs("trivia_app.core.quiz_controller", level="WARNING"):
            self.controller.initialize()

        self.assertEqual(self.view.categories_error, "offline")
        self.assertEqual(self.view.categories, [])

        self.client.category_error = None
        self.controller.load_categories()

        self.assertIsNone(self.view.categories_error)
        self.assertEqual(len(self.view.categories), 1)
        self.assertEqual(self.client.category_calls, 2)

    def test_stale_category_response_is_discarded(self):
        self.runner = DeferredRunner()
        self.controller = self.build_controller()
        self.client.categories = [Category(1, "Old")]
        self.controller.load_categories()
        self.controller.load_categories()

        self.client.categories = [Category(2, "New")]
        self.runner.complete(1)
        self.client.categories = [Category(1, "Old")]
        self.runner.complete(0)

        self.assertEqual(self.view.categories, [Category(2, "New")])


class TestSingleQuestionScenario(ControllerTestCase):
    """The 2+2 walkthrough."""

    def setUp(self):
        super().setUp()
        self.client.questions = [make_question("2+2=?", "4", ["3", "5", "22"])]
        self.controller.initialize()
        self.controller.start(QuizRequest(amount=1))

    def test_start_fetches_and_renders_first_question(self):
        self.assertEqual(self.client.question_calls, [(1, None, None)])
        self.assertEqual(self.controller.phase, QuizPhase.AWAITING_ANSWER)
        self.assertEqual(self.view.visible_panel, "quiz")
        self.assertEqual(self.view.question_text, "2+2=?")
        self.assertEqual(sorted(c.text for c in self.view.choices), ["22", "3", "4", "5"])
        self.assertEqual(self.view.progress, "Question 1/1")

    def test_correct_answer_after_two_point_three_seconds(self):
        outcome = self.answer("4", after_seconds=2.3)

        self.assertTrue(outcome.is_correct)
        self.assertEqual(outcome.points, 980)
        self.assertEqual(self.view.feedback, "Correct! + 980 Points")
        self.assertEqual(self.view.current_score, "Current Score: 980")
        self.assertEqual(self.controller.phase, QuizPhase.SHOWING_FEEDBACK)

        delay = self.scheduler.fire_next()

        self.assertEqual(delay, 3000)
        self.assertEqual(self.controller.phase, QuizPhase.FINISHED)
        self.assertEqual(self.view.results, ("Quiz Finished!", "Your final score is 980"))
        self.assertEqual(self.store.get("HighScoreTrivia"), "980")
        self.assertEqual(self.view.high_score, "High Score: 980")

    def test_wrong_answer_names_correct_one(self):
        outcome = self.answer("3", after_seconds=1)

        self.assertFalse(outcome.is_correct)
        self.assertEqual(outcome.points, 0)
        self.assertEqual(self.view.feedback, "Wrong! The correct answer was: 4")
        selected, correct, is_correct = self.view.feedback_marks
        self.assertEqual(selected, self.view.index_of("3"))
        self.assertEqual(correct, self.view.index_of("4"))
        self.assertFalse(is_correct)

        self.scheduler.fire_next()
        self.assertEqual(self.view.results, ("Quiz Finished!", "Your final score is 0"))
        self.assertIsNone(self.store.get("HighScoreTrivia"))

    def test_second_click_during_feedback_is_ignored(self):
        self.answer("4")
        second = self.answer("3")

        self.assertIsNone(second)
        self.assertEqual(self.controller.session.get_score(), 1000)
        self.assertEqual(len(self.scheduler.pending), 1)

    def test_high_score_tie_is_not_written(self):
        self.store.set("HighScoreTrivia", "1000")
        self.controller = self.build_controller()
        self.controller.initialize()
        self.controller.start(QuizRequest(amount=1))

        self.answer("4")
        self.scheduler.fire_next()

        self.assertEqual(self.store.get("HighScoreTrivia"), "1000")
        self.assertEqual(self.controller.high_score, 1000)

    def test_invalid_choice_index_is_ignored(self):
        with self.assertLogs("trivia_app.core.quiz_controller", level="WARNING"):
            self.assertIsNone(self.controller.submit_answer(17))
        self.assertEqual(self.controller.phase, QuizPhase.AWAITING_ANSWER)


class TestSessionFlow(ControllerTestCase):
    """Test cases for multi-question sessions."""

    def test_k_questions_finish_exactly_once(self):
        questions = make_questions(5)
        self.client.questions = questions
        self.controller.start(QuizRequest(amount=5, category_id=9, difficulty=Difficulty.MEDIUM))

        shown = []
        for n in range(5):
            shown.append(self.view.question_text)
            self.assertEqual(self.view.progress, f"Question {n + 1}/5")
            self.answer(f"right {n}" if n % 2 == 0 else f"wrong {n}a", after_seconds=n)
            self.assertEqual(self.view.results_count, 0)
            self.scheduler.fire_next()

        self.assertEqual(shown, [q.text for q in questions])
        self.assertEqual(self.controller.phase, QuizPhase.FINISHED)
        self.assertEqual(self.view.results_count, 1)
        self.assertEqual(self.controller.session.get_current_index(), 5)
        # Correct answers at 0s, 2s and 4s.
        self.assertEqual(self.controller.session.get_score(), 1000 + 980 + 960)
        self.assertEqual(self.client.question_calls, [(5, 9, Difficulty.MEDIUM)])

    def test_feedback_cleared_before_next_question(self):
        self.client.questions = make_questions(2)
        self.controller.start(QuizRequest(amount=2))
        self.answer("right 0")

        self.scheduler.fire_next()

        self.assertEqual(self.view.feedback, "")
        self.assertEqual(self.view.question_text, "Question 1?")

    def test_empty_question_list_finishes_with_zero(self):
        self.client.questions = []

        self.controller.start(QuizRequest(amount=3))

        self.assertEqual(self.controller.phase, QuizPhase.FINISHED)
        self.assertEqual(self.view.results, ("Quiz Finished!", "Your final score is 0"))

    def test_question_failure_returns_to_setup(self):
        self.client.question_error = TriviaApiError("rate limited")

        with self.assertLogs("trivia_app.core.quiz_controller", level="WARNING"):
            self.controller.start(QuizRequest(amount=3))

        self.assertEqual(self.controller.phase, QuizPhase.SETUP)
        self.assertEqual(self.view.visible_panel, "setup")
        self.assertEqual(self.view.errors, [("Could not load questions", "Error: rate limited")])

    def test_restart_reloads_categories_and_resets_score(self):
        self.controller.initialize()
        self.controller.start(QuizRequest(amount=1))
        self.answer("4")
        self.scheduler.fire_next()

        self.controller.restart()

        self.assertEqual(self.controller.phase, QuizPhase.SETUP)
        self.assertEqual(self.view.visible_panel, "setup")
        self.assertEqual(self.view.current_score, "Current Score: 0")
        self.assertEqual(self.client.category_calls, 2)

    def test_start_ignored_outside_setup(self):
        self.controller.start(QuizRequest(amount=1))
        self.controller.start(QuizRequest(amount=1))

        self.assertEqual(len(self.client.question_calls), 1)

    def test_restart_ignored_mid_question(self):
        self.controller.start(QuizRequest(amount=1))

        self.assertIsNone(self.controller.dispatch(QuizEvent.RESTART_REQUESTED))
        self.assertEqual(self.controller.phase, QuizPhase.AWAITING_ANSWER)


class TestStaleCompletions(ControllerTestCase):
    """Late network responses and timers from a superseded session."""

    def setUp(self):
        super().setUp()
        self.runner = DeferredRunner()
        self.controller = self.build_controller()

    def test_late_questions_after_restart_are_discarded(self):
        self.controller.start(QuizRequest(amount=1))
        _, stale_success, _ = self.runner.pending.pop(0)
        self.controller.restart()
        self.runner.pending.clear()  # category reload

        self.client.questions = [make_question("new?", "a", ["b"])]
        self.controller.start(QuizRequest(amount=1))

        # The superseded request answers while the new one is still loading.
        stale_success([make_question("old?", "x", ["y"])])
        self.assertEqual(self.controller.phase, QuizPhase.LOADING)
        self.assertIsNone(self.view.question_text)

        self.runner.complete(0)
        self.assertEqual(self.view.question_text, "new?")
        self.assertEqual(self.view.progress, "Question 1/1")

    def test_cancel_while_loading_drops_response(self):
        self.controller.start(QuizRequest(amount=1))
        pending = self.runner.pending.pop(0)
        self.controller.restart()

        self.assertEqual(self.controller.phase, QuizPhase.SETUP)
        pending[1](make_questions(1))

        self.assertEqual(self.controller.phase, QuizPhase.SETUP)
        self.assertIsNone(self.view.question_text)

    def test_stale_feedback_timer_is_discarded(self):
        self.client.questions = make_questions(2)
        self.controller.start(QuizRequest(amount=2))
        self.runner.complete(0)
        self.answer("right 0")
        stale_timer = self.scheduler.pending.pop(0)[1]

        self.controller.session.new_generation()
        stale_timer()

        self.assertEqual(self.controller.phase, QuizPhase.SHOWING_FEEDBACK)
        self.assertEqual(self.view.question_text, "Question 0?")


if __name__ == "__main__":
    unittest.main()
