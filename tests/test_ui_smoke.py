"""
Smoke tests driving the Qt main window offscreen.
"""
import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtWidgets import QApplication
except ImportError:  # Qt libraries missing on the host
    QApplication = None

from trivia_app.core.models import Category, Difficulty
from trivia_app.core.services.high_score_store import InMemoryStore
from trivia_app.core.services.scorer import HighScoreKeeper
from tests.fakes import FakeTriviaClient, ImmediateRunner, ManualScheduler, make_question


@unittest.skipIf(QApplication is None, "PySide6 is not available")
class TestQuizMainWindow(unittest.TestCase):
    """Test cases for the window rendering what the controller asks for."""

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        from trivia_app.ui.quiz_main_window import QuizMainWindow

        self.client = FakeTriviaClient(
            categories=[Category(9, "General Knowledge"), Category(12, "Entertainment: Music")],
            questions=[make_question("Who wrote &quot;Hamlet&quot;?", "Shakespeare", ["Marlowe", "Jonson"])],
        )
        self.scheduler = ManualScheduler()
        self.store = InMemoryStore({"HighScoreTrivia": "400"})
        self.window = QuizMainWindow(
            client=self.client,
            high_scores=HighScoreKeeper(self.store),
            runner=ImmediateRunner(),
            scheduler=self.scheduler,
        )
        self.window.start()

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_setup_form_lists_categories(self):
        combo = self.window.setup_panel.category_combo

        self.assertIs(self.window.mode_stack.currentWidget(), self.window.setup_panel)
        self.assertEqual(combo.count(), 3)
        self.assertEqual(combo.itemText(0), "Any Category")
        self.assertIsNone(combo.itemData(0))
        self.assertEqual(combo.itemData(2), 12)
        self.assertEqual(self.window.high_score_label.text(), "High Score: 400")

    def test_form_builds_request(self):
        panel = self.window.setup_panel
        panel.category_combo.setCurrentIndex(1)
        panel.amount_spinbox.setValue(5)
        panel.difficulty_combo.setCurrentIndex(3)  # Any, Easy, Medium, Hard

        request = panel.get_request()

        self.assertEqual(request.amount, 5)
        self.assertEqual(request.category_id, 9)
        self.assertEqual(request.difficulty, Difficulty.HARD)

    def test_play_through_one_question(self):
        self.window.setup_panel.amount_spinbox.setValue(1)
        self.window.setup_panel.start_button.click()

        panel = self.window.quiz_panel
        self.assertIs(self.window.mode_stack.currentWidget(), panel)
        self.assertEqual(panel.question_label.text(), 'Who wrote "Hamlet"?')
        self.assertEqual(panel.progress_label.text(), "Question 1/1")
        self.assertEqual(self.client.question_calls, [(1, None, None)])

        texts = [button.text() for button in panel.answer_buttons]
        panel.answer_buttons[texts.index("Shakespeare")].click()

        self.assertTrue(panel.feedback_label.text().startswith("Correct! + "))
        self.assertFalse(any(button.isEnabled() for button in panel.answer_buttons))

        self.scheduler.fire_next()

        self.assertEqual(panel.question_label.text(), "Quiz Finished!")
        self.assertTrue(panel.feedback_label.text().startswith("Your final score is "))
        self.assertFalse(panel.restart_button.isHidden())

        panel.restart_button.click()

        self.assertIs(self.window.mode_stack.currentWidget(), self.window.setup_panel)
        self.assertEqual(self.client.category_calls, 2)


if __name__ == "__main__":
    unittest.main()
