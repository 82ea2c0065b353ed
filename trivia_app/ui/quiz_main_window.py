"""Qt main window switching between the setup form and the quiz view."""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_app.constants.ui_constants import (
    ABOUT_BUTTON_TEXT,
    HELP_BUTTON_TEXT,
    INVALID_SETUP_TITLE,
    SETTINGS_BUTTON_TEXT,
    WINDOW_TITLE,
)
from trivia_app.core.models import AnswerChoice, Category
from trivia_app.core.quiz_controller import QuizController
from trivia_app.core.runtime import Scheduler, TaskRunner
from trivia_app.core.services.scorer import HighScoreKeeper
from trivia_app.core.services.trivia_client import TriviaClient
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.components.setup_panel import SetupPanel
from trivia_app.ui.dialog_helpers import show_error, show_info, show_warning
from trivia_app.ui.qt_runtime import QtScheduler, QtTaskRunner
from trivia_app.ui.settings_dialog import SettingsDialog


class WindowMode(Enum):
    """Which panel the main window shows."""

    SETUP = auto()
    QUIZ = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window; renders everything the quiz controller asks for."""

    def __init__(
        self,
        client: TriviaClient,
        high_scores: HighScoreKeeper,
        runner: TaskRunner | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self._mode = WindowMode.SETUP
        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._shuffle_seed: int | None = None

        self._build_ui()
        self.controller = QuizController(
            client=client,
            view=self,
            runner=runner or QtTaskRunner(self),
            scheduler=scheduler or QtScheduler(),
            high_scores=high_scores,
        )
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar_row(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.setup_panel = SetupPanel(
            on_start=self._handle_start,
            on_retry_categories=self._handle_retry_categories,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            on_answer=self._handle_answer,
            on_restart=self._handle_restart,
            parent=self,
        )
        self.mode_stack.addWidget(self.setup_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(WindowMode.SETUP)

    def _build_toolbar_row(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.high_score_label = QLabel("", self)
        button_row.addWidget(self.high_score_label)
        button_row.addStretch()

        self.about_button = QPushButton(ABOUT_BUTTON_TEXT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON_TEXT, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON_TEXT, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        index_map = {
            WindowMode.SETUP: 0,
            WindowMode.QUIZ: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        self.settings_button.setEnabled(mode == WindowMode.SETUP)

    def start(self) -> None:
        """Show the window's initial state and begin loading categories."""
        self.controller.initialize()

    # --- User actions ---

    def _handle_start(self) -> None:
        try:
            request = self.setup_panel.get_request()
        except ValueError as exc:
            show_warning(self, INVALID_SETUP_TITLE, str(exc))
            return
        self.controller.start(request)

    def _handle_retry_categories(self) -> None:
        self.controller.load_categories()

    def _handle_answer(self, choice_index: int) -> None:
        self.controller.submit_answer(choice_index)

    def _handle_restart(self) -> None:
        self.controller.restart()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.controller.set_shuffle_seed(self._shuffle_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for widget in (self.about_button, self.help_button, self.settings_button, self.high_score_label):
            widget.setStyleSheet(ui_style)

        self.setup_panel.apply_font_size(self._ui_font_size)
        self.quiz_panel.apply_font_size(self._game_font_size)

    # --- QuizView ---

    def show_setup(self) -> None:
        self._set_mode(WindowMode.SETUP)

    def show_quiz(self) -> None:
        self.quiz_panel.show_loading()
        self._set_mode(WindowMode.QUIZ)

    def show_categories_loading(self) -> None:
        self.setup_panel.show_categories_loading()

    def populate_categories(self, categories: Sequence[Category]) -> None:
        self.setup_panel.populate_categories(categories)

    def show_categories_error(self, message: str) -> None:
        self.setup_panel.show_categories_error(message)

    def render_question(self, text: str, choices: Sequence[AnswerChoice]) -> None:
        self.quiz_panel.render_question(text, choices)

    def render_progress(self, text: str) -> None:
        self.quiz_panel.render_progress(text)

    def render_feedback(self, text: str, selected_index: int, correct_index: int, is_correct: bool) -> None:
        self.quiz_panel.render_feedback(text, selected_index, correct_index, is_correct)

    def clear_feedback(self) -> None:
        self.quiz_panel.clear_feedback()

    def render_current_score(self, text: str) -> None:
        self.quiz_panel.render_current_score(text)

    def render_high_score(self, text: str) -> None:
        self.high_score_label.setText(text)

    def render_results(self, title: str, final_score_text: str) -> None:
        self.quiz_panel.render_results(title, final_score_text)

    def show_error(self, title: str, message: str) -> None:
        show_error(self, title, message)
