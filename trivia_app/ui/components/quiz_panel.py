"""Component for the question, answers, feedback and results view."""

from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    CANCEL_LOADING_BUTTON_TEXT,
    QUESTIONS_LOADING_TEXT,
    RESTART_BUTTON_TEXT,
)
from trivia_app.core.models import AnswerChoice
from trivia_app.styling.styles import Styles


class QuizPanel(QWidget):
    """UI component for playing through the fetched questions."""

    def __init__(
        self,
        on_answer: Callable[[int], None],
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self.on_restart = on_restart

        self._game_font_size: int = 14
        self.answer_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        score_row = QHBoxLayout()
        self.current_score_label = QLabel("", self)
        score_row.addWidget(self.current_score_label)
        score_row.addStretch()
        self.progress_label = QLabel("", self)
        score_row.addWidget(self.progress_label)
        layout.addLayout(score_row)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setTextFormat(Qt.PlainText)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setMinimumHeight(80)
        layout.addWidget(self.question_label)

        self.answers_layout = QVBoxLayout()
        layout.addLayout(self.answers_layout)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        self.feedback_label.setTextFormat(Qt.PlainText)
        self.feedback_label.setWordWrap(True)
        layout.addWidget(self.feedback_label)

        layout.addStretch()

        self.restart_button = QPushButton(RESTART_BUTTON_TEXT, self)
        self.restart_button.clicked.connect(self.on_restart)
        self.restart_button.setVisible(False)
        layout.addWidget(self.restart_button)

        self.apply_font_size(self._game_font_size)

    def show_loading(self) -> None:
        self._clear_answers()
        self.question_label.setText(QUESTIONS_LOADING_TEXT)
        self.feedback_label.setText("")
        self.progress_label.setText("")
        self.restart_button.setText(CANCEL_LOADING_BUTTON_TEXT)
        self.restart_button.setVisible(True)

    def render_question(self, text: str, choices: Sequence[AnswerChoice]) -> None:
        self.restart_button.setVisible(False)
        self.question_label.setText(text)
        self._render_answers(choices)

    def _render_answers(self, choices: Sequence[AnswerChoice]) -> None:
        self._clear_answers()
        for index, choice in enumerate(choices):
            button = QPushButton(choice.text, self)
            button.setStyleSheet(Styles.get_answer_button_style(self._game_font_size))
            button.clicked.connect(lambda _checked=False, i=index: self.on_answer(i))
            self.answers_layout.addWidget(button)
            self.answer_buttons.append(button)

    def _clear_answers(self) -> None:
        while self.answers_layout.count():
            item = self.answers_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.answer_buttons = []

    def render_feedback(self, text: str, selected_index: int, correct_index: int, is_correct: bool) -> None:
        for button in self.answer_buttons:
            button.setEnabled(False)
        self._mark_answer(selected_index, is_correct)
        if not is_correct:
            self._mark_answer(correct_index, True)
        self.feedback_label.setText(text)

    def _mark_answer(self, index: int, is_correct: bool) -> None:
        if 0 <= index < len(self.answer_buttons):
            self.answer_buttons[index].setStyleSheet(
                Styles.get_answer_button_style(self._game_font_size, is_correct)
            )

    def clear_feedback(self) -> None:
        self.feedback_label.setText("")

    def render_progress(self, text: str) -> None:
        self.progress_label.setText(text)

    def render_current_score(self, text: str) -> None:
        self.current_score_label.setText(text)

    def render_results(self, title: str, final_score_text: str) -> None:
        self._clear_answers()
        self.question_label.setText(title)
        self.feedback_label.setText(final_score_text)
        self.restart_button.setText(RESTART_BUTTON_TEXT)
        self.restart_button.setVisible(True)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        style = f"font-size: {font_size}pt;"
        self.question_label.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: bold;")
        self.feedback_label.setStyleSheet(style)
        self.progress_label.setStyleSheet(style)
        self.current_score_label.setStyleSheet(style)
        self.restart_button.setStyleSheet(style)
        for button in self.answer_buttons:
            if button.isEnabled():
                button.setStyleSheet(Styles.get_answer_button_style(font_size))
