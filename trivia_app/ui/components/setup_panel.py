"""Component for the quiz setup form."""

from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import (
    DEFAULT_QUESTION_AMOUNT,
    MAX_QUESTION_AMOUNT,
    MIN_QUESTION_AMOUNT,
)
from trivia_app.constants.ui_constants import (
    ANY_CATEGORY_LABEL,
    ANY_DIFFICULTY_LABEL,
    CATEGORIES_ERROR_TEMPLATE,
    CATEGORIES_LOADING_TEXT,
    RETRY_CATEGORIES_BUTTON_TEXT,
    SETUP_AMOUNT_LABEL,
    SETUP_CATEGORY_LABEL,
    SETUP_DIFFICULTY_LABEL,
    SETUP_TITLE,
    START_BUTTON_TEXT,
)
from trivia_app.core.models import Category, Difficulty, QuizRequest
from trivia_app.styling.styles import Styles


class SetupPanel(QWidget):
    """Category, amount and difficulty selection with a start action."""

    def __init__(
        self,
        on_start: Callable[[], None],
        on_retry_categories: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_retry_categories = on_retry_categories

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(SETUP_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        form = QFormLayout()

        self.category_combo = QComboBox(self)
        self.category_combo.addItem(ANY_CATEGORY_LABEL, None)
        form.addRow(SETUP_CATEGORY_LABEL, self.category_combo)

        self.amount_spinbox = QSpinBox(self)
        self.amount_spinbox.setRange(MIN_QUESTION_AMOUNT, MAX_QUESTION_AMOUNT)
        self.amount_spinbox.setValue(DEFAULT_QUESTION_AMOUNT)
        form.addRow(SETUP_AMOUNT_LABEL, self.amount_spinbox)

        self.difficulty_combo = QComboBox(self)
        self.difficulty_combo.addItem(ANY_DIFFICULTY_LABEL, None)
        for difficulty in Difficulty:
            self.difficulty_combo.addItem(difficulty.value.capitalize(), difficulty)
        form.addRow(SETUP_DIFFICULTY_LABEL, self.difficulty_combo)

        layout.addLayout(form)

        status_row = QHBoxLayout()
        self.category_status_label = QLabel("", self)
        self.category_status_label.setWordWrap(True)
        status_row.addWidget(self.category_status_label, stretch=1)

        self.retry_button = QPushButton(RETRY_CATEGORIES_BUTTON_TEXT, self)
        self.retry_button.clicked.connect(self._handle_retry_click)
        self.retry_button.setVisible(False)
        status_row.addWidget(self.retry_button)
        layout.addLayout(status_row)

        layout.addStretch()

        self.start_button = QPushButton(START_BUTTON_TEXT, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button)

    def _handle_retry_click(self) -> None:
        self.on_retry_categories()

    def show_categories_loading(self) -> None:
        self.category_status_label.setStyleSheet("")
        self.category_status_label.setText(CATEGORIES_LOADING_TEXT)
        self.retry_button.setVisible(False)

    def populate_categories(self, categories: Sequence[Category]) -> None:
        """Replace the selectable categories, keeping the API order."""
        self.category_combo.clear()
        self.category_combo.addItem(ANY_CATEGORY_LABEL, None)
        for category in categories:
            self.category_combo.addItem(category.name, category.id)
        self.category_status_label.setText("")
        self.retry_button.setVisible(False)

    def show_categories_error(self, message: str) -> None:
        self.category_status_label.setStyleSheet(Styles.get_error_label_style())
        self.category_status_label.setText(CATEGORIES_ERROR_TEMPLATE.format(message=message))
        self.retry_button.setVisible(True)

    def get_request(self) -> QuizRequest:
        """Build the request from the form; raises ValueError for invalid input."""
        return QuizRequest(
            amount=self.amount_spinbox.value(),
            category_id=self.category_combo.currentData(),
            difficulty=self.difficulty_combo.currentData(),
        )

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.start_button.setStyleSheet(style)
        self.category_combo.setStyleSheet(style)
        self.amount_spinbox.setStyleSheet(style)
        self.difficulty_combo.setStyleSheet(style)
