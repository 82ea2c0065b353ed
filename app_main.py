"""Application entry point for TriviaQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.constants.about import APP_NAME, APP_ORGANIZATION
from trivia_app.core.services.high_score_store import QSettingsStore
from trivia_app.core.services.scorer import HighScoreKeeper
from trivia_app.core.services.trivia_client import TriviaClient
from trivia_app.ui.quiz_main_window import QuizMainWindow
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the services, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s…", APP_NAME)

    app = QApplication(sys.argv)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationName(APP_NAME)

    high_scores = HighScoreKeeper(QSettingsStore())
    logger.info("Stored high score: %d", high_scores.high_score)

    window = QuizMainWindow(client=TriviaClient(), high_scores=high_scores)
    window.show()
    window.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
