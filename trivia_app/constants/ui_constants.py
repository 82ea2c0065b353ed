"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"

SETUP_TITLE: str = "Trivia Quiz"
SETUP_CATEGORY_LABEL: str = "Category:"
SETUP_AMOUNT_LABEL: str = "Number of questions:"
SETUP_DIFFICULTY_LABEL: str = "Difficulty:"
ANY_CATEGORY_LABEL: str = "Any Category"
ANY_DIFFICULTY_LABEL: str = "Any Difficulty"
START_BUTTON_TEXT: str = "Start Quiz"
RETRY_CATEGORIES_BUTTON_TEXT: str = "Retry"
CATEGORIES_LOADING_TEXT: str = "Loading categories…"
CATEGORIES_ERROR_TEMPLATE: str = "Could not load categories: {message}"

QUESTIONS_LOADING_TEXT: str = "Loading questions…"
CANCEL_LOADING_BUTTON_TEXT: str = "Back to Setup"
RESTART_BUTTON_TEXT: str = "Restart Quiz"

ABOUT_BUTTON_TEXT: str = "About"
HELP_BUTTON_TEXT: str = "Help"
SETTINGS_BUTTON_TEXT: str = "Settings"

INVALID_SETUP_TITLE: str = "Invalid quiz settings"
