"""Quiz-related constants shared across UI and core layers."""

BASE_SCORE_PER_QUESTION: int = 1000
PENALTY_PER_SECOND: int = 10
FEEDBACK_DELAY_MS: int = 3000

HIGH_SCORE_KEY: str = "HighScoreTrivia"

MIN_QUESTION_AMOUNT: int = 1
MAX_QUESTION_AMOUNT: int = 50
DEFAULT_QUESTION_AMOUNT: int = 10
