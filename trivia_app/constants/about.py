"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ORGANIZATION = "TriviaQt"
APP_ABOUT_TEXT = (
    "TriviaQt is a desktop trivia quiz built with Qt. "
    "Questions come from the Open Trivia Database; answer quickly to score more points."
)

HELP_TEXT = (
    "Pick a category, the number of questions and a difficulty, then press Start Quiz.\n\n"
    "Every question is worth up to 1000 points. You lose 10 points for each full second "
    "you take to answer, and a wrong answer scores nothing. Your best final score is kept "
    "as the high score."
)
