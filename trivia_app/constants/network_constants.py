"""Network configuration constants for the trivia client."""

CATEGORY_ENDPOINT_URL: str = "https://opentdb.com/api_category.php"
QUESTION_ENDPOINT_URL: str = "https://opentdb.com/api.php"
QUESTION_TYPE: str = "multiple"
REQUEST_TIMEOUT_SECONDS: float = 10.0
