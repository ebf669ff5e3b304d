"""Quiz-related constants shared across UI and core layers."""

QUESTION_TIME_LIMIT_SECONDS: int = 15
TICK_INTERVAL_MS: int = 1000
TIME_LIMIT_TICKING_WINDOW_SECONDS: int = 5
CELEBRATION_SCORE_THRESHOLD: int = 8
OPTIONS_PER_QUESTION: int = 4

UNMARKED_ANSWER_MESSAGE: str = "Oops! The answer is unmarked."
CORRECT_ANSWER_MESSAGE: str = "Correct! 🎉"
INCORRECT_ANSWER_MESSAGE: str = "Incorrect! ❌"

RESULT_WELL_DONE: str = "Well Done!"
RESULT_NEEDS_IMPROVEMENT: str = "Needs Improvement."
