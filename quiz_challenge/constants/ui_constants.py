"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Challenge"
HEADER_TEXT: str = "Quiz Challenge 🎯"
FOOTER_TEXT: str = "“Testing oneself is the best way to learn”"
DEFAULT_WINDOW_SIZE: tuple[int, int] = (720, 640)

SUBMIT_BUTTON: str = "Submit Answer"
NEXT_QUESTION_BUTTON: str = "Next Question"
SHOW_RESULTS_BUTTON: str = "Show Results"
RESTART_BUTTON: str = "Restart Quiz"

QUESTION_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
TIME_REMAINING_TEMPLATE: str = "⏳ {seconds}s"
FEEDBACK_TITLE: str = "Answer Feedback"
CORRECT_ANSWER_TEMPLATE: str = "Correct Answer: **{answer}**"

RESULT_TITLE: str = "Quiz Completed!"
RESULT_SCORE_TEMPLATE: str = "Your score: {score} / {total}"
CELEBRATION_SUFFIX: str = " 🎉"
CELEBRATION_BANNER: str = "🎉 🎊 🥳 🎊 🎉"

MENU_QUIZ: str = "&Quiz"
MENU_RESTART: str = "&Restart Quiz"
MENU_SETTINGS: str = "&Settings…"
MENU_ABOUT: str = "&About"
MENU_QUIT: str = "&Quit"

CONFIRM_RESTART_TITLE: str = "Restart Quiz"
CONFIRM_RESTART_MESSAGE: str = "Your current progress will be lost. Restart the quiz?"
