"""Qt UI constants used across widgets."""

LIST_WINDOW_TITLE: str = "VoxMind"
QUIZ_WINDOW_TITLE: str = "VoxMind Quiz"
RESULT_DIALOG_TITLE: str = "Quiz Result"

COUNTDOWN_INTERVAL_MS: int = 1000
NOTICE_DURATION_MS: int = 2000

BUTTON_RETRY: str = "Retry"
BUTTON_ABOUT: str = "About VoxMind"
BUTTON_HELP: str = "Help"
BUTTON_SETTINGS: str = "Settings"
BUTTON_NEXT: str = "Next"
BUTTON_FINISH: str = "Finish"

LOADING_MESSAGE: str = "Loading quizzes…"
EMPTY_LIST_MESSAGE: str = "No quizzes available."
FETCH_FAILED_TEMPLATE: str = "Could not load quizzes: {error}"

OPTION_PLACEHOLDERS: tuple[str, ...] = ("Option A", "Option B", "Option C", "Option D")
QUESTION_INDICATOR_TEMPLATE: str = "Question {number} / {total}"
QUIZ_TIME_TEMPLATE: str = "{time} min"

SELECT_ANSWER_NOTICE: str = "Please select an answer to continue"
NEXT_QUESTION_NOTICE: str = "Next Question!"
NO_MORE_QUESTIONS_NOTICE: str = "No more questions!"
PREVIOUS_QUESTION_NOTICE: str = "Previous Question!"
FIRST_QUESTION_NOTICE: str = "This is the first question!"

RESULT_PASSED_TITLE: str = "Congratulations! You Passed"
RESULT_FAILED_TITLE: str = "Oops! You Failed"
RESULT_SUBTITLE_TEMPLATE: str = "{score} out of {total} are correct"

SHAKE_RIGHT_SHORTCUT: str = "Ctrl+Right"
SHAKE_LEFT_SHORTCUT: str = "Ctrl+Left"
