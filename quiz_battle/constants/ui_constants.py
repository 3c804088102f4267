"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Battle"
SNAPSHOT_REFRESH_INTERVAL_MS: int = 150

REGISTRATION_HEADING: str = "The Quiz Battle: Are You Ready?"
NAME_PLACEHOLDER: str = "Enter your name"
START_BUTTON: str = "Start Quiz"

CHECK_ANSWER_BUTTON: str = "Check Answer"
NEXT_QUESTION_BUTTON: str = "Next Question"
FINISH_QUIZ_BUTTON: str = "Finish Quiz"
QUESTION_HEADING_TEMPLATE: str = "Question {number} of {total}"

RESULTS_HEADING: str = "Quiz Results"
SCORE_TEMPLATE: str = "Your score: {score} out of {total}"
LEADERBOARD_HEADING: str = "Quiz Champions:"
LEADERBOARD_LOADING: str = "Loading leaderboard..."
LEADERBOARD_EMPTY: str = "No leaderboard data available."
PLAY_AGAIN_BUTTON: str = "Play Again"

ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"
BUSY_MESSAGE: str = "Talking to the leaderboard..."
