"""Static metadata describing Quiz Battle."""

APP_NAME = "Quiz Battle"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Battle is a desktop quiz on TTL logic and digital circuits built with Qt. "
    "Answer every question, check each answer as you go, and see how your score "
    "ranks on the shared leaderboard."
)

HELP_TEXT = (
    "Enter your name and press Start Quiz. Pick an option and press Check Answer to "
    "reveal the correct one, then Next Question to move on. Your final score is sent "
    "to the leaderboard when you finish.\n\n"
    "A custom question bank can be supplied with QUIZ_BATTLE_QUESTIONS_FILE using "
    "this format:\n\n"
    "Q: Which IC is used for the AND gate in TTL logic?\n"
    "A: 7400\nB: 7408\nC: 7432\nD: 7486\n"
    "CORRECT: B"
)
