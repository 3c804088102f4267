"""Quiz-related constants shared across UI and core layers."""

OPTIONS_PER_QUESTION: int = 4

NAME_REQUIRED_MESSAGE: str = "Please enter your name to start the quiz."
FETCH_FAILED_MESSAGE: str = "Failed to fetch leaderboard. Please try again."
SUBMIT_FAILED_TEMPLATE: str = "Failed to update leaderboard. Your score: {score}"
