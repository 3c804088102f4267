"""Exception hierarchy for quiz sessions and the leaderboard boundary."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by the quiz core."""


class ValidationError(QuizError):
    """Raised when user input is rejected, such as a blank player name."""


class InvalidStateError(QuizError):
    """Raised when an operation is not allowed in the current session stage."""


class RemoteFetchError(QuizError):
    """Raised when the leaderboard could not be fetched."""


class RemoteSubmitError(QuizError):
    """Raised when a score could not be submitted to the leaderboard."""


class QuestionBankError(QuizError, ValueError):
    """Raised when a question bank violates its structural rules."""
