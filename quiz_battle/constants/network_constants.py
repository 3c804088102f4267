"""Network configuration constants for the leaderboard service."""

DEFAULT_API_URL: str = "https://quiz-backend-eta-seven.vercel.app/api"
LEADERBOARD_PATH: str = "/leaderboard"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float | None = None

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
SERVER_STARTUP_WAIT_SECONDS: float = 5.0

LEADERBOARD_SIZE_LIMIT: int = 10
DEFAULT_LEADERBOARD_FILE: str = "leaderboard.json"
