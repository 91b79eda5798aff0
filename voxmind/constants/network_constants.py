"""Network configuration constants for the quiz application."""

DATABASE_URL_ENV: str = "VOXMIND_DATABASE_URL"
DATABASE_AUTH_ENV: str = "VOXMIND_DATABASE_AUTH"
FETCH_TIMEOUT_ENV: str = "VOXMIND_FETCH_TIMEOUT"

DEFAULT_FETCH_TIMEOUT_SECONDS: float = 20.0
ROOT_DOCUMENT_PATH: str = "/.json"

LOCAL_STORE_HOST: str = "127.0.0.1"
LOCAL_STORE_PORT: int = 8765
