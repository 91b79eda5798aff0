"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

OPTION_SLOT_COUNT: int = 4
PASS_THRESHOLD_PERCENT: int = 60
SECONDS_PER_MINUTE: int = 60

SHAKE_THRESHOLD: float = 8.0  # m/s^2 along the device x axis
SHAKE_DEBOUNCE_MS: int = 1000

SAMPLE_QUIZZES_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "sample_quizzes.json"
