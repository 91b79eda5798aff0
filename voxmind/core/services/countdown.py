"""Second-granularity countdown used to time a quiz attempt."""

from __future__ import annotations

from voxmind.constants.quiz_constants import SECONDS_PER_MINUTE


def format_clock(seconds: int) -> str:
    """Format a number of seconds as ``MM:SS``."""
    seconds = max(0, seconds)
    minutes, remaining_seconds = divmod(seconds, SECONDS_PER_MINUTE)
    return f"{minutes:02d}:{remaining_seconds:02d}"


class Countdown:
    """Counts whole seconds down to zero; the owner drives it once per second."""

    def __init__(self, total_seconds: int) -> None:
        if total_seconds < 0:
            raise ValueError("Countdown length must not be negative.")
        self._total_seconds = total_seconds
        self._remaining_seconds = total_seconds

    @classmethod
    def from_minutes(cls, minutes: str | int) -> "Countdown":
        return cls(int(minutes) * SECONDS_PER_MINUTE)

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    def is_expired(self) -> bool:
        return self._remaining_seconds <= 0

    def tick(self) -> bool:
        """Consume one second. Returns True on the tick that reaches zero."""
        if self.is_expired():
            return False
        self._remaining_seconds -= 1
        return self._remaining_seconds == 0

    def label(self) -> str:
        return format_clock(self._remaining_seconds)
