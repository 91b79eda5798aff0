"""Turns raw accelerometer readings into left/right shake gestures."""

from __future__ import annotations

from enum import Enum, auto

from voxmind.constants.quiz_constants import SHAKE_DEBOUNCE_MS, SHAKE_THRESHOLD


class ShakeDirection(Enum):
    LEFT = auto()
    RIGHT = auto()


class ShakeDetector:
    """Threshold on the x axis with a debounce window after each detected shake."""

    def __init__(
        self,
        threshold: float = SHAKE_THRESHOLD,
        debounce_ms: int = SHAKE_DEBOUNCE_MS,
    ) -> None:
        if threshold <= 0:
            raise ValueError("Shake threshold must be positive.")
        self.threshold = threshold
        self.debounce_ms = debounce_ms
        self._last_shake_ms: float | None = None

    def process(self, x: float, timestamp_ms: float) -> ShakeDirection | None:
        """Classify one reading; ``timestamp_ms`` must be monotonic."""
        # Window runs from the last detected shake, not from the last reading seen.
        if self._last_shake_ms is not None and timestamp_ms - self._last_shake_ms <= self.debounce_ms:
            return None

        if x > self.threshold:
            direction = ShakeDirection.RIGHT
        elif x < -self.threshold:
            direction = ShakeDirection.LEFT
        else:
            return None

        self._last_shake_ms = timestamp_ms
        return direction

    def reset(self) -> None:
        self._last_shake_ms = None
