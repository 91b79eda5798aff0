"""Tests for shake gesture detection."""

from __future__ import annotations

import pytest

from voxmind.core.services.shake_detector import ShakeDetector, ShakeDirection


def test_readings_within_threshold_are_ignored():
    detector = ShakeDetector(threshold=8.0)

    assert detector.process(7.9, 0) is None
    assert detector.process(-8.0, 10) is None
    assert detector.process(0.0, 20) is None


def test_direction_follows_sign_of_x():
    detector = ShakeDetector(threshold=8.0, debounce_ms=1000)

    assert detector.process(9.5, 0) is ShakeDirection.RIGHT
    assert detector.process(-9.5, 1500) is ShakeDirection.LEFT


def test_second_shake_inside_debounce_window_is_dropped():
    detector = ShakeDetector(threshold=8.0, debounce_ms=1000)

    assert detector.process(12.0, 1000) is ShakeDirection.RIGHT
    assert detector.process(12.0, 1500) is None
    assert detector.process(12.0, 2000) is None
    assert detector.process(12.0, 2001) is ShakeDirection.RIGHT


def test_quiet_readings_do_not_restart_the_debounce_window():
    detector = ShakeDetector(threshold=8.0, debounce_ms=1000)
    detector.process(12.0, 0)

    for timestamp in range(20, 1000, 20):
        detector.process(0.5, timestamp)

    assert detector.process(-12.0, 1020) is ShakeDirection.LEFT


def test_reset_forgets_last_shake():
    detector = ShakeDetector(threshold=8.0, debounce_ms=1000)
    detector.process(12.0, 0)
    detector.reset()

    assert detector.process(12.0, 10) is ShakeDirection.RIGHT


def test_threshold_must_be_positive():
    with pytest.raises(ValueError):
        ShakeDetector(threshold=0)
