"""Qt binding between the device accelerometer and the shake detector."""

from __future__ import annotations

import logging
import time

from PySide6.QtCore import QObject, Signal
from PySide6.QtSensors import QAccelerometer

from voxmind.constants.quiz_constants import SHAKE_THRESHOLD
from voxmind.core.services.shake_detector import ShakeDetector, ShakeDirection

logger = logging.getLogger(__name__)

_SENSOR_DATA_RATE_HZ = 50


class ShakeSensor(QObject):
    """Emits shake signals while started; the owner starts and stops it with window activation."""

    shaken_left = Signal()
    shaken_right = Signal()

    def __init__(self, threshold: float = SHAKE_THRESHOLD, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._detector = ShakeDetector(threshold=threshold)
        self._accelerometer = QAccelerometer(self)
        self._accelerometer.setAccelerationMode(QAccelerometer.AccelerationMode.Combined)
        self._accelerometer.readingChanged.connect(self._handle_reading)
        self._available = self._accelerometer.connectToBackend()
        if self._available:
            self._accelerometer.setDataRate(_SENSOR_DATA_RATE_HZ)
        else:
            logger.info("No accelerometer available; shake navigation uses keyboard shortcuts only")

    def start(self) -> bool:
        if not self._available or self._accelerometer.isActive():
            return self._accelerometer.isActive()
        self._detector.reset()
        started = self._accelerometer.start()
        logger.debug("Accelerometer listener %s", "registered" if started else "failed to start")
        return started

    def stop(self) -> None:
        if self._accelerometer.isActive():
            self._accelerometer.stop()
            logger.debug("Accelerometer listener unregistered")

    def _handle_reading(self) -> None:
        reading = self._accelerometer.reading()
        if reading is None:
            return
        direction = self._detector.process(reading.x(), time.monotonic() * 1000)
        if direction is ShakeDirection.RIGHT:
            self.shaken_right.emit()
        elif direction is ShakeDirection.LEFT:
            self.shaken_left.emit()
