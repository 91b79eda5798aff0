"""Settings dialog for configuring VoxMind preferences."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from voxmind.constants.quiz_constants import SHAKE_THRESHOLD


@dataclass(slots=True)
class QuizPreferences:
    """User-adjustable settings applied to every quiz window."""

    game_font_size: int = 14
    shake_enabled: bool = True
    shake_threshold: float = SHAKE_THRESHOLD


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, parent=None, preferences: QuizPreferences | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._preferences = preferences or QuizPreferences()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Quiz font size (questions, options):")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._preferences.game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.game_font_spinbox)
        display_layout.addLayout(font_row)

        layout.addWidget(display_group)

        # Shake navigation group
        shake_group = QGroupBox("Shake Navigation")
        shake_layout = QVBoxLayout()
        shake_group.setLayout(shake_layout)

        self.shake_checkbox = QCheckBox("Navigate questions by shaking the device")
        self.shake_checkbox.setToolTip(
            "Shake right to skip ahead, shake left to go back. Has no effect without an accelerometer."
        )
        self.shake_checkbox.setChecked(self._preferences.shake_enabled)
        shake_layout.addWidget(self.shake_checkbox)

        threshold_row = QHBoxLayout()
        threshold_label = QLabel("Shake threshold:")
        threshold_label.setToolTip("Sideways acceleration needed to count as a shake. Lower is more sensitive.")
        self.threshold_spinbox = QDoubleSpinBox()
        self.threshold_spinbox.setRange(2.0, 30.0)
        self.threshold_spinbox.setSingleStep(0.5)
        self.threshold_spinbox.setDecimals(1)
        self.threshold_spinbox.setSuffix(" m/s²")
        self.threshold_spinbox.setValue(self._preferences.shake_threshold)
        self.threshold_spinbox.setEnabled(self._preferences.shake_enabled)
        self.shake_checkbox.toggled.connect(self.threshold_spinbox.setEnabled)
        threshold_row.addWidget(threshold_label)
        threshold_row.addStretch()
        threshold_row.addWidget(self.threshold_spinbox)
        shake_layout.addLayout(threshold_row)

        layout.addWidget(shake_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_preferences(self) -> QuizPreferences:
        """Return the preferences as currently entered in the dialog."""
        return QuizPreferences(
            game_font_size=self.game_font_spinbox.value(),
            shake_enabled=self.shake_checkbox.isChecked(),
            shake_threshold=self.threshold_spinbox.value(),
        )
