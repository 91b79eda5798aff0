"""Static metadata describing VoxMind."""

APP_NAME = "VoxMind"
APP_VERSION = "0.2"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "VoxMind is a small quiz player built with Qt. It reads quizzes from a "
    "Firebase Realtime Database, times each attempt and reports a pass or fail score."
)

HELP_TEXT = (
    "Pick a quiz from the list to start it. The countdown starts immediately.\n\n"
    "Select one of the four options, then press Next to lock in your answer. "
    "The quiz ends after the last question or when the timer reaches zero.\n\n"
    "Shake the device to the right to skip ahead, or to the left to go back. "
    "Skipping with a shake does not record an answer. Without a motion sensor, "
    "Ctrl+Right and Ctrl+Left do the same.\n\n"
    "You pass with a score above 60%."
)
