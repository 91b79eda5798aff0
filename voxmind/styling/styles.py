"""Centralized stylesheet helpers for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QListWidget {{
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
            }}
            QListWidget::item:selected {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                text-align: center;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT.get(theme)};
            }}
        """

    @staticmethod
    def get_option_button_style(selected: bool, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        background = ColorPalette.OPTION_SELECTED if selected else ColorPalette.OPTION_IDLE
        return (
            f"background-color: {background.get(theme)};"
            f" color: {ColorPalette.TEXT_ON_ACCENT.get(theme)};"
            f" border: none; border-radius: 6px; padding: 10px; font-size: {font_size}pt;"
        )

    @staticmethod
    def get_result_color(passed: bool, theme: Theme = Theme.LIGHT) -> str:
        return (ColorPalette.PASS if passed else ColorPalette.FAIL).get(theme)

    @staticmethod
    def get_result_bar_style(passed: bool, theme: Theme = Theme.LIGHT) -> str:
        return f"QProgressBar::chunk {{ background-color: {Styles.get_result_color(passed, theme)}; }}"

    @staticmethod
    def get_notice_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.NOTICE_BG.get(theme)};"
            f" color: {ColorPalette.NOTICE_TEXT.get(theme)};"
            " border-radius: 12px; padding: 6px 14px;"
        )

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"
