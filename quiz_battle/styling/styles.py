"""Centralized styles and font definitions for the application."""

from quiz_battle.core.display_model import OptionStatus

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_PRIMARY_HOVER.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px;
            }}
            QListWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_heading_style() -> str:
        return "font-size: 18pt; font-weight: bold;"

    @staticmethod
    def get_error_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_option_style(status: OptionStatus, theme: Theme = Theme.LIGHT) -> str:
        """Background for an answer option once the correct answer is shown."""
        if status == OptionStatus.CORRECT:
            background = ColorPalette.OPTION_CORRECT_BG.get(theme)
        elif status == OptionStatus.WRONG:
            background = ColorPalette.OPTION_WRONG_BG.get(theme)
        else:
            return (
                "QRadioButton { padding: 6px; border-radius: 4px; }"
                f" QRadioButton:hover {{ background-color: {ColorPalette.OPTION_HOVER_BG.get(theme)}; }}"
            )
        return f"QRadioButton {{ padding: 6px; border-radius: 4px; background-color: {background}; }}"
