"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme, ThemeColors

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background: qlineargradient(x1: 0, y1: 0, x2: 1, y2: 0,
                    stop: 0 {ColorPalette.WINDOW_GRADIENT_START.get(theme)},
                    stop: 1 {ColorPalette.WINDOW_GRADIENT_END.get(theme)});
            }}
            QWidget {{
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QFrame#card {{
                background-color: {ColorPalette.CARD_BG.get(theme)};
                color: {ColorPalette.CARD_TEXT.get(theme)};
                border-radius: 8px;
            }}
            QFrame#card QLabel {{
                color: {ColorPalette.CARD_TEXT.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.ACTION_BG.get(theme)};
                color: {ColorPalette.BUTTON_TEXT.get(theme)};
                border: none;
                border-radius: 8px;
                padding: 8px 16px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
            QPushButton#option {{
                background-color: {ColorPalette.OPTION_BG.get(theme)};
                padding: 12px;
            }}
            QPushButton#option:hover {{
                background-color: {ColorPalette.OPTION_HOVER_BG.get(theme)};
            }}
            QPushButton#option:checked {{
                background-color: {ColorPalette.OPTION_SELECTED_BG.get(theme)};
            }}
            QPushButton#submit {{
                background-color: {ColorPalette.SUBMIT_BG.get(theme)};
            }}
            QPushButton#submit:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
            }}
            QProgressBar {{
                border: none;
                border-radius: 3px;
                max-height: 6px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.TIMER.get(theme)};
                border-radius: 3px;
            }}
        """

    @staticmethod
    def get_header_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 26pt; font-weight: bold; color: {ColorPalette.HEADER_TEXT.get(theme)}; background: transparent;"

    @staticmethod
    def get_footer_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-style: italic; color: {ColorPalette.FOOTER_TEXT.get(theme)}; background: transparent;"

    @staticmethod
    def get_timer_style(theme: Theme, font_size: int, emphasized: bool = False, blink_state: bool = False) -> str:
        base_style = f"padding: 2px 6px; border-radius: 4px; font-weight: bold; font-size: {font_size}pt;"
        if not emphasized:
            return base_style + f" color: {ColorPalette.TIMER.get(theme)};"
        background = ColorPalette.TIMER_EMPHASIS_BG.get(theme) if blink_state else ColorPalette.ERROR.get(theme)
        return base_style + f" color: #fff; background-color: {background};"

    @staticmethod
    def get_status_label_style(color: ThemeColors, theme: Theme, font_size: int) -> str:
        return f"font-size: {font_size}pt; font-weight: 600; color: {color.get(theme)};"
