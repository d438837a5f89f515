import logging
from enum import Enum

from PySide6.QtGui import QPalette, QColor

from .config import Config

logger = logging.getLogger(__name__)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    def opposite(self):
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class ThemeState:
    """
    light/dark preference, lives apart from the game
    """
    def __init__(self, theme=None):
        self.theme = Theme(theme or Config.DEFAULT_THEME)

    def toggle(self):
        # flip and return the new theme
        self.theme = self.theme.opposite()
        logger.debug("theme switched to %s", self.theme.value)
        return self.theme

    @property
    def is_dark(self):
        return self.theme is Theme.DARK

    @property
    def toggle_label(self):
        """button text names the theme you switch *to*"""
        return "Light" if self.is_dark else "Dark"

    @property
    def colors(self):
        return Config.DARK if self.is_dark else Config.LIGHT


def build_palette(theme: Theme) -> QPalette:
    """
    Build the Qt palette for a theme from the Config colour tables.
    """
    c = Config.DARK if theme is Theme.DARK else Config.LIGHT
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(c["window"]))
    palette.setColor(QPalette.WindowText, QColor(c["window_text"]))
    palette.setColor(QPalette.Base, QColor(c["base"]))
    palette.setColor(QPalette.AlternateBase, QColor(c["alt_base"]))
    palette.setColor(QPalette.Text, QColor(c["text"]))
    palette.setColor(QPalette.Button, QColor(c["button"]))
    palette.setColor(QPalette.ButtonText, QColor(c["button_text"]))
    palette.setColor(QPalette.Highlight, QColor(c["highlight"]))
    palette.setColor(QPalette.HighlightedText, QColor(c["highlighted_text"]))
    # Disabled roles
    disabled = QColor(c["disabled_text"])
    palette.setColor(QPalette.Disabled, QPalette.Text, disabled)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, disabled)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, disabled)
    return palette


def apply_palette(app, theme: Theme):
    """install the palette for `theme` on the running QApplication"""
    app.setPalette(build_palette(theme))
