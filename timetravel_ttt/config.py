"""
App settings for time-travel tic-tac-toe.
Colours, window setup and logging defaults live here.
"""

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(name):
    """
    Level name for logging.basicConfig, WARNING if `name` is not a known level.
    """
    level = (name or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


class Config:
    """
    Configuration constants.
    Change these values to restyle the app.
    """

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BOARD_MIN_SIZE = 150          # px, board stays square
    QT_STYLE = "Fusion"

    # ==================== THEME ====================
    DEFAULT_THEME = "light"       # "light" or "dark"

    # ==================== LOGGING ====================
    LOG_LEVEL = resolve_log_level(os.environ.get("TTT_LOG_LEVEL"))
    LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

    # ==================== BOARD COLOURS ====================
    # player marks, same for both themes
    X_COLOR = "#1e90ff"
    O_COLOR = "#ff6347"
    HIGHLIGHT_COLOR = "#ffe08a"   # winning line squares
    MARK_PEN_WIDTH = 4
    GRID_PEN_WIDTH = 2

    # ==================== LIGHT PALETTE ====================
    LIGHT = {
        "window": "#f6f7f9",
        "window_text": "#23272f",
        "base": "#ffffff",
        "alt_base": "#eceff3",
        "text": "#23272f",
        "button": "#e4e7ec",
        "button_text": "#23272f",
        "highlight": "#1e90ff",
        "highlighted_text": "#ffffff",
        "disabled_text": "#9aa0a6",
        "board_bg": "#ffffff",
        "grid": "#c5cad3",
    }

    # ==================== DARK PALETTE ====================
    DARK = {
        "window": "#353535",
        "window_text": "#ffffff",
        "base": "#232323",
        "alt_base": "#353535",
        "text": "#ffffff",
        "button": "#424242",
        "button_text": "#ffffff",
        "highlight": "#2a82da",
        "highlighted_text": "#ffffff",
        "disabled_text": "#7f7f7f",
        "board_bg": "#333333",
        "grid": "#555555",
    }
