import logging
import sys

from PySide6.QtWidgets import QApplication
from timetravel_ttt.config import Config
from timetravel_ttt.theme import ThemeState, apply_palette
from timetravel_ttt.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    """
    Configure logging, build the app with the default theme and run it.
    """
    logging.basicConfig(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)
    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle(Config.QT_STYLE)

    theme_state = ThemeState()
    apply_palette(app, theme_state.theme)

    window = TicTacToeWindow(theme_state=theme_state)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
