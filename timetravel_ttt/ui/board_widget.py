from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import Config
from ..game_logic import BOARD_SIZE, Cell


class BoardWidget(QWidget):
    """
    custom widget to draw a GameView and report clicked cells
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, view, colors=None, parent=None):
        super().__init__(parent)
        self.view = view                # latest GameView to draw
        self.colors = colors or Config.LIGHT
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(Config.BOARD_MIN_SIZE, Config.BOARD_MIN_SIZE))

    def set_view(self, view):
        # swap in a fresh snapshot and repaint
        self.view = view
        self.update()

    def set_colors(self, colors):
        self.colors = colors
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        """
        square board area centred in the widget: (offset_x, offset_y, side)
        """
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(self.colors["board_bg"]))
            cell_size = side / BOARD_SIZE
            # winning squares first so grid + marks sit on top
            for i in self.view.winning_line or ():
                r, c = divmod(i, BOARD_SIZE)
                painter.fillRect(
                    QRectF(offset_x + c * cell_size, offset_y + r * cell_size,
                           cell_size, cell_size),
                    QColor(Config.HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(self.colors["grid"]), Config.GRID_PEN_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i * cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))
            # draw marks
            for i, cell in enumerate(self.view.board):
                if cell is Cell.EMPTY: continue
                r, c = divmod(i, BOARD_SIZE)
                cx = offset_x + c * cell_size + cell_size / 2
                cy = offset_y + r * cell_size + cell_size / 2
                rad = cell_size / 2 * 0.6
                if cell is Cell.X:
                    painter.setPen(QPen(QColor(Config.X_COLOR), Config.MARK_PEN_WIDTH))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(Config.O_COLOR), Config.MARK_PEN_WIDTH))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if self.view.is_over:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
