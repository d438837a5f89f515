from ..config import Config
from ..game_logic import GameLogic
from ..theme import ThemeState, apply_palette
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QListWidget, QListWidgetItem,
    QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: renders engine views and forwards user commands
    """
    def __init__(self, game_logic=None, theme_state=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        # two independent state holders, only composed here
        self.game_logic = game_logic or GameLogic()
        self.theme_state = theme_state or ThemeState()
        self.board_widget = BoardWidget(self.game_logic.view(),
                                        self.theme_state.colors, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(Config.WINDOW_TITLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); f.setBold(True); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.status_label)

        board_row = QHBoxLayout()
        board_row.addWidget(self.board_widget, 1)
        self._create_history_list()        # time travel list
        board_row.addWidget(self.history_list)
        self.main_layout.addLayout(board_row, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # undo/reset/redo + indicator
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_history_list(self):
        # one row per history step, click to jump
        self.history_list = QListWidget()
        self.history_list.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Expanding)
        self.history_list.setMinimumWidth(140)
        self.history_list.itemClicked.connect(self._on_history_clicked)

    def _create_bottom_controls(self):
        # undo/reset/redo row, player indicator, theme toggle
        self.controls_bottom_widget = QWidget()
        vl = QVBoxLayout(self.controls_bottom_widget)
        hl = QHBoxLayout()
        self.undo_button = QPushButton("Undo"); self.undo_button.clicked.connect(self.undo)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        self.redo_button = QPushButton("Redo"); self.redo_button.clicked.connect(self.redo)
        for w in (None, self.undo_button, self.reset_button, self.redo_button, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        vl.addLayout(hl)

        il = QHBoxLayout()
        self.x_indicator = QLabel("X"); self.o_indicator = QLabel("O")
        for w in (None, self.x_indicator, QLabel("vs"), self.o_indicator, None):
            if w: il.addWidget(w)
            else: il.addStretch(1)
        vl.addLayout(il)

        self.theme_button = QPushButton("")
        self.theme_button.clicked.connect(self.toggle_theme)
        vl.addWidget(self.theme_button, alignment=Qt.AlignCenter)

    def status_text(self, view):
        """
        status line for a view: winner, draw, or side to move
        """
        if view.winner:
            return f"Winner: {view.winner.value}"
        if view.is_over:
            return "It's a draw!"
        return f"Next: {view.turn.value}"

    def refresh(self):
        """
        pull a fresh view from the engine and redraw everything
        """
        view = self.game_logic.view()
        self.board_widget.set_view(view)
        self.status_label.setText(self.status_text(view))
        self.undo_button.setEnabled(view.can_undo)
        self.redo_button.setEnabled(view.can_redo)
        self._update_indicator(view)
        self._update_history_list(view)
        self.theme_button.setText(self.theme_state.toggle_label)

    def _update_indicator(self, view):
        # bold + accent colour on the side to move
        for label, player, color in ((self.x_indicator, "X", Config.X_COLOR),
                                     (self.o_indicator, "O", Config.O_COLOR)):
            active = view.turn.value == player and not view.is_over
            style = f"color: {color};"
            if active: style += " font-weight: bold; text-decoration: underline;"
            label.setStyleSheet(style)

    def _update_history_list(self, view):
        # rows only rebuilt when history length changes, a jump just moves the mark
        entries = self.game_logic.history_entries()
        if self.history_list.count() != len(entries):
            self.history_list.clear()
            for entry in entries:
                item = QListWidgetItem(entry.label)
                item.setData(Qt.UserRole, entry.step)
                self.history_list.addItem(item)
        for row in range(self.history_list.count()):
            item = self.history_list.item(row)
            f = item.font(); f.setBold(row == view.step_number); item.setFont(f)
        self.history_list.setCurrentRow(view.step_number)

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game_logic.play(index)
        if res != "invalid":
            self.refresh()

    @Slot(QListWidgetItem)
    def _on_history_clicked(self, item):
        self.jump_to(item.data(Qt.UserRole))

    def jump_to(self, step):
        if self.game_logic.jump_to(step):
            self.refresh()

    @Slot()
    def undo(self):
        if self.game_logic.undo():
            self.refresh()

    @Slot()
    def redo(self):
        if self.game_logic.redo():
            self.refresh()

    @Slot()
    def reset_game(self):
        # back to a fresh game, theme untouched
        self.game_logic.reset()
        self.refresh()

    @Slot()
    def toggle_theme(self):
        theme = self.theme_state.toggle()
        app = QApplication.instance()
        if app is not None:
            apply_palette(app, theme)
        self.board_widget.set_colors(self.theme_state.colors)
        self.theme_button.setText(self.theme_state.toggle_label)
