import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# scan order matters: first match is the reported line
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


class Player(Enum):
    """
    the two sides, X always opens
    """
    X = "X"
    O = "O"


class Cell(Enum):
    """
    one board square: empty or marked by a player
    """
    EMPTY = ""
    X = "X"
    O = "O"

    @classmethod
    def mark(cls, player: Player) -> "Cell":
        return cls(player.value)

    @property
    def player(self) -> Optional[Player]:
        # None for an empty square
        return None if self is Cell.EMPTY else Player(self.value)


Board = Tuple[Cell, ...]
EMPTY_BOARD: Board = (Cell.EMPTY,) * CELL_COUNT


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    result of evaluating one board
    """
    status: Status
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self):
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def evaluate(board) -> Outcome:
    """
    scan rows, cols, diags for 3 in a row, then check for a full board
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"board must have {CELL_COUNT} cells, got {len(board)}")
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return Outcome(Status.WIN, board[a].player, line)
    if all(cell is not Cell.EMPTY for cell in board):
        return DRAW
    return IN_PROGRESS


def player_for_step(step: int) -> Player:
    """X moves on even steps, O on odd ones"""
    return Player.X if step % 2 == 0 else Player.O


class InvalidStepError(ValueError):
    """raised by jump_to for a step outside the recorded history"""


@dataclass(frozen=True)
class HistoryEntry:
    step: int
    label: str


@dataclass(frozen=True)
class GameView:
    """
    everything the ui needs to draw one frame, derived fresh on every call
    """
    board: Board
    turn: Player
    outcome: Outcome
    step_number: int
    history_length: int

    @property
    def winner(self):
        return self.outcome.winner

    @property
    def winning_line(self):
        return self.outcome.line

    @property
    def is_over(self):
        return self.outcome.is_over

    @property
    def can_undo(self):
        return self.step_number > 0

    @property
    def can_redo(self):
        return self.step_number < self.history_length - 1


class GameLogic:
    """
    tic-tac-toe rules plus a board history for undo/redo/time travel
    """
    def __init__(self):
        """
        one empty board, cursor at the start, X to move
        """
        self._history = [EMPTY_BOARD]    # one snapshot per ply
        self._step_number = 0            # index of the shown board

    @property
    def history(self):
        return tuple(self._history)

    @property
    def step_number(self):
        return self._step_number

    @property
    def current_board(self) -> Board:
        return self._history[self._step_number]

    @property
    def current_player(self) -> Player:
        return player_for_step(self._step_number)

    def play(self, index):
        """
        mark cell `index` for the side to move
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        board = self.current_board
        if not isinstance(index, int) or isinstance(index, bool) \
           or not 0 <= index < CELL_COUNT:
            logger.debug("ignoring move at %r: not a board index", index)
            return "invalid"
        if evaluate(board).is_over:
            logger.debug("ignoring move at %d: game already over", index)
            return "invalid"
        if board[index] is not Cell.EMPTY:
            logger.debug("ignoring move at %d: cell taken", index)
            return "invalid"

        mover = self.current_player
        squares = list(board)
        squares[index] = Cell.mark(mover)
        # playing from an earlier step drops the old future
        del self._history[self._step_number + 1:]
        self._history.append(tuple(squares))
        self._step_number = len(self._history) - 1
        logger.debug("%s played %d (step %d)", mover.value, index, self._step_number)

        outcome = evaluate(self.current_board)
        if outcome.status is Status.WIN:
            logger.info("player %s wins on line %s", outcome.winner.value, outcome.line)
            return "win"
        if outcome.status is Status.DRAW:
            logger.info("game drawn")
            return "draw"
        return "continue"

    def jump_to(self, step):
        """
        move the cursor to `step` without touching history
        returns True if the cursor moved
        """
        if not isinstance(step, int) or isinstance(step, bool) \
           or not 0 <= step < len(self._history):
            raise InvalidStepError(
                f"step {step!r} outside history range 0..{len(self._history) - 1}"
            )
        if step == self._step_number:
            return False
        logger.debug("jump from step %d to %d", self._step_number, step)
        self._step_number = step
        return True

    def undo(self):
        # no-op at game start
        if self._step_number > 0:
            return self.jump_to(self._step_number - 1)
        logger.debug("nothing to undo")
        return False

    def redo(self):
        # no-op at the newest step
        if self._step_number < len(self._history) - 1:
            return self.jump_to(self._step_number + 1)
        logger.debug("nothing to redo")
        return False

    def reset(self):
        """
        clear history back to a fresh game
        """
        self._history = [EMPTY_BOARD]
        self._step_number = 0
        logger.debug("game reset")

    def view(self) -> GameView:
        board = self.current_board
        return GameView(
            board=board,
            turn=self.current_player,
            outcome=evaluate(board),
            step_number=self._step_number,
            history_length=len(self._history),
        )

    def history_entries(self):
        """
        one jump target per recorded step, labelled for the move list
        """
        return [
            HistoryEntry(step, f"Go to move #{step}" if step else "Go to game start")
            for step in range(len(self._history))
        ]
