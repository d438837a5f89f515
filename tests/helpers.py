"""Helpers shared across test modules."""

from timetravel_ttt.game_logic import Cell, GameLogic


def make_board(text):
    """Build a board from a 9-char string of 'X', 'O' and '.'"""
    lookup = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY}
    return tuple(lookup[ch] for ch in text)


def play_moves(game, *indices):
    """Play each index in turn and return the list of results."""
    return [game.play(i) for i in indices]


def diff_cells(before, after):
    """Indices where two boards differ."""
    return [i for i, (a, b) in enumerate(zip(before, after)) if a != b]


def new_game_with(*indices):
    game = GameLogic()
    play_moves(game, *indices)
    return game
