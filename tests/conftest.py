"""Shared fixtures: a fresh engine, and a headless QApplication for widget tests."""

import os

import pytest

from timetravel_ttt.game_logic import GameLogic

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def game():
    return GameLogic()


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
