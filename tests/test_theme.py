"""Tests for the light/dark theme state and its palettes."""

from timetravel_ttt.config import Config
from timetravel_ttt.theme import Theme, ThemeState, build_palette


class TestThemeState:
    def test_defaults_to_light(self):
        state = ThemeState()
        assert state.theme is Theme.LIGHT
        assert not state.is_dark
        assert state.toggle_label == "Dark"
        assert state.colors is Config.LIGHT

    def test_toggle_flips_back_and_forth(self):
        state = ThemeState()
        assert state.toggle() is Theme.DARK
        assert state.toggle_label == "Light"
        assert state.colors is Config.DARK
        assert state.toggle() is Theme.LIGHT

    def test_accepts_name_or_member(self):
        assert ThemeState("dark").theme is Theme.DARK
        assert ThemeState(Theme.DARK).theme is Theme.DARK


class TestPalette:
    def test_palettes_differ(self, qapp):
        from PySide6.QtGui import QPalette

        light = build_palette(Theme.LIGHT)
        dark = build_palette(Theme.DARK)
        assert light.color(QPalette.Window).name() == Config.LIGHT["window"]
        assert dark.color(QPalette.Window).name() == Config.DARK["window"]
