"""Tests for config helpers."""

from timetravel_ttt.config import DEFAULT_LOG_LEVEL, resolve_log_level


class TestResolveLogLevel:
    def test_known_levels_pass_through(self):
        assert resolve_log_level("debug") == "DEBUG"
        assert resolve_log_level(" Info ") == "INFO"
        assert resolve_log_level("ERROR") == "ERROR"

    def test_unknown_level_falls_back(self):
        assert resolve_log_level("verbose") == DEFAULT_LOG_LEVEL
        assert resolve_log_level("42") == DEFAULT_LOG_LEVEL

    def test_missing_level_uses_default(self):
        assert resolve_log_level(None) == DEFAULT_LOG_LEVEL
        assert resolve_log_level("") == DEFAULT_LOG_LEVEL
