"""Tests for the severity level helpers."""

import pytest
from dispatch_file.levels import LOG_LEVELS, level_index, level_name, within_range


class TestLevelIndex:
    @pytest.mark.parametrize("level,expected", list(zip(LOG_LEVELS, range(len(LOG_LEVELS)))))
    def test_known_levels(self, level, expected):
        assert level_index(level) == expected

    @pytest.mark.parametrize("level,expected", [
        ("warn", 3),
        ("err", 4),
        ("crit", 5),
        ("emerg", 7),
        ("WARNING", 3),
        ("  Info ", 1),
    ])
    def test_aliases_and_case(self, level, expected):
        assert level_index(level) == expected

    def test_numeric(self):
        assert level_index(0) == 0
        assert level_index(7) == 7
        assert level_index("5") == 5

    @pytest.mark.parametrize("level", ["trace", "", 8, -1, None, True])
    def test_unknown(self, level):
        assert level_index(level) == -1


class TestLevelName:
    def test_canonical(self):
        assert level_name("WARN") == "warning"
        assert level_name(6) == "alert"

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            level_name("trace")


class TestWithinRange:
    @pytest.mark.parametrize("level,min_level,max_level,expected", [
        ("error", "info", None, True),
        ("info", "info", None, True),
        ("debug", "info", None, False),
        ("emergency", "debug", None, True),
        ("critical", "info", "error", False),
        ("error", "info", "error", True),
        ("notice", "notice", "notice", True),
    ])
    def test_range(self, level, min_level, max_level, expected):
        assert within_range(level, min_level, max_level) is expected

    def test_unknown_level_rejected(self):
        assert within_range("trace", "debug") is False
        assert within_range("error", "bogus") is False
        assert within_range("error", "debug", "bogus") is False
