"""test_priority.py - Unit tests for priorities and override level parsing.

Covers:
    - Native integer values and ordering of priorities
    - Host letters
    - parse_level() full names, first letters, case, whitespace, SUPPRESS
    - parse_level() returns None for missing and unknown values
"""

import pytest

from xloglib.priority import (
    ASSERT,
    DEBUG,
    DEFAULT_THRESHOLD,
    ERROR,
    INFO,
    SUPPRESS,
    VERBOSE,
    WARN,
    Priority,
    parse_level,
    to_priority,
)


class TestPriority:
    def test_priority_values_match_host_constants(self):
        """Priorities carry the host's native integer values."""
        assert [int(p) for p in Priority] == [2, 3, 4, 5, 6, 7]

    def test_priority_has_exactly_six_members(self):
        """SUPPRESS is not a member of the enum."""
        assert len(Priority) == 6
        assert SUPPRESS not in list(Priority)

    def test_priority_order_from_most_to_least_verbose(self):
        """VERBOSE < DEBUG < INFO < WARN < ERROR < ASSERT."""
        assert VERBOSE < DEBUG < INFO < WARN < ERROR < ASSERT

    def test_suppress_is_above_every_priority(self):
        """No priority reaches the SUPPRESS threshold."""
        assert all(p < SUPPRESS for p in Priority)

    @pytest.mark.parametrize(
        "priority, letter",
        [(VERBOSE, "V"), (DEBUG, "D"), (INFO, "I"), (WARN, "W"), (ERROR, "E"), (ASSERT, "A")],
    )
    def test_priority_letter(self, priority, letter):
        """Each priority maps to its host letter."""
        assert priority.letter == letter

    def test_default_threshold_is_info(self):
        assert DEFAULT_THRESHOLD is INFO

    def test_to_priority_accepts_plain_ints(self):
        assert to_priority(6) is ERROR

    def test_to_priority_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            to_priority(SUPPRESS)


class TestParseLevel:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("VERBOSE", VERBOSE),
            ("DEBUG", DEBUG),
            ("INFO", INFO),
            ("WARN", WARN),
            ("ERROR", ERROR),
            ("ASSERT", ASSERT),
            ("SUPPRESS", SUPPRESS),
        ],
    )
    def test_parse_level_full_names(self, value, expected):
        """Every documented level name is recognised."""
        assert parse_level(value) == expected

    def test_parse_level_is_case_insensitive(self):
        assert parse_level("debug") is DEBUG

    def test_parse_level_uses_first_letter(self):
        """Only the first character is significant, as on the host."""
        assert parse_level("W") is WARN
        assert parse_level("Warning") is WARN

    def test_parse_level_fatal_is_assert(self):
        assert parse_level("FATAL") is ASSERT

    def test_parse_level_strips_whitespace(self):
        assert parse_level("  error\n") is ERROR

    @pytest.mark.parametrize("value", [None, "", "   ", "LOUD", "1"])
    def test_parse_level_unknown_returns_none(self, value):
        """Missing or unrecognised values fall back to the default."""
        assert parse_level(value) is None
