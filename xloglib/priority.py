"""priority.py - Log priorities and override level parsing.

The priority scale mirrors the host's native logging priorities so that
integer values can be passed straight through to the host line logger:

    VERBOSE=2  DEBUG=3  INFO=4  WARN=5  ERROR=6  ASSERT=7

``SUPPRESS`` is not a priority a message can carry. It only appears as an
override value and sits above ASSERT, so ``priority >= SUPPRESS`` is never
true and every message is denied.
"""

from enum import IntEnum
from typing import Optional, Union


class Priority(IntEnum):
    """Ordered log priorities, from most to least verbose."""

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7

    @property
    def letter(self) -> str:
        """Single-letter host label, e.g. ``"D"`` for DEBUG."""
        return _LETTERS[self]


VERBOSE = Priority.VERBOSE
DEBUG = Priority.DEBUG
INFO = Priority.INFO
WARN = Priority.WARN
ERROR = Priority.ERROR
ASSERT = Priority.ASSERT

#: Override-only threshold that denies every priority.
SUPPRESS = 8

#: Threshold used when no override entry exists for the application tag.
DEFAULT_THRESHOLD = Priority.INFO

_LETTERS = {
    Priority.VERBOSE: "V",
    Priority.DEBUG: "D",
    Priority.INFO: "I",
    Priority.WARN: "W",
    Priority.ERROR: "E",
    Priority.ASSERT: "A",
}

# The host property reader only looks at the first character of the value.
# "F" (fatal) is the host's alias for ASSERT.
_THRESHOLDS = {
    "V": Priority.VERBOSE,
    "D": Priority.DEBUG,
    "I": Priority.INFO,
    "W": Priority.WARN,
    "E": Priority.ERROR,
    "A": Priority.ASSERT,
    "F": Priority.ASSERT,
    "S": SUPPRESS,
}


def parse_level(value: Optional[str]) -> Optional[Union[Priority, int]]:
    """Parse an override value into a threshold.

    Args:
        value: Raw override value such as ``"DEBUG"``, ``"warn"`` or
            ``"S"``. Leading and trailing whitespace is ignored.

    Returns:
        The matching Priority, ``SUPPRESS``, or ``None`` when the value is
        missing or not recognised (callers then fall back to
        ``DEFAULT_THRESHOLD``).

    Example:
        >>> parse_level("debug")
        <Priority.DEBUG: 3>
        >>> parse_level("SUPPRESS") == SUPPRESS
        True
        >>> parse_level("loud") is None
        True
    """
    if not value:
        return None
    value = value.strip()
    if not value:
        return None
    return _THRESHOLDS.get(value[0].upper())


def to_priority(value: int) -> Priority:
    """Coerce an integer priority into a Priority, raising ValueError if out of range."""
    return Priority(int(value))
