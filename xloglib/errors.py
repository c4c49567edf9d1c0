"""errors.py - Exception types raised by the LogCat façade.

Level denial is never an exception: it is reported by the ``-1`` return
value of every logging call. Only argument and state errors are raised.
"""


class LogCatError(Exception):
    """Base class for all errors raised by xloglib."""


class NotInitializedError(LogCatError, RuntimeError):
    """Raised when a logging call is made before ``init()`` has succeeded."""

    def __init__(self, message: str = "LogCat: You should init LogCat before use it.") -> None:
        super().__init__(message)


class InvalidTagError(LogCatError, ValueError):
    """Raised by ``init()`` when the application tag is empty or too long."""


class InvalidFormatError(LogCatError, ValueError):
    """Raised by format-variant calls when the format string is missing or malformed."""
