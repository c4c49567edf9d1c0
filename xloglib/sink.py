"""sink.py - Host line loggers that receive composed LogCat lines.

This module defines the HostLogger protocol and two concrete hosts:

    StreamHostLogger  : writes logcat-style text to a stream (default: stderr).
    LoggingHostLogger : forwards lines to the standard library ``logging``
                        logger named after the application tag.

The façade hands every admitted line to exactly one host via
``println(priority, app_tag, line)`` and returns whatever byte count the host
reports. Hosts never re-check levels; that decision has already been made.

Typical usage::

    import xloglib
    from xloglib.sink import LoggingHostLogger

    xloglib.configure(host=LoggingHostLogger())
    xloglib.init("MyApp")
"""

import logging
import sys
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict

from .priority import Priority

#: Numeric ``logging`` level used for VERBOSE, below ``logging.DEBUG``.
LOGGING_VERBOSE = 5

logging.addLevelName(LOGGING_VERBOSE, "VERBOSE")

#: Priority → standard library ``logging`` level.
LOGGING_LEVELS: Dict[Priority, int] = {
    Priority.VERBOSE: LOGGING_VERBOSE,
    Priority.DEBUG: logging.DEBUG,
    Priority.INFO: logging.INFO,
    Priority.WARN: logging.WARNING,
    Priority.ERROR: logging.ERROR,
    Priority.ASSERT: logging.CRITICAL,
}

#: Attribute set on LogRecords produced by LoggingHostLogger.
HOST_RECORD_MARKER = "xloglib_host"


def entry_size(app_tag: str, line: str) -> int:
    """Return the size in bytes of a host log entry.

    A host entry is the priority byte, the NUL-terminated tag and the
    NUL-terminated message.
    """
    return 1 + len(app_tag.encode("utf-8")) + 1 + len(line.encode("utf-8")) + 1


class HostLogger(ABC):
    """Abstract base class for the host line logger.

    Any custom host must subclass this and implement ``println()``. Hosts
    must be safe to call from several threads at once.

    Example:
        >>> class ListHost(HostLogger):
        ...     def __init__(self):
        ...         self.lines = []
        ...     def println(self, priority, app_tag, line):
        ...         self.lines.append((priority, app_tag, line))
        ...         return len(line)
    """

    @abstractmethod
    def println(self, priority: Priority, app_tag: str, line: str) -> int:
        """Write one log entry.

        Args:
            priority: Priority of the entry.
            app_tag: Application tag to file the entry under.
            line: Fully composed message payload. May contain newlines.

        Returns:
            The number of bytes written, or a negative value on failure.
        """


class StreamHostLogger(HostLogger):
    """Write entries as logcat-style text to a writable stream.

    Each message line is written with its own header, so multi-line payloads
    (stack traces, thread lists) stay greppable::

        D/MyApp: Network: connected
        E/MyApp: Network: request failed
        E/MyApp: Traceback (most recent call last):

    Attributes:
        _stream: The writable file-like object to write to.
        _show_timestamp: If True, each line is prefixed with a local
            ``MM-DD HH:MM:SS.mmm`` timestamp.
        _lock (threading.Lock): Keeps the lines of one entry together.

    Example:
        >>> import sys
        >>> from xloglib.sink import StreamHostLogger
        >>> host = StreamHostLogger(stream=sys.stdout)
    """

    def __init__(self, stream=None, show_timestamp: bool = False) -> None:
        """Initialise the stream host.

        Args:
            stream: A writable file-like object. Defaults to ``sys.stderr``
                so that log output does not pollute the application's stdout.
            show_timestamp: If True, prepend a timestamp to every line.
        """
        self._stream = stream
        self._show_timestamp = show_timestamp
        self._lock = threading.Lock()

    def println(self, priority: Priority, app_tag: str, line: str) -> int:
        stream = self._stream or sys.stderr
        header = f"{Priority(priority).letter}/{app_tag}: "
        if self._show_timestamp:
            header = datetime.now().strftime("%m-%d %H:%M:%S.%f")[:-3] + " " + header

        text = "".join(f"{header}{part}\n" for part in line.split("\n"))
        try:
            with self._lock:
                stream.write(text)
                stream.flush()
        except OSError as exc:
            return -(exc.errno or 1)
        except ValueError:
            # Writing to a closed stream.
            return -1
        return len(text.encode("utf-8"))


class LoggingHostLogger(HostLogger):
    """Forward entries to the standard library ``logging`` module.

    Each entry becomes one LogRecord on the logger named
    ``<name_prefix><app_tag>``, at the ``logging`` level mapped from the
    priority (VERBOSE maps to the registered level 5). Records carry a
    ``xloglib_host`` attribute so that LogCatHandler can ignore them.

    Attributes:
        _name_prefix (str): Prefix for the target logger name.
    """

    def __init__(self, name_prefix: str = "") -> None:
        self._name_prefix = name_prefix

    def println(self, priority: Priority, app_tag: str, line: str) -> int:
        target = logging.getLogger(self._name_prefix + app_tag)
        level = LOGGING_LEVELS[Priority(priority)]
        target.log(level, line, extra={HOST_RECORD_MARKER: True})
        return entry_size(app_tag, line)


def default_host() -> HostLogger:
    """Return the host used when none is configured: stderr, no timestamps."""
    return StreamHostLogger()
