"""handler.py - Route standard library logging through the LogCat façade.

LogCatHandler lets code that already uses ``logging.getLogger(__name__)``
share the application tag and level overrides of the façade. Attach it once:

    import logging
    import xloglib
    from xloglib import LogCatHandler

    xloglib.init("MyApp")
    logging.getLogger().addHandler(LogCatHandler())
    logging.getLogger().setLevel(logging.DEBUG)

    logging.getLogger("net").warning("retrying")   # W/MyApp: net: retrying

Level mapping:
    < DEBUG      → VERBOSE
    < INFO       → DEBUG
    < WARNING    → INFO
    < ERROR      → WARN
    < CRITICAL   → ERROR
    >= CRITICAL  → ASSERT

The logger name becomes the component tag and ``exc_info`` becomes the
attached error. The façade's level gate still applies on top of the
``logging`` levels.
"""

import logging
from typing import Optional

from . import core
from .priority import Priority
from .sink import HOST_RECORD_MARKER

#: Records from the package's own loggers are never fed back into the façade.
_PACKAGE = __name__.partition(".")[0]


def priority_for(levelno: int) -> Priority:
    """Map a ``logging`` level number to the nearest LogCat priority."""
    if levelno < logging.DEBUG:
        return Priority.VERBOSE
    if levelno < logging.INFO:
        return Priority.DEBUG
    if levelno < logging.WARNING:
        return Priority.INFO
    if levelno < logging.ERROR:
        return Priority.WARN
    if levelno < logging.CRITICAL:
        return Priority.ERROR
    return Priority.ASSERT


def _is_internal(name: str) -> bool:
    return name == _PACKAGE or name.startswith(_PACKAGE + ".")


class LogCatHandler(logging.Handler):
    """A logging.Handler that forwards records to a LogCat.

    Records produced by LoggingHostLogger and records from xloglib's own
    loggers are skipped, so the façade can use ``logging`` as its host while
    this handler sits on the root logger.

    Attributes:
        _logcat (LogCat): Target façade, or None for the process-wide one
            (looked up on every record so ``configure()`` is honoured).
        _component_tags (bool): If True, the record's logger name is used as
            the component tag.
    """

    def __init__(self, logcat: Optional[core.LogCat] = None, component_tags: bool = True,
                 level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logcat = logcat
        self._component_tags = component_tags

    @property
    def logcat(self) -> core.LogCat:
        return self._logcat if self._logcat is not None else core.get_default()

    def emit(self, record: logging.LogRecord) -> None:
        """Forward one record.

        Failures (including a façade that was never initialised) go to
        ``handleError()`` so that logging never breaks the application.
        """
        if getattr(record, HOST_RECORD_MARKER, False) or _is_internal(record.name):
            return
        try:
            tr = record.exc_info[1] if record.exc_info else None
            tag = record.name if self._component_tags else None
            self.logcat.println(priority_for(record.levelno), tag, record.getMessage(), tr=tr)
        except Exception:
            self.handleError(record)
