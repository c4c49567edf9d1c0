"""overrides.py - External level override source for application tags.

Operators raise or lower the minimum admitted priority of an application by
setting a property keyed ``log.tag.<AppTag>``:

    log.tag.MyApp=DEBUG

Values are VERBOSE, DEBUG, INFO, WARN, ERROR, ASSERT or SUPPRESS. Only the
first letter is significant and matching is case-insensitive. SUPPRESS turns
off all logging for the tag. When no entry exists (or the value is not
recognised) the threshold is INFO.

``SystemProperties`` is the default source. It looks up, in order:

    1. properties set programmatically with ``setprop()`` or ``load()``,
    2. the process environment (``os.environ``) under the same key.

Typical usage::

    from xloglib.overrides import system_properties

    system_properties.setprop("log.tag.MyApp", "VERBOSE")
    system_properties.load("/data/local.prop")
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Union

from .priority import Priority, parse_level

logger = logging.getLogger(__name__)

#: Prefix of the property key that carries the level for an application tag.
PROPERTY_PREFIX = "log.tag."


def property_key(app_tag: str) -> str:
    """Return the override property key for ``app_tag``."""
    return PROPERTY_PREFIX + app_tag


class OverrideSource(ABC):
    """Abstract base class for level override lookups.

    Implementations are consulted read-only on every admission check, so
    ``get_level()`` should be cheap.

    Example:
        >>> class FixedOverrides(OverrideSource):
        ...     def get_level(self, app_tag):
        ...         return Priority.WARN
    """

    @abstractmethod
    def get_level(self, app_tag: str) -> Optional[Union[Priority, int]]:
        """Return the threshold for ``app_tag``.

        Args:
            app_tag: The trimmed application tag.

        Returns:
            A Priority, ``SUPPRESS``, or ``None`` when there is no usable
            entry for the tag.
        """


class SystemProperties(OverrideSource):
    """Process-wide property store with an environment fallback.

    Attributes:
        _props (dict): Properties set through ``setprop()`` or ``load()``.
        _environ: Mapping consulted when a key is not in ``_props``.
            Defaults to ``os.environ``.
        _lock (threading.Lock): Guards writes to ``_props``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._props: Dict[str, str] = {}
        self._environ = os.environ if environ is None else environ
        self._lock = threading.Lock()

    def getprop(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the raw value of ``key``, or ``default`` if unset."""
        value = self._props.get(key)
        if value is None:
            value = self._environ.get(key)
        return default if value is None else value

    def setprop(self, key: str, value: Optional[str]) -> None:
        """Set ``key`` to ``value``; a ``None`` value removes the property."""
        with self._lock:
            if value is None:
                self._props.pop(key, None)
            else:
                self._props[key] = str(value)

    def clear(self) -> None:
        """Remove every programmatically set property."""
        with self._lock:
            self._props.clear()

    def load(self, path: str, encoding: str = "utf-8") -> int:
        """Load ``key=value`` lines from a ``local.prop``-style file.

        Blank lines and lines starting with ``#`` are skipped. Lines without
        ``=`` are ignored.

        Args:
            path: File to read.
            encoding: File encoding. Defaults to ``"utf-8"``.

        Returns:
            The number of properties loaded.

        Raises:
            OSError: If the file cannot be read.
        """
        loaded = {}
        with open(path, encoding=encoding) as f:
            for lineno, raw in enumerate(f, start=1):
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                key, sep, value = line.partition("=")
                if not sep:
                    logger.debug("%s:%d: skipping line without '='", path, lineno)
                    continue
                loaded[key.strip()] = value.strip()

        with self._lock:
            self._props.update(loaded)
        return len(loaded)

    def get_level(self, app_tag: str) -> Optional[Union[Priority, int]]:
        raw = self.getprop(property_key(app_tag))
        if raw is None:
            return None
        level = parse_level(raw)
        if level is None:
            logger.debug("Ignoring unrecognised level %r for tag %r", raw, app_tag)
        return level


#: The process-wide default override source.
system_properties = SystemProperties()
