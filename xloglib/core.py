"""core.py - The LogCat façade: initialization, level gate and composer.

Every admitted call follows the same path:

    caller → v/d/i/w/e → println() → level gate → compose → host.println()

A denied call returns ``-1`` before any formatting, obfuscation or host
work happens. An admitted call returns the host's byte count.

Composed payloads look like::

    <ComponentTag>: <message>[\\n<traceback of attached error>]

and the host files them under the application tag, so a stream host prints
``D/MyApp: Network: connected``.

The module keeps one process-wide LogCat (``_default``) behind the
module-level functions re-exported by ``xloglib``. Independent instances can
be created directly, for example in tests.
"""

import threading
import traceback
from typing import Any, Iterable, NamedTuple, Optional, Tuple

from .diagnostics import (
    MEMORY_ERROR_MESSAGE,
    NULL_THREAD_MESSAGE,
    MemoryReader,
    capture_stack,
    enumerate_threads,
    format_stack,
    format_threads,
    memory_errors,
    read_memory_info,
)
from .errors import InvalidFormatError, InvalidTagError, NotInitializedError
from .obfuscator import Obfuscator, ObfuscatorRegistry
from .overrides import OverrideSource, system_properties
from .priority import DEFAULT_THRESHOLD, Priority, to_priority
from .sink import HostLogger, default_host

#: Component tag of the façade's own messages.
LOG_TAG = "LogCat"

#: Separator between the component tag and the message.
TAG_DELIMITER = ": "

#: Maximum length of the application tag, in UTF-8 bytes.
TAG_MAX_LENGTH = 23

_CURRENT_THREAD = object()


class _State(NamedTuple):
    app_tag: str
    force_verbose: bool


def is_tag_empty(tag: Optional[str]) -> bool:
    """Return True if ``tag`` is None, empty or whitespace-only."""
    return tag is None or not str(tag).strip()


def validate_tag(tag: Any) -> str:
    """Return the trimmed application tag or raise InvalidTagError."""
    if not isinstance(tag, str) or is_tag_empty(tag):
        raise InvalidTagError(f"{LOG_TAG}{TAG_DELIMITER}The tag is null or empty")
    tag = tag.strip()
    if len(tag.encode("utf-8")) > TAG_MAX_LENGTH:
        raise InvalidTagError(f"{LOG_TAG}{TAG_DELIMITER}The tag is too long")
    return tag


def get_stack_trace_string(tr: Optional[BaseException]) -> str:
    """Return the formatted traceback of ``tr``, including chained causes.

    Returns an empty string for ``None``.
    """
    if tr is None:
        return ""
    lines = traceback.format_exception(type(tr), tr, tr.__traceback__)
    return "".join(lines).rstrip("\n")


def _expand(fmt: Any, args: Tuple[Any, ...]) -> str:
    if not isinstance(fmt, str):
        raise InvalidFormatError(f"format must be a string, got {type(fmt).__name__}")
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise InvalidFormatError(f"bad format {fmt!r}: {exc}") from exc


def _dump_args(args, tag, priority, target):
    """Resolve ``[tag], [priority], [target]`` positional arguments."""
    args = list(args)
    if args and (args[0] is None or isinstance(args[0], str)):
        tag = args.pop(0)
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        priority = args.pop(0)
    if args:
        target = args.pop(0)
    if args:
        raise TypeError(f"too many positional arguments: {len(args)} left over")
    return tag, to_priority(priority), target


class LogCat:
    """Process-wide logging façade bound to one application tag.

    Generally, use the ``v()``, ``d()``, ``i()``, ``w()`` and ``e()``
    methods. Each accepts:

        L(msg)                 message only
        L(tag, msg)            component tag and message
        L(tag, fmt, *args)     printf-style format, expanded as ``fmt % args``
        L(msg, err)            message with attached exception
        L(tag, msg, err)       component tag, message and exception

    In the three-argument form a trailing ``None`` means "no exception", so
    ``L(tag, msg, None)`` logs ``msg`` as is and is not a format call.

    ``w()`` also takes ``w(err)`` and ``w(tag, err)``, logging the exception's
    traceback as the message. ``d()`` also takes ``d(tag, msg, obfuscate)``
    with a bool third argument.

    Before logging anything, call ``init()`` with the application tag. The
    default minimum priority is INFO; operators change it with the
    ``log.tag.<AppTag>`` override (see ``xloglib.overrides``).

    Attributes:
        _host (HostLogger): Receives every admitted line.
        _overrides (OverrideSource): Consulted on every admission check.
        _memory_reader: Callable returning the memory snapshot text.
        _obfuscation (ObfuscatorRegistry): Installed obfuscator and default.
        _state (_State): Application tag and force-verbose flag, or None
            before ``init()``. Replaced as a whole under ``_lock``.
    """

    def __init__(
        self,
        host: Optional[HostLogger] = None,
        overrides: Optional[OverrideSource] = None,
        memory_reader: Optional[MemoryReader] = None,
    ) -> None:
        """Create an uninitialised façade.

        Args:
            host: Host line logger. Defaults to a StreamHostLogger on stderr.
            overrides: Level override source. Defaults to the process-wide
                ``system_properties``.
            memory_reader: Snapshot routine for ``print_memory_info()``.
                Defaults to ``read_memory_info``.
        """
        self._host = host if host is not None else default_host()
        self._overrides = overrides if overrides is not None else system_properties
        self._memory_reader = memory_reader or read_memory_info
        self._obfuscation = ObfuscatorRegistry()
        self._state: Optional[_State] = None
        self._lock = threading.Lock()

    # ---------------------------------------------------------------------- #
    # Initialisation and state
    # ---------------------------------------------------------------------- #

    def init(self, tag: str, force_verbose: bool = False) -> None:
        """Set the application tag used for every line.

        Calling ``init()`` again replaces the tag and flag atomically.

        Args:
            tag: Application tag. Surrounding whitespace is trimmed.
            force_verbose: If True, every priority is admitted regardless of
                overrides.

        Raises:
            InvalidTagError: If the tag is None, empty or whitespace-only, or
                longer than 23 bytes after trimming.
        """
        app_tag = validate_tag(tag)
        with self._lock:
            self._state = _State(app_tag, bool(force_verbose))
        self.d(LOG_TAG, "Init with app tag - " + app_tag)

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def app_tag(self) -> Optional[str]:
        state = self._state
        return state.app_tag if state is not None else None

    @property
    def force_verbose(self) -> bool:
        state = self._state
        return state is not None and state.force_verbose

    @property
    def host(self) -> HostLogger:
        return self._host

    def _require_state(self) -> _State:
        state = self._state
        if state is None:
            raise NotInitializedError()
        return state

    # ---------------------------------------------------------------------- #
    # Level gate
    # ---------------------------------------------------------------------- #

    def _admits(self, state: _State, priority: Priority) -> bool:
        if state.force_verbose:
            return True
        threshold = self._overrides.get_level(state.app_tag)
        if threshold is None:
            threshold = DEFAULT_THRESHOLD
        return priority >= threshold

    def is_loggable(self, priority: int) -> bool:
        """Return whether ``priority`` would be logged for the application tag.

        Raises:
            NotInitializedError: If ``init()`` has not been called.
        """
        return self._admits(self._require_state(), to_priority(priority))

    def is_debug(self) -> bool:
        """Shortcut for ``is_loggable(DEBUG)``."""
        return self.is_loggable(Priority.DEBUG)

    # ---------------------------------------------------------------------- #
    # Obfuscation
    # ---------------------------------------------------------------------- #

    def set_obfuscator(self, obfuscator: Optional[Obfuscator]) -> None:
        """Install a message transform, or remove it with ``None``."""
        self._require_state()
        self._obfuscation.set_obfuscator(obfuscator)

    def set_obfuscate_by_default(self, flag: bool) -> None:
        """Set whether messages are obfuscated when the call does not say."""
        self._require_state()
        self._obfuscation.set_obfuscate_by_default(flag)

    # ---------------------------------------------------------------------- #
    # Composer
    # ---------------------------------------------------------------------- #

    def println(
        self,
        priority: int,
        tag: Optional[str],
        msg: Any,
        *args: Any,
        tr: Optional[BaseException] = None,
        obfuscate: Optional[bool] = None,
    ) -> int:
        """Low-level logging call.

        Args:
            priority: The priority of this message.
            tag: Component tag, prefixed to the message. May be None.
            msg: The message, or a printf-style format when ``args`` is given.
            *args: Format arguments.
            tr: An exception whose traceback is appended to the message.
            obfuscate: Per-call obfuscation decision; None uses the default.

        Returns:
            The number of bytes written by the host, or -1 if the priority is
            not loggable.

        Raises:
            NotInitializedError: If ``init()`` has not been called.
            InvalidFormatError: If ``args`` is given and ``msg`` is not a
                valid format for them.
        """
        state = self._require_state()
        priority = to_priority(priority)
        if not self._admits(state, priority):
            return -1

        if args:
            msg = _expand(msg, args)
        else:
            msg = str(msg)

        if tr is not None:
            msg = msg + "\n" + get_stack_trace_string(tr)

        msg = self._obfuscation.apply(msg, obfuscate)

        if not is_tag_empty(tag):
            msg = f"{tag}{TAG_DELIMITER}{msg}"

        return self._host.println(priority, state.app_tag, msg)

    def _log(self, priority: Priority, args: Tuple[Any, ...], obfuscate: Optional[bool] = None) -> int:
        tr = None
        if len(args) in (2, 3) and isinstance(args[-1], BaseException):
            tr, args = args[-1], args[:-1]
        elif len(args) == 3 and args[-1] is None:
            args = args[:-1]
        if not args:
            raise TypeError("a message is required")
        if len(args) == 1:
            return self.println(priority, None, args[0], tr=tr, obfuscate=obfuscate)
        tag, msg, *fmt_args = args
        return self.println(priority, tag, msg, *fmt_args, tr=tr, obfuscate=obfuscate)

    # ---------------------------------------------------------------------- #
    # Per-level entry points
    # ---------------------------------------------------------------------- #

    def v(self, *args: Any) -> int:
        """Send a VERBOSE log message."""
        return self._log(Priority.VERBOSE, args)

    def d(self, *args: Any, obfuscate: Optional[bool] = None) -> int:
        """Send a DEBUG log message.

        ``d(tag, msg, True)`` and ``d(tag, msg, obfuscate=True)`` force
        obfuscation for this message; ``False`` bypasses it.
        """
        if obfuscate is None and len(args) == 3 and isinstance(args[2], bool):
            obfuscate = args[2]
            args = args[:2]
        return self._log(Priority.DEBUG, args, obfuscate=obfuscate)

    def i(self, *args: Any) -> int:
        """Send an INFO log message."""
        return self._log(Priority.INFO, args)

    def w(self, *args: Any) -> int:
        """Send a WARN log message.

        ``w(err)`` and ``w(tag, err)`` log the traceback of ``err`` as the
        message itself.
        """
        if len(args) in (1, 2) and isinstance(args[-1], BaseException):
            tag = args[0] if len(args) == 2 else None
            return self.println(Priority.WARN, tag, get_stack_trace_string(args[-1]))
        return self._log(Priority.WARN, args)

    def e(self, *args: Any) -> int:
        """Send an ERROR log message."""
        return self._log(Priority.ERROR, args)

    # ---------------------------------------------------------------------- #
    # Diagnostic dumpers
    # ---------------------------------------------------------------------- #

    def print_stack_trace(
        self,
        *args: Any,
        tag: Optional[str] = None,
        priority: int = Priority.DEBUG,
        thread: Optional[threading.Thread] = _CURRENT_THREAD,
    ) -> int:
        """Log the current stack of a thread, one frame per line.

        Positional form: ``print_stack_trace([tag], [priority], [thread])``.
        The thread defaults to the calling thread and the priority to DEBUG.
        An explicit ``None`` thread logs a warning instead.
        """
        state = self._require_state()
        tag, priority, thread = _dump_args(args, tag, priority, thread)
        if thread is None:
            return self.println(Priority.WARN, tag, NULL_THREAD_MESSAGE)
        if thread is _CURRENT_THREAD:
            thread = threading.current_thread()
        if not self._admits(state, priority):
            return -1
        return self.println(priority, tag, format_stack(capture_stack(thread)))

    def print_threads(
        self,
        *args: Any,
        tag: Optional[str] = None,
        priority: int = Priority.DEBUG,
        group: Optional[Iterable[threading.Thread]] = None,
    ) -> int:
        """Log the live threads of a group, one per line.

        Positional form: ``print_threads([tag], [priority], [group])``. The
        group defaults to every live thread and the priority to DEBUG.
        """
        self._require_state()
        tag, priority, group = _dump_args(args, tag, priority, group)
        return self.println(priority, tag, format_threads(enumerate_threads(group)))

    def print_memory_info(self, priority: int = Priority.DEBUG) -> int:
        """Log a memory snapshot under the application tag.

        The snapshot goes to the host as is: no component tag, no
        obfuscation. If it cannot be read, an ERROR line is logged instead.
        """
        state = self._require_state()
        priority = to_priority(priority)
        if not self._admits(state, priority):
            return -1
        try:
            info = self._memory_reader()
        except memory_errors:
            return self._host.println(Priority.ERROR, state.app_tag, MEMORY_ERROR_MESSAGE)
        return self._host.println(priority, state.app_tag, info)


# =============================================================================
# Module-level singleton
# =============================================================================

_default = LogCat()


def get_default() -> LogCat:
    """Return the process-wide LogCat used by the module-level functions."""
    return _default


def configure(
    host: Optional[HostLogger] = None,
    overrides: Optional[OverrideSource] = None,
    memory_reader: Optional[MemoryReader] = None,
) -> LogCat:
    """Replace the process-wide LogCat with a freshly configured one.

    Call once at program startup, before ``init()``: the new instance is
    uninitialised.
    """
    global _default
    _default = LogCat(host=host, overrides=overrides, memory_reader=memory_reader)
    return _default


def init(tag: str, force_verbose: bool = False) -> None:
    """Initialise the process-wide LogCat. See ``LogCat.init``."""
    _default.init(tag, force_verbose)


def is_loggable(priority: int) -> bool:
    return _default.is_loggable(priority)


def is_debug() -> bool:
    return _default.is_debug()


def set_obfuscator(obfuscator: Optional[Obfuscator]) -> None:
    _default.set_obfuscator(obfuscator)


def set_obfuscate_by_default(flag: bool) -> None:
    _default.set_obfuscate_by_default(flag)


def println(priority: int, tag: Optional[str], msg: Any, *args: Any, **kwargs: Any) -> int:
    return _default.println(priority, tag, msg, *args, **kwargs)


def v(*args: Any) -> int:
    return _default.v(*args)


def d(*args: Any, obfuscate: Optional[bool] = None) -> int:
    return _default.d(*args, obfuscate=obfuscate)


def i(*args: Any) -> int:
    return _default.i(*args)


def w(*args: Any) -> int:
    return _default.w(*args)


def e(*args: Any) -> int:
    return _default.e(*args)


def print_stack_trace(*args: Any, **kwargs: Any) -> int:
    return _default.print_stack_trace(*args, **kwargs)


def print_threads(*args: Any, **kwargs: Any) -> int:
    return _default.print_threads(*args, **kwargs)


def print_memory_info(priority: int = Priority.DEBUG) -> int:
    return _default.print_memory_info(priority)
