"""xloglib/__init__.py - Public API for the xloglib package.

xloglib is a process-wide logging façade. Every line an application writes
is filed under one application tag, filtered by priority, and prefixed with
an optional component tag:

    D/MyApp: Network: connected

Quick start:
    import xloglib

    # 1. Initialise once, with the app tag (at most 23 bytes)
    xloglib.init("MyApp")

    # 2. Log with an optional component tag
    TAG = "Network"
    xloglib.i(TAG, "connected")
    xloglib.d(TAG, "payload %d bytes", 512)     # dropped: default level is INFO
    xloglib.e(TAG, "request failed", exc)

    # 3. Raise verbosity for the app tag without touching code
    #    (environment or programmatic property)
    #        log.tag.MyApp=VERBOSE

    # 4. Diagnostics
    xloglib.print_stack_trace(xloglib.ERROR)
    xloglib.print_threads(TAG, xloglib.WARN)
    xloglib.print_memory_info(xloglib.INFO)

Exported names:
    init, v, d, i, w, e, println:  Logging through the process-wide LogCat.
    is_loggable, is_debug:         Level checks for the application tag.
    set_obfuscator, set_obfuscate_by_default, SimpleNumberObfuscator:
                                   Message redaction.
    print_stack_trace, print_threads, print_memory_info:
                                   Diagnostic dumpers.
    LogCat:                        The façade class, for explicit instances.
    configure, get_default:        Replace or access the process-wide LogCat.
    LogCatHandler:                 Bridge from the ``logging`` module.
    HostLogger, StreamHostLogger, LoggingHostLogger:
                                   Host line loggers.
    Priority and VERBOSE..ASSERT, SUPPRESS: Priority constants.
"""

from .core import (
    LogCat,
    configure,
    d,
    e,
    get_default,
    get_stack_trace_string,
    i,
    init,
    is_debug,
    is_loggable,
    print_memory_info,
    print_stack_trace,
    print_threads,
    println,
    set_obfuscate_by_default,
    set_obfuscator,
    v,
    w,
)
from .errors import InvalidFormatError, InvalidTagError, LogCatError, NotInitializedError
from .handler import LogCatHandler
from .obfuscator import SimpleNumberObfuscator
from .overrides import OverrideSource, SystemProperties, system_properties
from .priority import ASSERT, DEBUG, ERROR, INFO, SUPPRESS, VERBOSE, WARN, Priority
from .sink import HostLogger, LoggingHostLogger, StreamHostLogger

__all__ = [
    "LogCat",
    "configure",
    "get_default",
    "init",
    "is_loggable",
    "is_debug",
    "set_obfuscator",
    "set_obfuscate_by_default",
    "println",
    "v",
    "d",
    "i",
    "w",
    "e",
    "print_stack_trace",
    "print_threads",
    "print_memory_info",
    "get_stack_trace_string",
    "LogCatError",
    "NotInitializedError",
    "InvalidTagError",
    "InvalidFormatError",
    "LogCatHandler",
    "SimpleNumberObfuscator",
    "OverrideSource",
    "SystemProperties",
    "system_properties",
    "HostLogger",
    "StreamHostLogger",
    "LoggingHostLogger",
    "Priority",
    "VERBOSE",
    "DEBUG",
    "INFO",
    "WARN",
    "ERROR",
    "ASSERT",
    "SUPPRESS",
]
__version__ = "0.1.0"
