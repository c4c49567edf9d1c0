"""examples/custom_host_usage.py - Implement and plug in a custom host logger.

Shows how to subclass HostLogger to collect lines in memory (useful for
testing), and how to use the standard library ``logging`` module as the
host while also bridging ``logging`` calls into the façade.

Run:
    python examples/custom_host_usage.py
"""

import logging
from typing import List, Tuple

import xloglib
from xloglib import HostLogger, LogCat, LogCatHandler, LoggingHostLogger, SystemProperties
from xloglib.sink import entry_size


# ---------------------------------------------------------------------------
# Custom Host: In-Memory Collector (great for unit tests)
# ---------------------------------------------------------------------------


class MemoryHost(HostLogger):
    """Stores every emitted line in memory.

    Attributes:
        lines: ``(priority, app_tag, line)`` tuples in emission order.

    Example:
        >>> host = MemoryHost()
        >>> cat = LogCat(host=host)
        >>> cat.init("MyApp", True)
        >>> _ = cat.i("Comp", "hi")
        >>> host.lines[-1]
        (<Priority.INFO: 4>, 'MyApp', 'Comp: hi')
    """

    def __init__(self) -> None:
        self.lines: List[Tuple[int, str, str]] = []

    def println(self, priority, app_tag, line):
        self.lines.append((priority, app_tag, line))
        return entry_size(app_tag, line)


def demo_memory_host() -> None:
    host = MemoryHost()
    cat = LogCat(host=host, overrides=SystemProperties(environ={}))
    cat.init("MemApp")
    cat.i("Comp", "kept")
    cat.d("Comp", "dropped")
    print("collected:", host.lines)


# ---------------------------------------------------------------------------
# logging as the host, with the bridge attached to the root logger
# ---------------------------------------------------------------------------


def demo_logging_host() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s | %(message)s")
    xloglib.configure(host=LoggingHostLogger())
    xloglib.init("BridgeApp")

    logging.getLogger().addHandler(LogCatHandler())
    xloglib.w("Comp", "direct call")                # W BridgeApp | Comp: direct call
    logging.getLogger("legacy").warning("bridged")  # also W BridgeApp | legacy: bridged


if __name__ == "__main__":
    demo_memory_host()
    demo_logging_host()
