"""diagnostics.py - Introspection primitives behind the LogCat dumpers.

The dumpers on LogCat (``print_stack_trace``, ``print_threads`` and
``print_memory_info``) turn process state into multi-line messages. This
module provides the pieces they are built from:

    capture_stack()      frames of any live thread, outermost first
    format_stack()       one frame per line
    enumerate_threads()  live threads of a group (default: all threads)
    format_threads()     leading blank line, one thread per line
    read_memory_info()   ``/proc/meminfo``-style snapshot via psutil

Python has no thread groups, so a "group" is any iterable of
``threading.Thread`` objects. Only threads that are still alive are listed.
"""

import sys
import threading
import traceback
from typing import Callable, Iterable, List, Optional

import psutil

MemoryReader = Callable[[], str]

#: Exceptions a memory reader may raise when the snapshot is unavailable.
memory_errors = (OSError, psutil.Error)

#: Message logged when a stack trace is requested for ``thread=None``.
NULL_THREAD_MESSAGE = "Cannot print stack trace for thread - thread is null"

#: Message logged when the memory snapshot cannot be read.
MEMORY_ERROR_MESSAGE = "Error when reading memory info"


def capture_stack(thread: threading.Thread) -> List[traceback.FrameSummary]:
    """Return the current frames of ``thread``, outermost first.

    For the calling thread the innermost frame is this function itself.
    Threads that have not started or have already finished have no frames.
    """
    if thread.ident is None:
        return []
    frame = sys._current_frames().get(thread.ident)
    if frame is None:
        return []
    return traceback.extract_stack(frame)


def format_frame(frame: traceback.FrameSummary) -> str:
    return f'File "{frame.filename}", line {frame.lineno}, in {frame.name}'


def format_stack(frames: Iterable[traceback.FrameSummary]) -> str:
    """Render frames one per line, each terminated by ``\\n``."""
    return "".join(f"{format_frame(frame)}\n" for frame in frames)


def enumerate_threads(group: Optional[Iterable[threading.Thread]] = None) -> List[threading.Thread]:
    """Return the live threads of ``group``.

    Args:
        group: Threads to consider. ``None`` means every live thread in the
            process, as reported by ``threading.enumerate()``.
    """
    if group is None:
        return threading.enumerate()
    return [thread for thread in group if thread.is_alive()]


def format_threads(threads: Iterable[threading.Thread]) -> str:
    """Render threads one per line after a leading blank line."""
    return "\n" + "".join(f"{thread!r}\n" for thread in threads)


def _kb(value: int) -> str:
    return f"{value // 1024:>8} kB"


def read_memory_info() -> str:
    """Return a snapshot of system and process memory.

    The layout follows ``/proc/meminfo``: one ``Name:  value kB`` row per
    figure. System-wide rows come first, then swap, then the resident and
    virtual size of this process (``VmRSS`` and ``VmSize``). Rows that
    psutil does not report on the current platform are left out.

    Raises:
        psutil.Error: If psutil cannot query the process.
        OSError: If the platform counters cannot be read.
    """
    vm = psutil.virtual_memory()
    swap = psutil.swap_memory()
    proc = psutil.Process().memory_info()

    rows = [
        ("MemTotal", vm.total),
        ("MemFree", vm.free),
        ("MemAvailable", vm.available),
    ]
    for field in ("buffers", "cached", "shared", "active", "inactive"):
        value = getattr(vm, field, None)
        if value is not None:
            rows.append((field.capitalize(), value))
    rows += [
        ("SwapTotal", swap.total),
        ("SwapFree", swap.free),
        ("VmRSS", proc.rss),
        ("VmSize", proc.vms),
    ]
    return "\n".join(f"{name + ':':<16}{_kb(value)}" for name, value in rows)
