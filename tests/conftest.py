"""conftest.py - Shared fixtures for the xloglib test suite.

Every test gets its own LogCat wired to a recording host and an isolated
property store (no environment fallback), so tests never touch stderr, the
real environment or each other's state.
"""

import pytest

from xloglib import core
from xloglib.core import LogCat
from xloglib.overrides import SystemProperties
from xloglib.sink import HostLogger, entry_size


class RecordingHost(HostLogger):
    """Host double that records every ``(priority, app_tag, line)`` it receives."""

    def __init__(self) -> None:
        self.lines = []

    def println(self, priority, app_tag, line):
        self.lines.append((priority, app_tag, line))
        return entry_size(app_tag, line)

    @property
    def payloads(self):
        return [line for _, _, line in self.lines]


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def props() -> SystemProperties:
    return SystemProperties(environ={})


@pytest.fixture
def logcat(host, props) -> LogCat:
    return LogCat(host=host, overrides=props, memory_reader=lambda: "MemTotal:       1024 kB")


@pytest.fixture
def verbose_logcat(logcat, host) -> LogCat:
    """A LogCat initialised with force_verbose and the init line discarded."""
    logcat.init("xLogLib", True)
    host.lines.clear()
    return logcat


@pytest.fixture
def default_logcat(monkeypatch, host, props) -> LogCat:
    """Swap the process-wide LogCat for an isolated one."""
    cat = LogCat(host=host, overrides=props)
    monkeypatch.setattr(core, "_default", cat)
    return cat
