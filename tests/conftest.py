import threading

import pytest

from snowfall import registry
from snowfall.lib import config, layout


class FakeClock:
    """Wall clock in ms under test control.

    Values queued with `then()` are returned one per read before falling back
    to `now`.
    """

    def __init__(self, now: int):
        self.now = now
        self.reads = 0
        self._queue: list[int] = []
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self.reads += 1
            if self._queue:
                return self._queue.pop(0)
            return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms

    def then(self, *values: int) -> None:
        self._queue.extend(values)


# 2024-01-01T00:00:00Z
START_MS = 1704067200000


@pytest.fixture
def fake_clock():
    return FakeClock(START_MS)


@pytest.fixture
def adjusted_start():
    return START_MS - layout.CUSTOM_EPOCH


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Point ~/.snowfall at a temp dir and clear cached config and the process generator."""
    home = tmp_path / ".snowfall"
    monkeypatch.setenv("SNOWFALL_HOME", str(home))
    monkeypatch.delenv("SNOWFALL_NODE_ID", raising=False)
    config.clear_cache()
    registry.reset()

    yield home

    config.clear_cache()
    registry.reset()
