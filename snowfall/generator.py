"""Snowflake generator: timestamp/sequence state machine over a fixed node id."""

from __future__ import annotations

import threading

from snowfall.errors import ClockRegressionError
from snowfall.lib import clock as clock_lib
from snowfall.lib import layout, node


class Generator:
    """Issues strictly increasing 64-bit ids for one node.

    Thread-safe: each generate() call runs under the instance lock. Separate
    instances share nothing, so running several in one process is allowed
    but gives no ordering between them.
    """

    def __init__(self, node_id: int | str | None = None, clock: clock_lib.Clock | None = None):
        self._node_id = node.resolve_node_id(node_id)
        self._clock = clock or clock_lib.wall_millis
        self._lock = threading.Lock()
        self._prev_timestamp = -1
        self._sequence = 0

    @property
    def node_id(self) -> int:
        return self._node_id

    def _timestamp(self) -> int:
        return self._clock() - layout.CUSTOM_EPOCH

    def _wait_next_millis(self, timestamp: int) -> int:
        # spin, bounded by one clock tick
        while timestamp <= self._prev_timestamp:
            timestamp = self._timestamp()
        return timestamp

    def generate(self) -> int:
        """Return the next id.

        Raises:
            ClockRegressionError: If the clock reads earlier than the last issued
                timestamp. State is untouched; the caller may retry later.
        """
        with self._lock:
            now = self._timestamp()

            if now < self._prev_timestamp:
                raise ClockRegressionError(self._prev_timestamp, now)

            if now == self._prev_timestamp:
                self._sequence = (self._sequence + 1) & layout.MAX_SEQ
                if self._sequence == 0:
                    now = self._wait_next_millis(now)
            else:
                self._sequence = 0

            self._prev_timestamp = now
            return layout.pack(now, self._node_id, self._sequence)

    def generate_many(self, count: int) -> list[int]:
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        return [self.generate() for _ in range(count)]

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.generate()

    def __repr__(self) -> str:
        return f"Generator(node_id={self._node_id})"


def create(node_id: int | str | None = None, clock: clock_lib.Clock | None = None) -> Generator:
    """Build a generator; node_id None, -1 or "auto" derives one from the host."""
    return Generator(node_id, clock=clock)


__all__ = ["Generator", "create"]
