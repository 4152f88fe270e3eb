import time
from collections.abc import Callable

Clock = Callable[[], int]


def wall_millis() -> int:
    """Milliseconds since the Unix epoch from the system wall clock."""
    return time.time_ns() // 1_000_000
