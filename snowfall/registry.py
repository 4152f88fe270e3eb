"""Process-wide generator, created once at bootstrap."""

from __future__ import annotations

import logging
import threading

from snowfall.errors import SnowfallError
from snowfall.generator import Generator
from snowfall.lib import config

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instance: Generator | None = None


def init(node_id: int | str | None = None) -> Generator:
    """Create the process generator. A second call raises SnowfallError."""
    global _instance

    with _lock:
        if _instance is not None:
            raise SnowfallError(
                f"Cannot create two generators, generator with node id {_instance.node_id} already exists"
            )
        _instance = Generator(node_id)
        logger.info("Initialized generator with node id %d", _instance.node_id)
        return _instance


def get() -> Generator:
    """Return the process generator, creating one from config if needed."""
    global _instance

    with _lock:
        if _instance is None:
            _instance = Generator(config.node_id())
            logger.info("Initialized generator with node id %d", _instance.node_id)
        return _instance


def generate() -> int:
    return get().generate()


def reset() -> None:
    global _instance
    with _lock:
        _instance = None
