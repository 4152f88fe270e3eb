"""Node id resolution: explicit value, or derived from local hardware addresses."""

from __future__ import annotations

import logging
import secrets

import psutil

from snowfall.errors import InvalidConfigurationError
from snowfall.lib import hashing
from snowfall.lib.layout import BITS_NODE, MAX_NODE_ID

logger = logging.getLogger(__name__)

AUTO = "auto"
AUTO_SENTINEL = -1


def is_auto(node_id: int | str | None) -> bool:
    if node_id is None or node_id == AUTO_SENTINEL:
        return True
    return isinstance(node_id, str) and node_id.strip().lower() == AUTO


def validate_node_id(node_id: int) -> int:
    if isinstance(node_id, bool) or not isinstance(node_id, int):
        raise InvalidConfigurationError(f"Node id must be an integer, got {node_id!r}")
    if not (0 <= node_id <= MAX_NODE_ID):
        raise InvalidConfigurationError(f"Node id must be between 0 and {MAX_NODE_ID}, got {node_id}")
    return node_id


def resolve_node_id(node_id: int | str | None = None) -> int:
    """Return a node id in [0, MAX_NODE_ID].

    None, -1 and "auto" derive the id from local network interfaces.
    Anything else must already be a valid node id.

    Raises:
        InvalidConfigurationError: If an explicit node id is out of range
    """
    if is_auto(node_id):
        return derive_node_id()
    return validate_node_id(node_id)


def hardware_addresses() -> list[str]:
    """Uppercase hex link-layer addresses, in platform enumeration order.

    Raises:
        OSError: If the platform denies interface enumeration
    """
    addresses = []
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family != psutil.AF_LINK or not addr.address:
                continue
            encoded = addr.address.replace(":", "").replace("-", "").replace(".", "").upper()
            if not encoded or encoded.strip("0") == "":
                continue
            addresses.append(encoded)
    return addresses


def derive_node_id() -> int:
    try:
        addresses = hardware_addresses()
    except (OSError, psutil.Error) as e:
        logger.warning("Interface enumeration failed (%s), using random node id", e)
        return random_node_id()

    if not addresses:
        logger.warning("No hardware addresses found, using random node id")
        return random_node_id()

    node_id = hashing.hash_bits("".join(addresses), BITS_NODE)
    logger.debug("Derived node id %d from %d hardware address(es)", node_id, len(addresses))
    return node_id


def random_node_id() -> int:
    return secrets.randbits(BITS_NODE)


__all__ = [
    "AUTO",
    "AUTO_SENTINEL",
    "derive_node_id",
    "hardware_addresses",
    "is_auto",
    "random_node_id",
    "resolve_node_id",
    "validate_node_id",
]
