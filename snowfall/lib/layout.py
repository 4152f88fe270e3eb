"""64-bit identifier layout: 42-bit timestamp, 10-bit node id, 12-bit sequence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

BITS_EPOCH = 42
BITS_NODE = 10
BITS_SEQ = 12
BITS_TOTAL = BITS_EPOCH + BITS_NODE + BITS_SEQ

MAX_NODE_ID = (1 << BITS_NODE) - 1
MAX_SEQ = (1 << BITS_SEQ) - 1
MAX_TIMESTAMP = (1 << BITS_EPOCH) - 1
MAX_ID = (1 << BITS_TOTAL) - 1

# 2018-01-01T00:00:00Z
CUSTOM_EPOCH = 1514764800000
EPOCH_DATETIME = datetime(2018, 1, 1, tzinfo=timezone.utc)

NODE_SHIFT = BITS_SEQ
TIMESTAMP_SHIFT = BITS_NODE + BITS_SEQ


@dataclass(frozen=True)
class Snowflake:
    id: int
    timestamp: int
    node_id: int
    sequence: int

    @property
    def created_at(self) -> datetime:
        """UTC instant encoded by the adjusted timestamp."""
        return EPOCH_DATETIME + timedelta(milliseconds=self.timestamp)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "node_id": self.node_id,
            "sequence": self.sequence,
            "created_at": self.created_at.isoformat(),
        }


def pack(timestamp: int, node_id: int, sequence: int) -> int:
    return (timestamp << TIMESTAMP_SHIFT) | (node_id << NODE_SHIFT) | sequence


def unpack(identifier: int) -> Snowflake:
    """Split an identifier into its timestamp, node id and sequence fields.

    Raises:
        ValueError: If the identifier is negative or wider than 64 bits
    """
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        raise ValueError(f"Identifier must be an integer, got {identifier!r}")
    if not (0 <= identifier <= MAX_ID):
        raise ValueError(f"Identifier must be between 0 and {MAX_ID}, got {identifier}")

    return Snowflake(
        id=identifier,
        timestamp=identifier >> TIMESTAMP_SHIFT,
        node_id=(identifier >> NODE_SHIFT) & MAX_NODE_ID,
        sequence=identifier & MAX_SEQ,
    )


__all__ = [
    "BITS_EPOCH",
    "BITS_NODE",
    "BITS_SEQ",
    "BITS_TOTAL",
    "CUSTOM_EPOCH",
    "MAX_ID",
    "MAX_NODE_ID",
    "MAX_SEQ",
    "MAX_TIMESTAMP",
    "Snowflake",
    "pack",
    "unpack",
]
