from datetime import datetime, timezone

import pytest

from snowfall.lib import layout
from snowfall.lib.layout import Snowflake, pack, unpack


def test_constants():
    assert layout.BITS_TOTAL == 64
    assert layout.MAX_NODE_ID == 1023
    assert layout.MAX_SEQ == 4095
    assert layout.CUSTOM_EPOCH == 1514764800000


def test_epoch_matches_datetime():
    epoch_ms = int(layout.EPOCH_DATETIME.timestamp() * 1000)
    assert epoch_ms == layout.CUSTOM_EPOCH


def test_pack_places_fields():
    assert pack(0, 0, 1) == 1
    assert pack(0, 1, 0) == 1 << 12
    assert pack(1, 0, 0) == 1 << 22
    assert pack(3, 5, 7) == (3 << 22) | (5 << 12) | 7


def test_pack_max_fields_fill_64_bits():
    assert pack(layout.MAX_TIMESTAMP, layout.MAX_NODE_ID, layout.MAX_SEQ) == layout.MAX_ID


def test_unpack_extracts_fields():
    identifier = pack(123456789, 42, 17)
    parts = unpack(identifier)
    assert parts == Snowflake(id=identifier, timestamp=123456789, node_id=42, sequence=17)


def test_unpack_full_width():
    parts = unpack(layout.MAX_ID)
    assert parts.timestamp == layout.MAX_TIMESTAMP
    assert parts.node_id == layout.MAX_NODE_ID
    assert parts.sequence == layout.MAX_SEQ


def test_created_at():
    parts = unpack(pack(1000, 1, 0))
    assert parts.created_at == datetime(2018, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


def test_to_dict():
    data = unpack(pack(0, 9, 3)).to_dict()
    assert data["node_id"] == 9
    assert data["sequence"] == 3
    assert data["created_at"] == "2018-01-01T00:00:00+00:00"


@pytest.mark.parametrize("value", [-1, layout.MAX_ID + 1, 1 << 70])
def test_unpack_rejects_out_of_range(value):
    with pytest.raises(ValueError, match="between 0 and"):
        unpack(value)


@pytest.mark.parametrize("value", ["123", 1.5, None, True])
def test_unpack_rejects_non_integers(value):
    with pytest.raises(ValueError, match="must be an integer"):
        unpack(value)
