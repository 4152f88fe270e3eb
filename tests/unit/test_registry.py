import pytest

from snowfall import registry
from snowfall.errors import InvalidConfigurationError, SnowfallError
from snowfall.lib.layout import unpack


def test_init_then_get_returns_same_instance():
    gen = registry.init(21)
    assert registry.get() is gen
    assert unpack(registry.generate()).node_id == 21


def test_second_init_rejected():
    registry.init(21)
    with pytest.raises(SnowfallError, match="node id 21 already exists"):
        registry.init(22)
    assert registry.get().node_id == 21


def test_failed_init_leaves_no_instance():
    with pytest.raises(InvalidConfigurationError):
        registry.init(2048)
    assert registry.init(3).node_id == 3


def test_get_uses_configured_node_id(isolated_home):
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.yaml").write_text("node_id: 600\n")
    assert registry.get().node_id == 600


def test_get_uses_env_node_id(monkeypatch):
    monkeypatch.setenv("SNOWFALL_NODE_ID", "44")
    assert registry.get().node_id == 44


def test_get_then_init_rejected():
    registry.get()
    with pytest.raises(SnowfallError, match="Cannot create two generators"):
        registry.init(1)


def test_reset_allows_new_instance():
    first = registry.init(1)
    registry.reset()
    second = registry.init(2)
    assert first is not second
    assert second.node_id == 2


def test_generate_increases():
    registry.init(7)
    ids = [registry.generate() for _ in range(100)]
    assert ids == sorted(set(ids))
