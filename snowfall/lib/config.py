import os
import shutil
from functools import lru_cache
from pathlib import Path

import yaml

from snowfall.errors import InvalidConfigurationError

from . import node, paths

NODE_ID_ENV = "SNOWFALL_NODE_ID"


def get_default_config_path() -> Path:
    return paths.package_root() / "config.yaml"


def config_file() -> Path:
    """Return config file path in .snowfall/"""
    return paths.dot_snowfall() / "config.yaml"


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load the config.yaml file, returning its content or an empty dict if not found."""
    path = config_file()
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def parse_node_id(value) -> int | None:
    """Normalize a configured node id. None means auto-derive."""
    if value is None or node.is_auto(value):
        return None
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"Invalid node_id: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        try:
            value = int(value)
        except ValueError as e:
            raise InvalidConfigurationError(f"Invalid node_id: {value!r}") from e
        if value == node.AUTO_SENTINEL:
            return None
    if not isinstance(value, int):
        raise InvalidConfigurationError(f"Invalid node_id: {value!r}")
    return node.validate_node_id(value)


def node_id() -> int | None:
    """Configured node id: SNOWFALL_NODE_ID env var, then config.yaml."""
    env_value = os.environ.get(NODE_ID_ENV)
    if env_value is not None and env_value.strip():
        return parse_node_id(env_value)
    return parse_node_id(load_config().get("node_id"))


def init_config() -> Path:
    """Initialize .snowfall/config.yaml from defaults if missing."""
    target = config_file()
    if target.exists():
        return target

    target.parent.mkdir(parents=True, exist_ok=True)

    default_config_path = get_default_config_path()
    if not default_config_path.exists():
        raise FileNotFoundError(f"Default config not found at {default_config_path}")

    shutil.copy(default_config_path, target)
    clear_cache()
    return target
