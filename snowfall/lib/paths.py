import os
from pathlib import Path


def dot_snowfall() -> Path:
    override = os.environ.get("SNOWFALL_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".snowfall"


def package_root() -> Path:
    return Path(__file__).resolve().parent.parent
