"""
Where the walker keeps its bundled data.

random_walker/data/walker.json ships with the package and holds the
default generation settings.
"""

import os

CONFIG_FILE_NAME = "walker.json"


def pkg_root() -> str:
    # worldgen package is inside random_walker/worldgen
    here = os.path.dirname(os.path.abspath(__file__))
    return os.path.abspath(os.path.join(here, os.pardir))


def data_path(*parts: str) -> str:
    return os.path.join(pkg_root(), "data", *parts)


def default_config_path() -> str:
    return data_path(CONFIG_FILE_NAME)


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)
