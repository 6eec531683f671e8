"""
Walker configuration loader.

Reads the bundled random_walker/data/walker.json (or an explicit path),
otherwise uses the defaults below. Values in the file override the
defaults key by key.
"""

import json
import logging
from typing import Optional

from .paths import default_config_path

logger = logging.getLogger(__name__)

DEFAULT_WALKER_CFG = {
    "dimensions": 5,
    "max_tunnels": 3,
    "max_length": 3,
    "distance_range": 6.0,
    "seed": None,
    "max_attempts": 1000,
}


def _read_json(path: str, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.info(f"walker config not found at {path}, using defaults.")
    except Exception as e:
        logger.error(f"Error reading {path}: {e}")
    return default


def load_walker_cfg(path: Optional[str] = None) -> dict:
    cfg = dict(DEFAULT_WALKER_CFG)
    raw = _read_json(path or default_config_path(), {})
    if not isinstance(raw, dict):
        logger.error(f"walker config must be a JSON object, got {type(raw).__name__}; using defaults.")
        return cfg

    for key, value in raw.items():
        if key not in DEFAULT_WALKER_CFG:
            logger.warning(f"Ignoring unknown walker config key: {key}")
            continue
        cfg[key] = value
    return cfg
