# config.py
import json
import logging
import os

from pests.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS = {
    "image_path": os.path.join("resources", "dog.png"),
    "window_title": "HELLO",
    "pest_size": [200, 200],
    "gravity": [-0.0, 3.81],
    "bounce_loss": 0.3,
    "rest_speed": 0.2,
    "screen_margin": [10, 10, 20, 80],  # left, top, width cut, height cut
    "flood_after": 5.0,
    "flood_interval": 0.15,
    "flood_speed": 10.0,
    "replace_speed": 10.0,
    "frame_budget": 1.0 / 144.0,
    "initial_pos": [200, 400],
    "initial_velocity": [5.0, 0.0],
    "quit_enabled": True,
}


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check(key, value):
    """Raise ConfigError unless value has the shape of DEFAULTS[key]."""
    default = DEFAULTS[key]
    if isinstance(default, bool):
        ok = isinstance(value, bool)
    elif isinstance(default, (int, float)):
        ok = _is_number(value)
    elif isinstance(default, str):
        ok = isinstance(value, str)
    else:
        ok = (isinstance(value, list) and len(value) == len(default)
              and all(_is_number(v) for v in value))
    if not ok:
        raise ConfigError(f"bad value for {key!r}: {value!r} (expected something like {default!r})")


def load_config(path="config.json"):
    """Read config.json over the defaults. A missing file means defaults."""
    config = dict(DEFAULTS)
    if not os.path.exists(path):
        logger.debug("no config at %s, using defaults", path)
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning("unknown config key %r ignored", key)
            continue
        _check(key, value)
        config[key] = value
    return config
