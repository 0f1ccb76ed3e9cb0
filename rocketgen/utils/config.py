"""Configuration module."""
import copy
import json
import logging
import os

logger = logging.getLogger("rocketgen")

CONFIG_ENV_VAR = "ROCKETGEN_CONFIG"
DEFAULT_CONFIG_FILE = "config.json"

# Default configuration
CONFIG = {
    "generation": {
        "body_decor_ratio": [0.2, 0.4]
    },
    "cli": {
        "default_palette": "america"
    },
    "logging": {
        "level": "WARNING"
    }
}


def config_path():
    """Path of the user configuration file."""
    return os.environ.get(CONFIG_ENV_VAR, os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE))


def read_config_file(path):
    """Load configuration overrides from a JSON file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except Exception as e:
        logger.error(f"Error loading config: {e}")
        raise
    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {path} must be a JSON object")
    return config


def merge_config(base, overrides):
    """Return a copy of ``base`` with known sections updated from ``overrides``."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if key not in merged:
            logger.warning(f"Ignoring unknown configuration section: {key}")
        elif not isinstance(value, dict):
            logger.warning(f"Ignoring configuration section {key}: expected an object, "
                           f"got {type(value).__name__}")
        else:
            merged[key].update(value)
    return merged


def load_config(path=None):
    """Load the effective configuration.

    A missing file yields the defaults; a malformed one is reported and
    ignored.
    """
    path = path or config_path()
    if not os.path.exists(path):
        logger.debug(f"No configuration file at {path}, using defaults")
        return copy.deepcopy(CONFIG)

    try:
        user_config = read_config_file(path)
    except Exception as e:
        logger.warning(f"Error loading user configuration: {e}")
        return copy.deepcopy(CONFIG)

    return merge_config(CONFIG, user_config)


def ratio_range(config):
    """Validated ``(low, high)`` body/decoration ratio bounds from a config."""
    value = config["generation"]["body_decor_ratio"]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"body_decor_ratio must be a [low, high] pair, got {value!r}")
    try:
        low, high = float(value[0]), float(value[1])
    except (TypeError, ValueError):
        raise ValueError(f"body_decor_ratio bounds must be numbers, got {value!r}")
    if not 0 <= low < high:
        raise ValueError(f"Invalid body_decor_ratio range: [{low}, {high})")
    return low, high


def default_palette(config, choices):
    """Configured default palette, which must be one of ``choices``."""
    palette = config["cli"]["default_palette"]
    if palette not in choices:
        raise ValueError(f"Unknown default_palette {palette!r}, expected one of {list(choices)}")
    return palette
