"""Settings loading and validation."""

import copy
import functools
from typing import Any, Optional

import yaml

from threeset.utils.logging_utils import get_logger, is_level_name

logger = get_logger(__name__)

# Settings loading counter for debugging
_settings_load_count = 0

DEFAULTS: dict[str, Any] = {
    "similarity": {
        "comparator": {
            "minimum_word_len": 2,
            "delta_word_len_ignore": 3,
            "min_word_similarity": 0.707,
        },
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": None,
    },
}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``update`` into ``base`` (in place) and return it."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        elif key in base and isinstance(base[key], dict) and value is None:
            # An empty YAML section keeps its defaults
            continue
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=1)
def load_settings(path: str) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    global _settings_load_count
    _settings_load_count += 1

    logger.debug(f"Settings loaded (count: {_settings_load_count}) from {path}")

    defaults = copy.deepcopy(DEFAULTS)
    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            logger.warning(f"Settings file {path} is not a mapping. Using defaults.")
            return defaults
        return deep_merge(defaults, user_config)

    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return defaults
    except Exception as e:
        logger.exception(f"Error loading settings: {e}. Using defaults.")
        return defaults


def reload_settings(path: str) -> dict[str, Any]:
    """Force reload settings from file (clears cache)."""
    load_settings.cache_clear()
    return load_settings(path)


def get_settings_load_count() -> int:
    """Get the total number of times settings have been loaded."""
    return _settings_load_count


def validate_settings(settings: Optional[dict[str, Any]] = None) -> list[str]:
    """Returns list of validation warnings.

    Args:
        settings: Settings dict to validate. If None, uses the defaults.

    Returns:
        List of validation warning messages.

    """
    warnings = []
    if settings is None:
        settings = DEFAULTS
    similarity = settings.get("similarity") or {}
    comparator = similarity.get("comparator") or {}

    min_len = comparator.get("minimum_word_len", 2)
    if not isinstance(min_len, int) or isinstance(min_len, bool) or min_len < 1:
        warnings.append(
            f"similarity.comparator.minimum_word_len must be int >= 1, got {min_len}",
        )

    delta = comparator.get("delta_word_len_ignore", 3)
    if not isinstance(delta, int) or isinstance(delta, bool) or delta < 0:
        warnings.append(
            f"similarity.comparator.delta_word_len_ignore must be int >= 0, got {delta}",
        )

    threshold = comparator.get("min_word_similarity", 0.707)
    if not isinstance(threshold, (int, float)) or not 0 <= threshold <= 1:
        warnings.append(
            f"similarity.comparator.min_word_similarity must be number 0-1, got {threshold}",
        )

    level = (settings.get("logging") or {}).get("level", "INFO")
    if not is_level_name(level):
        warnings.append(f"logging.level must be a logging level name, got {level}")

    return warnings
