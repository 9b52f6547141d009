# passcheck/config.py
"""
Password policy settings for PassCheck.
Settings saved as JSON in %APPDATA%/PassCheck/config.json (Windows) or ~/.passcheck/config.json (fallback).
PASSCHECK_CONFIG overrides the file path.
"""

import os
import json
import logging
from typing import Dict, Any

from .criteria import MIN_LENGTH, MAX_LENGTH, SPECIAL_CHARACTERS
from .status import MIN_CHARACTER_CLASSES

log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a password policy setting is unusable."""


DEFAULTS: Dict[str, Any] = {
    "min_length": MIN_LENGTH,
    "max_length": MAX_LENGTH,
    "min_character_classes": MIN_CHARACTER_CLASSES,
    "special_characters": SPECIAL_CHARACTERS,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassCheck")
    return os.path.join(os.path.expanduser("~"), ".passcheck")

def config_path() -> str:
    override = os.getenv("PASSCHECK_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object, got %s", p, type(data).__name__)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def validate_policy(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a loaded config and return it unchanged.
    Raises ConfigError describing the first bad setting.
    """
    try:
        low = int(cfg["min_length"])
        high = int(cfg["max_length"])
        required = int(cfg["min_character_classes"])
    except KeyError as e:
        raise ConfigError(f"missing setting: {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"length and class settings must be integers: {e}") from e
    if low < 1:
        raise ConfigError("min_length must be >= 1")
    if high < low:
        raise ConfigError("max_length must be >= min_length")
    if not 0 <= required <= 4:
        raise ConfigError("min_character_classes must be between 0 and 4")

    symbols = cfg.get("special_characters")
    if not symbols or not isinstance(symbols, str):
        raise ConfigError("special_characters must be a non-empty string")
    bad = [c for c in symbols if c.isalnum() or c.isspace()]
    if bad:
        raise ConfigError(f"special_characters may not contain letters, digits or whitespace: {''.join(bad)!r}")
    return cfg
