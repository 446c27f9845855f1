# config_manager.py
import json
from pathlib import Path

from .ExpressionEngine import DEFAULT_PRECISION, DEFAULT_MAX_NESTING_DEPTH

config_json = Path(__file__).resolve().parent.parent / "config.json"

DEFAULT_SETTINGS = {
    "precision": DEFAULT_PRECISION,
    "max_nesting_depth": DEFAULT_MAX_NESTING_DEPTH,
    "decimal_places": 10,
    "debug": False,
}


def _read_settings():
    try:
        with open(config_json, 'r', encoding='utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return dict(DEFAULT_SETTINGS)

    if not isinstance(settings_dict, dict):
        return dict(DEFAULT_SETTINGS)

    merged = dict(DEFAULT_SETTINGS)
    merged.update(settings_dict)
    return merged


def load_setting_value(key_value):
    """Return one setting, or the whole (default-merged) dict for "all"."""
    settings_dict = _read_settings()

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)
