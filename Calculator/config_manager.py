# config_manager.py
import json
import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"

# Used for every key missing from config.json (or when the file is unreadable)
DEFAULT_SETTINGS = {
    "darkmode": False,
    "decimal_places": 10,
    "show_equation": True,
    "after_paste_enter": False,
    "debug": False,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except FileNotFoundError:
        logger.warning("Error 5001: %s %s not found, using defaults", E.ERROR_MESSAGES["5001"], path)
    except json.JSONDecodeError as e:
        logger.warning("Error 5001: %s %s is not valid JSON (%s), using defaults",
                       E.ERROR_MESSAGES["5001"], path, e)
    return {}


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_json))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = _read_json(ui_strings)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    """Write all settings to config.json; returns them, or {} if writing failed."""
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        logger.error("Could not save settings to %s: %s", config_json, e)
        return {}
