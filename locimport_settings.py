"""
locimport Settings Module
Handles loading and saving of the user's import preferences.
"""

import json
from pathlib import Path

import locimport_config as config
from locimport_logger import get_logger
from models.import_summary import ImportOptions

logger = get_logger("settings")


def default_settings():
    return {
        "columns_to_ignore": config.DEFAULT_COLUMNS_TO_IGNORE,
        "reveal_in_explorer": config.DEFAULT_REVEAL_IN_EXPLORER,
        "last_folder_path": str(config.DEFAULT_SAVE_FOLDER),
        "last_file_name": config.DEFAULT_FILE_NAME,
    }


def load_settings():
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = config.SETTINGS_FILE_PATH
    defaults = default_settings()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return defaults

    try:
        logger.debug(f"Loading settings: {settings_file}")
        with settings_file.open('r', encoding='utf-8') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"Settings file ({settings_file}) is corrupt (invalid JSON). Using defaults.")
        return defaults
    except OSError as e:
        logger.error(f"Could not read settings ({settings_file}): {e}. Using defaults.")
        return defaults

    if not isinstance(loaded_data, dict):
        logger.warning("Settings file format is invalid (not a dict). Using defaults.")
        return defaults

    settings = defaults.copy()
    settings.update(loaded_data)

    for key in ("columns_to_ignore", "last_folder_path", "last_file_name"):
        if not isinstance(settings.get(key), str):
            logger.warning(f"Invalid '{key}' value ({settings.get(key)!r}). Using default.")
            settings[key] = defaults[key]

    if not isinstance(settings.get("reveal_in_explorer"), bool):
        logger.warning("Invalid 'reveal_in_explorer' value. Using default.")
        settings["reveal_in_explorer"] = defaults["reveal_in_explorer"]

    if not settings["last_file_name"].strip():
        settings["last_file_name"] = defaults["last_file_name"]

    logger.debug("Settings loaded.")
    return settings


def save_settings(settings_data):
    """Save settings to JSON file."""

    settings_file = config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.debug("Settings saved.")
        return True
    except OSError as e:
        logger.error(f"Could not save settings ({settings_file}): {e}")
        return False


def remember_save_location(settings, path):
    """Store folder and file name of a successful save so the next run suggests them."""
    path = Path(path)
    settings["last_folder_path"] = str(path.parent)
    settings["last_file_name"] = path.name
    return settings


def default_output_path(settings) -> Path:
    return Path(settings["last_folder_path"]) / settings["last_file_name"]


def options_from_settings(settings) -> ImportOptions:
    return ImportOptions(
        ignored_columns=settings["columns_to_ignore"],
        reveal_in_explorer=settings["reveal_in_explorer"],
    )
