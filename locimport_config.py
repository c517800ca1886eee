import string
from pathlib import Path

VERSION = "1.0"
APP_NAME = "Loc Import Tool"

# Identifier cells start with this prefix; the header cell of the first column must not.
TID_PREFIX = "tid_"
# Writer grouping compares identifiers from this offset on, past the prefix.
GROUP_COMPARE_OFFSET = len(TID_PREFIX)

# Header row plus at least one data row, plus the sheet row above them.
MIN_LINE_COUNT = 3

COLUMN_LETTERS = string.ascii_lowercase

DEFAULT_COLUMNS_TO_IGNORE = "c, d"
DEFAULT_REVEAL_IN_EXPLORER = True
DEFAULT_FILE_NAME = "LocalizationTexts.lua"
DEFAULT_SAVE_FOLDER = Path.home() / "Documents" / "My Games" / "CORE" / "Saved" / "Maps"

APP_DIR = Path.home() / ".locimport"
SETTINGS_DIR = APP_DIR
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"
LOG_DIR = APP_DIR / "logs"

OUTPUT_ENCODING = "utf-8"

BANNER_LINES = (
    APP_NAME,
    f"v{VERSION}",
    "",
    "Converts localization data from a spreadsheet into a Lua file.",
)

USAGE_LINES = (
    "",
    "Usage:",
    " 1. Select all content in a spreadsheet and copy it (Ctrl + A, Ctrl + C).",
    " 2. Run the import (from the clipboard, or pass --input).",
    " 3. Choose the file location and name.",
    "",
)

COLUMNS_HINT_LINES = (
    "Columns to ignore: Localization sheets often have supporting columns, such as max character count",
    "and description. You don't want to import those as if they were languages.",
)

__all__ = [
    "VERSION", "APP_NAME", "TID_PREFIX", "GROUP_COMPARE_OFFSET", "MIN_LINE_COUNT",
    "COLUMN_LETTERS", "DEFAULT_COLUMNS_TO_IGNORE", "DEFAULT_REVEAL_IN_EXPLORER",
    "DEFAULT_FILE_NAME", "DEFAULT_SAVE_FOLDER", "APP_DIR", "SETTINGS_DIR",
    "SETTINGS_FILE_PATH", "LOG_DIR", "OUTPUT_ENCODING", "BANNER_LINES",
    "USAGE_LINES", "COLUMNS_HINT_LINES",
]
