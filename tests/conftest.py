# -*- coding: utf-8 -*-
"""
locimport Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# INPUT FIXTURES
# =============================================================================

@pytest.fixture
def sheet_text() -> str:
    """A copied sheet with a notes column (B) and two languages."""
    return (
        "TID\tNotes\tEN\tFR\n"
        "tid_menu_play\tMain button\tPlay\tJouer\n"
        "tid_menu_quit\t\tQuit\tQuitter\n"
        "tid_shop_buy\tmax 10 chars\tBuy\t\n"
    )


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def sample_table():
    """Two-language table with one blank French text."""
    from models.localization_table import LocalizationTable
    return LocalizationTable(
        identifiers=("tid_menu_play", "tid_menu_quit", "tid_shop_buy"),
        languages=("EN", "FR"),
        texts={
            "EN": ("Play", "Quit", "Buy"),
            "FR": ("Jouer", "Quitter", ""),
        },
    )


@pytest.fixture
def no_ignored_columns():
    from models.import_summary import ImportOptions
    return ImportOptions(ignored_columns="", reveal_in_explorer=False)


# =============================================================================
# SINK / SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def memory_sink():
    from core.log_sink import MemorySink
    return MemorySink()


@pytest.fixture
def settings_file(tmp_path, monkeypatch) -> Path:
    """Point the settings module at a temporary file."""
    import locimport_config as config
    path = tmp_path / "settings" / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", path)
    return path
