# -*- coding: utf-8 -*-
"""
Options passed into an import run and the summary it returns.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import locimport_config as config
from locimport_exceptions import LocImportWarning


@dataclass(frozen=True)
class ImportOptions:
    """Per-run configuration read from the preference store by the host."""
    ignored_columns: str = config.DEFAULT_COLUMNS_TO_IGNORE
    reveal_in_explorer: bool = config.DEFAULT_REVEAL_IN_EXPLORER


@dataclass
class SavedSummary:
    """Result of a successful save."""
    path: Path
    languages: Tuple[str, ...]
    warnings: List[LocImportWarning] = field(default_factory=list)

    @property
    def language_list(self) -> str:
        return ",".join(self.languages)
