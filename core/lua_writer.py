# -*- coding: utf-8 -*-
"""
Lua Table Writer

Serializes a LocalizationTable into a Lua script that builds and returns a
TEXTS table keyed by language code:

    local TEXTS = {}

    -- English
    TEXTS["EN"] = {
    tid_menu_play = "Play"
    }

    return TEXTS
"""

import io
from pathlib import Path
from typing import List, Optional, TextIO, Union

import locimport_config as config
from core.language_names import code_to_language_name
from locimport_enums import Severity
from locimport_exceptions import BlankEntriesWarning, LocImportWarning
from locimport_logger import get_logger
from models.localization_table import LocalizationTable

logger = get_logger("core.lua_writer")

NEWLINE = "\n"


def starts_new_group(identifier: str, previous: Optional[str]) -> bool:
    """
    Check whether a blank line goes before ``identifier``.

    Characters are compared from the end of the identifier prefix up to the
    first underscore in ``identifier`` or the end of the shorter string, so
    "tid_menu_a" and "tid_menu_b" share a group while "tid_shop_a" starts one.
    """
    if previous is None:
        return False
    end = min(len(identifier), len(previous))
    for n in range(config.GROUP_COMPARE_OFFSET, end):
        if identifier[n] == '_':
            return False
        if identifier[n] != previous[n]:
            return True
    return False


class LuaTableWriter:
    """
    Writes LocalizationTables as Lua source.

    ``warnings`` holds the BlankEntriesWarnings of the last write; they are
    also emitted to the optional log sink.
    """

    def __init__(self, sink=None):
        self.sink = sink
        self.warnings: List[LocImportWarning] = []

    def render(self, table: LocalizationTable) -> str:
        """Return the Lua source for the table."""
        buffer = io.StringIO()
        self.write(table, buffer)
        return buffer.getvalue()

    def save(self, table: LocalizationTable, path: Union[str, Path]) -> Path:
        """
        Write the table to a UTF-8 file, replacing any existing content.

        I/O errors propagate to the caller; the file handle is closed either way.
        """
        path = Path(path)
        logger.debug(f"Writing {len(table.languages)} languages to {path}")
        with path.open('w', encoding=config.OUTPUT_ENCODING, newline=NEWLINE) as stream:
            self.write(table, stream)
        return path

    def write(self, table: LocalizationTable, stream: TextIO):
        """Write the table to an open text stream."""
        self.warnings = []

        self._line(stream, "local TEXTS = {}")
        for language in table.languages:
            self._line(stream, "")
            self._line(stream, f"-- {code_to_language_name(language)}")
            self._line(stream, f'TEXTS["{language}"] = {{')
            blank_entries = self._write_entries(stream, table, language)
            if blank_entries > 0:
                self._warn(BlankEntriesWarning(language, blank_entries))
            self._line(stream, "}")

        self._line(stream, "")
        self._line(stream, "return TEXTS")

    def _write_entries(self, stream: TextIO, table: LocalizationTable, language: str) -> int:
        blank_entries = 0
        previous = None
        for identifier, text in table.rows(language):
            if not identifier.strip():
                continue

            if starts_new_group(identifier, previous):
                self._line(stream, "")
            previous = identifier

            if not text.strip():
                blank_entries += 1
            # Text is written as copied, quotes included
            self._line(stream, f'{identifier} = "{text}"')
        return blank_entries

    @staticmethod
    def _line(stream: TextIO, text: str):
        stream.write(text + NEWLINE)

    def _warn(self, warning: LocImportWarning):
        self.warnings.append(warning)
        logger.debug(f"Warning: {warning}")
        if self.sink is not None:
            self.sink.emit(str(warning), Severity.WARNING)
