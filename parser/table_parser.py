# -*- coding: utf-8 -*-
"""
Table Parser

Turns tab/newline separated text copied from a spreadsheet into a
LocalizationTable. The first accepted column holds the identifiers, every
following accepted column holds one language with its code in the header row.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import locimport_config as config
from locimport_enums import Severity
from locimport_exceptions import (
    DuplicateLanguageWarning,
    EmptyInputError,
    IdentifierColumnNotFoundError,
    LocImportWarning,
    MalformedRowError,
    MismatchedColumnsWarning,
    MissingHeaderRowError,
    TooFewLinesError,
)
from locimport_logger import get_logger
from models.localization_table import LocalizationTable
from parser.columns import column_letter, parse_ignored_columns

logger = get_logger("parser.table_parser")

CELL_SEPARATOR = '\t'
LINE_SEPARATOR = '\n'

MISSING_CELL = ""


def split_lines(text: str) -> List[str]:
    """Split on line feeds and strip one trailing carriage return per line."""
    return [line[:-1] if line.endswith('\r') else line
            for line in text.split(LINE_SEPARATOR)]


def is_sheet_row(lines: Sequence[str]) -> bool:
    """
    Check whether the first line is a sheet title or blank row above the header.

    Such a row holds nothing past its first cell, and the line below it
    is the header, not an identifier row.
    """
    if len(lines) < 2:
        return False
    first_cells = lines[0].split(CELL_SEPARATOR)
    if any(cell.strip() for cell in first_cells[1:]):
        return False
    next_first_cell = lines[1].split(CELL_SEPARATOR)[0]
    return not next_first_cell.startswith(config.TID_PREFIX)


class TableParser:
    """
    Parses copied sheet text into a LocalizationTable.

    Structural problems raise a StructuralError subclass. Advisory problems
    are collected in ``warnings`` (reset on every call to ``parse``) and
    emitted to the optional log sink.
    """

    def __init__(self, ignored_columns: Iterable[int] = (), sink=None):
        self.ignored_columns = frozenset(ignored_columns)
        self.sink = sink
        self.warnings: List[LocImportWarning] = []

    @classmethod
    def from_column_list(cls, column_list: Optional[str], sink=None) -> "TableParser":
        """Create a parser from a "c, d" style column list."""
        return cls(parse_ignored_columns(column_list), sink=sink)

    def parse(self, text: Optional[str]) -> LocalizationTable:
        """
        Parse the text into a table.

        Args:
            text: Raw copy buffer contents

        Returns:
            The populated LocalizationTable

        Raises:
            EmptyInputError, TooFewLinesError, MalformedRowError,
            MissingHeaderRowError, IdentifierColumnNotFoundError
        """
        self.warnings = []

        if not text:
            raise EmptyInputError()

        lines = split_lines(text)
        if len(lines) < config.MIN_LINE_COUNT:
            raise TooFewLinesError(len(lines), config.MIN_LINE_COUNT)

        rows = self._split_rows(lines)
        accepted = self._accepted_indices(len(rows[0]))
        columns = [[row[index] for row in rows] for index in accepted]

        identifiers = self._take_identifiers(columns[0])
        language_columns = self._take_languages(columns[1:], accepted[1:])

        table = LocalizationTable.from_columns(identifiers, language_columns)
        logger.debug(
            f"Parsed {table.row_count} identifiers in {len(table.languages)} languages "
            f"({len(self.warnings)} warnings)"
        )
        return table

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _split_rows(self, lines: Sequence[str]) -> List[List[str]]:
        """Split lines into cells, padded or cut to the first row's width."""
        # Copy buffers usually end with a line feed
        if len(lines) > 1 and lines[-1] == "":
            lines = lines[:-1]

        rows: List[List[str]] = []
        expected = 0
        skip_first = is_sheet_row(lines)
        for line_number, line in enumerate(lines, start=1):
            if line_number == 1 and skip_first:
                logger.debug(f"Skipping sheet row: {line!r}")
                continue

            entries = line.split(CELL_SEPARATOR)
            if len(entries) <= 0:
                raise MalformedRowError(
                    "Invalid localization data in clipboard.", line_number, line)
            if len(entries) == 1:
                raise MalformedRowError(
                    "You must copy the TID column along with any language columns. "
                    "Copy the entire sheet, including the headers.",
                    line_number, line,
                )

            if expected <= 0:
                expected = len(entries)
            elif len(entries) != expected:
                self._warn(MismatchedColumnsWarning(line_number, expected, len(entries), line))
                if len(entries) < expected:
                    entries = entries + [MISSING_CELL] * (expected - len(entries))
                else:
                    entries = entries[:expected]
            rows.append(entries)

        if not rows:
            raise TooFewLinesError(0, config.MIN_LINE_COUNT)
        return rows

    def _accepted_indices(self, column_count: int) -> List[int]:
        """Sheet column indices left after removing ignored ones."""
        accepted = [index for index in range(column_count)
                    if index not in self.ignored_columns]
        if not accepted:
            raise IdentifierColumnNotFoundError()
        return accepted

    def _take_identifiers(self, column: Sequence[str]) -> List[str]:
        header = column[0]
        if header.startswith(config.TID_PREFIX):
            raise MissingHeaderRowError(header)
        if len(column) < 2 or not column[1].startswith(config.TID_PREFIX):
            raise IdentifierColumnNotFoundError(column[1] if len(column) > 1 else None)
        return list(column[1:])

    def _take_languages(self, columns: Sequence[Sequence[str]],
                        sheet_indices: Sequence[int]) -> List[Tuple[str, List[str]]]:
        taken: List[Tuple[str, List[str]]] = []
        seen = set()
        blank_header = False
        for sheet_index, column in zip(sheet_indices, columns):
            language = column[0]

            if not language.strip():
                if blank_header:
                    logger.debug(f"Second blank header in column {column_letter(sheet_index)}, stopping")
                    break
                blank_header = True
                continue
            blank_header = False

            if language in seen:
                self._warn(DuplicateLanguageWarning(language, column_letter(sheet_index)))
                continue

            seen.add(language)
            taken.append((language, list(column[1:])))
        return taken

    def _warn(self, warning: LocImportWarning):
        self.warnings.append(warning)
        logger.debug(f"Warning: {warning}")
        if self.sink is not None:
            self.sink.emit(str(warning), Severity.WARNING)
