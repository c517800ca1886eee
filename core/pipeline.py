# -*- coding: utf-8 -*-
"""
Import Pipeline

Copied sheet text -> LocalizationTable -> Lua file. Each call is
self-contained: options and the log sink are passed in, nothing is kept
between runs.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from core.log_sink import LogSink, log_usage
from core.lua_writer import LuaTableWriter
from locimport_enums import Severity
from locimport_exceptions import LocImportWarning, StructuralError
from locimport_logger import get_logger
from models.import_summary import ImportOptions, SavedSummary
from models.localization_table import LocalizationTable
from parser.table_parser import TableParser

logger = get_logger("core.pipeline")


class NullSink:
    """Discards everything."""

    def emit(self, message: str, severity: Severity = Severity.INFO) -> None:
        pass


def _parse(raw_text: Optional[str], options: ImportOptions,
           sink: LogSink) -> Tuple[LocalizationTable, List[LocImportWarning]]:
    parser = TableParser.from_column_list(options.ignored_columns, sink=sink)
    try:
        table = parser.parse(raw_text)
    except StructuralError as e:
        logger.debug(f"Import aborted: {e!r}")
        sink.emit(e.message, Severity.ERROR)
        log_usage(sink)
        raise
    return table, parser.warnings


def parse_text(raw_text: Optional[str],
               options: ImportOptions = ImportOptions(),
               sink: Optional[LogSink] = None) -> LocalizationTable:
    """
    Parse copied sheet text.

    Structural errors are reported to the sink together with the usage
    prompt and then re-raised; no table is returned for them.
    """
    if sink is None:
        sink = NullSink()
    table, _ = _parse(raw_text, options, sink)
    return table


def export_table(table: LocalizationTable,
                 path: Union[str, Path],
                 sink: Optional[LogSink] = None) -> SavedSummary:
    """
    Write the table to ``path`` and report what was saved.

    Errors raised while writing the file are left to the caller.
    """
    if sink is None:
        sink = NullSink()
    writer = LuaTableWriter(sink=sink)
    saved_path = writer.save(table, path)

    summary = SavedSummary(path=saved_path, languages=table.languages,
                           warnings=list(writer.warnings))
    sink.emit(f"Saved texts for languages: {summary.language_list}", Severity.INFO)
    sink.emit(f"Location: {saved_path}", Severity.INFO)
    logger.debug(f"Saved {len(table.languages)} languages to {saved_path}")
    return summary


def convert_text(raw_text: Optional[str],
                 options: ImportOptions = ImportOptions(),
                 sink: Optional[LogSink] = None) -> str:
    """Parse and render in memory, returning the Lua source."""
    table = parse_text(raw_text, options, sink)
    return LuaTableWriter(sink=sink).render(table)


def run_import(raw_text: Optional[str],
               path: Union[str, Path],
               options: ImportOptions = ImportOptions(),
               sink: Optional[LogSink] = None) -> SavedSummary:
    """Parse the text and save it to ``path``; warnings of both steps end up in the summary."""
    if sink is None:
        sink = NullSink()
    table, parse_warnings = _parse(raw_text, options, sink)
    summary = export_table(table, path, sink)
    summary.warnings[:0] = parse_warnings
    return summary
