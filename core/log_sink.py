# -*- coding: utf-8 -*-
"""
locimport Log Sinks

The conversion reports progress, warnings and errors as (message, severity)
pairs to a sink supplied by the caller, so any host can present them.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

import locimport_config as config
from locimport_enums import Severity
from locimport_logger import get_logger


class LogSink(Protocol):
    """Receives user-facing messages from the conversion."""

    def emit(self, message: str, severity: Severity) -> None:
        ...


@dataclass(frozen=True)
class LogEntry:
    message: str
    severity: Severity


class MemorySink:
    """
    Keeps every entry in order, like the log panel of an import window.
    """

    def __init__(self):
        self.entries: List[LogEntry] = []

    def emit(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.entries.append(LogEntry(message, Severity(severity)))

    def messages(self, severity: Optional[Severity] = None) -> List[str]:
        """Return messages, optionally only those of one severity."""
        return [entry.message for entry in self.entries
                if severity is None or entry.severity == severity]

    def clear(self):
        self.entries.clear()

    def __len__(self):
        return len(self.entries)


class LoggerSink:
    """Forwards entries to the 'locimport' logging hierarchy."""

    def __init__(self, name: str = "sink"):
        self.logger = get_logger(name)

    def emit(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.logger.log(Severity(severity).log_level, message)


def log_lines(sink: LogSink, lines, severity: Severity = Severity.INFO):
    for line in lines:
        sink.emit(line, severity)


def log_banner(sink: LogSink):
    """Emit the tool name, version and the column hint."""
    log_lines(sink, config.BANNER_LINES)
    log_usage(sink)
    log_lines(sink, config.COLUMNS_HINT_LINES)


def log_usage(sink: LogSink):
    """Emit the usage prompt shown after a failed import."""
    log_lines(sink, config.USAGE_LINES)
