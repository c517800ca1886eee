"""
locimport enum definitions
"""

import logging
from enum import Enum


class Severity(str, Enum):
    """Severity of a message delivered to a log sink."""
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}
