# -*- coding: utf-8 -*-
"""
locimport central logging module

Standard logging setup for the whole application.
Log files live under ~/.locimport/logs/.

Handlers are only configured on the root 'locimport' logger.
Child loggers propagate to root and do not add handlers themselves.
"""

import logging
from datetime import datetime

import locimport_config as config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_configured = False


def _log_file_path():
    return config.LOG_DIR / f"locimport_{datetime.now().strftime('%Y%m%d')}.log"


def _configure_root_logger():
    """Configure the root 'locimport' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("locimport")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    try:
        config.LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(_log_file_path(), encoding='utf-8')
    except OSError as e:
        root_logger.warning(f"File logging disabled ({config.LOG_DIR}): {e}")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    _root_configured = True


_configure_root_logger()
logger = logging.getLogger("locimport")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root 'locimport' logger.

    Args:
        name: Module name

    Returns:
        Logger named locimport.{name}
    """
    _configure_root_logger()
    return logging.getLogger(f"locimport.{name}")
