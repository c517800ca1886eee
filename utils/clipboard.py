# -*- coding: utf-8 -*-
"""
Clipboard access through Qt (PySide6).
"""

import sys

from PySide6.QtGui import QGuiApplication

from locimport_logger import get_logger

logger = get_logger("utils.clipboard")


def _application() -> QGuiApplication:
    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv[:1])
    return app


def read_clipboard_text() -> str:
    """Return the clipboard text, or "" when it holds none."""
    clipboard = _application().clipboard()
    text = clipboard.text() or ""
    logger.debug(f"Read {len(text)} characters from clipboard")
    return text
