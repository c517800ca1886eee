# -*- coding: utf-8 -*-
"""
locimport Core Package

Lua serialization, log sinks and the import pipeline.
"""

from core.lua_writer import LuaTableWriter
from core.language_names import code_to_language_name
from core.log_sink import LogSink, MemorySink, LoggerSink
from core.pipeline import parse_text, export_table, convert_text, run_import

__all__ = [
    'LuaTableWriter',
    'code_to_language_name',
    'LogSink',
    'MemorySink',
    'LoggerSink',
    'parse_text',
    'export_table',
    'convert_text',
    'run_import',
]
