# -*- coding: utf-8 -*-
"""
locimport Parser Package

Parses text copied from a localization spreadsheet.
"""

from parser.columns import parse_ignored_columns, column_letter
from parser.table_parser import TableParser, split_lines

__all__ = [
    'TableParser',
    'split_lines',
    'parse_ignored_columns',
    'column_letter',
]
