# -*- coding: utf-8 -*-
"""
locimport Models Package

Data passed between the parser, the writer and the host.
"""

from models.localization_table import LocalizationTable
from models.import_summary import ImportOptions, SavedSummary

__all__ = ['LocalizationTable', 'ImportOptions', 'SavedSummary']
