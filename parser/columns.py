# -*- coding: utf-8 -*-
"""
Column letter helpers.

Maps the user's "columns to ignore" text (e.g. "c, d") to zero-based indices.
"""

from typing import FrozenSet, Optional

import locimport_config as config
from locimport_logger import get_logger

logger = get_logger("parser.columns")

LETTER_TO_INDEX = {letter: index for index, letter in enumerate(config.COLUMN_LETTERS)}


def parse_ignored_columns(column_list: Optional[str]) -> FrozenSet[int]:
    """
    Parse a comma separated list of column letters.

    Tokens are trimmed and matched case-insensitively on their first
    character. Empty tokens and tokens not starting with a letter are skipped.

    Args:
        column_list: Text such as "c, d"; None or "" means no ignored columns

    Returns:
        Zero-based column indices, e.g. {2, 3}
    """
    if not column_list:
        return frozenset()

    indices = set()
    for token in column_list.split(','):
        token = token.strip().lower()
        if not token:
            continue
        index = LETTER_TO_INDEX.get(token[0])
        if index is None:
            logger.debug(f"Skipping column token '{token}'")
            continue
        indices.add(index)
    return frozenset(indices)


def column_letter(index: int) -> str:
    """Return the spreadsheet column name for a zero-based index (0 -> A, 26 -> AA)."""
    if index < 0:
        raise ValueError(f"Column index out of range: {index}")
    base = len(config.COLUMN_LETTERS)
    name = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, base)
        name = config.COLUMN_LETTERS[remainder] + name
    return name.upper()
