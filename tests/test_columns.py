# -*- coding: utf-8 -*-
"""
Unit Tests for column letter parsing
"""

import pytest

from parser.columns import column_letter, parse_ignored_columns


class TestParseIgnoredColumns:

    @pytest.mark.parametrize("column_list, expected", [
        ("c, d", {2, 3}),
        ("C,D", {2, 3}),
        (" a ,, z ", {0, 25}),
        ("b, b", {1}),
        ("cd", {2}),
    ])
    def test_letters(self, column_list, expected):
        assert parse_ignored_columns(column_list) == expected

    @pytest.mark.parametrize("column_list", ["", None, " , ", "1, ?", "é"])
    def test_nothing_to_ignore(self, column_list):
        assert parse_ignored_columns(column_list) == frozenset()

    def test_invalid_tokens_are_skipped(self):
        assert parse_ignored_columns("3, c, -d, e") == {2, 4}


class TestColumnLetter:

    def test_letters(self):
        assert column_letter(0) == "A"
        assert column_letter(2) == "C"
        assert column_letter(25) == "Z"

    def test_past_z_uses_two_letters(self):
        assert column_letter(26) == "AA"
        assert column_letter(27) == "AB"
        assert column_letter(52) == "BA"

    def test_negative_index(self):
        with pytest.raises(ValueError):
            column_letter(-1)
