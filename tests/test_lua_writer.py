# -*- coding: utf-8 -*-
"""
Unit Tests for the Lua Table Writer
"""

import io

import pytest

from core.lua_writer import LuaTableWriter, starts_new_group
from locimport_enums import Severity
from locimport_exceptions import BlankEntriesWarning
from models.localization_table import LocalizationTable

EXPECTED_SAMPLE_OUTPUT = """\
local TEXTS = {}

-- English
TEXTS["EN"] = {
tid_menu_play = "Play"
tid_menu_quit = "Quit"

tid_shop_buy = "Buy"
}

-- French
TEXTS["FR"] = {
tid_menu_play = "Jouer"
tid_menu_quit = "Quitter"

tid_shop_buy = ""
}

return TEXTS
"""


def single_language(identifiers, texts, language="EN"):
    return LocalizationTable(identifiers=identifiers, languages=(language,),
                             texts={language: texts})


def entry_lines(output):
    """Lines between the opening and closing brace of the first block."""
    lines = output.split("\n")
    start = next(i for i, line in enumerate(lines) if line.startswith("TEXTS["))
    end = lines.index("}", start)
    return lines[start + 1:end]


class TestStartsNewGroup:

    @pytest.mark.parametrize("identifier, previous, expected", [
        ("tid_shop_buy", "tid_menu_quit", True),
        ("tid_ab", "tid_ac", True),
        ("tid_menu_quit", "tid_menu_play", False),
        ("tid_ui_stop", "tid_ui_start", False),
        ("tid_ui_a2", "tid_ui_a", False),
        ("tid_a", None, False),
        ("tid", "tid_a", False),
    ])
    def test_group_boundaries(self, identifier, previous, expected):
        assert starts_new_group(identifier, previous) is expected


class TestRender:

    def test_full_output(self, sample_table):
        assert LuaTableWriter().render(sample_table) == EXPECTED_SAMPLE_OUTPUT

    def test_render_is_deterministic(self, sample_table):
        writer = LuaTableWriter()
        assert writer.render(sample_table) == writer.render(sample_table)

    def test_empty_table(self):
        output = LuaTableWriter().render(LocalizationTable())
        assert output == "local TEXTS = {}\n\nreturn TEXTS\n"

    def test_blank_identifier_is_skipped(self):
        table = single_language(("tid_a", "", "  ", "tid_b"), ("A", "lost", "lost too", "B"))

        assert entry_lines(LuaTableWriter().render(table)) == [
            'tid_a = "A"',
            '',
            'tid_b = "B"',
        ]

    def test_quotes_are_not_escaped(self):
        table = single_language(("tid_a",), ('Say "hi"\tnow',))

        assert entry_lines(LuaTableWriter().render(table)) == ['tid_a = "Say "hi"\tnow"']

    def test_unknown_language_code_in_comment(self):
        output = LuaTableWriter().render(single_language(("tid_a",), ("A",), language="xx-YY"))

        assert '-- xx-YY\nTEXTS["xx-YY"] = {' in output

    def test_display_name_is_case_insensitive(self):
        output = LuaTableWriter().render(single_language(("tid_a",), ("A",), language="pt-br"))

        assert '-- Portuguese (Brazil)\nTEXTS["pt-br"] = {' in output

    def test_write_to_stream(self, sample_table):
        stream = io.StringIO()
        LuaTableWriter().write(sample_table, stream)

        assert stream.getvalue() == EXPECTED_SAMPLE_OUTPUT


class TestBlankEntries:

    def test_single_blank_entry(self):
        writer = LuaTableWriter()
        output = writer.render(single_language(("tid_a",), ("",)))

        assert entry_lines(output) == ['tid_a = ""']
        assert len(writer.warnings) == 1
        warning = writer.warnings[0]
        assert isinstance(warning, BlankEntriesWarning)
        assert (warning.language, warning.count) == ("EN", 1)

    def test_whitespace_counts_as_blank(self):
        writer = LuaTableWriter()
        writer.render(single_language(("tid_a", "tid_b"), ("  ", "\t")))

        assert writer.warnings[0].count == 2

    def test_blank_identifier_rows_are_not_counted(self):
        writer = LuaTableWriter()
        writer.render(single_language(("tid_a", ""), ("A", "")))

        assert writer.warnings == []

    def test_warning_per_language(self, sample_table, memory_sink):
        writer = LuaTableWriter(sink=memory_sink)
        writer.render(sample_table)

        assert [w.language for w in writer.warnings] == ["FR"]
        assert memory_sink.messages(Severity.WARNING) == ["Language FR has 1 blank entries."]


class TestSave:

    def test_save_writes_utf8(self, tmp_path):
        table = single_language(("tid_a",), ("Olá, 世界",), language="PT")
        path = tmp_path / "LocalizationTexts.lua"

        saved = LuaTableWriter().save(table, path)

        assert saved == path
        assert path.read_bytes().decode("utf-8") == LuaTableWriter().render(table)
        assert b"\r\n" not in path.read_bytes()

    def test_save_replaces_existing_file(self, tmp_path, sample_table):
        path = tmp_path / "out.lua"
        path.write_text("old content that is longer than nothing" * 100, encoding="utf-8")

        LuaTableWriter().save(sample_table, path)

        assert path.read_text(encoding="utf-8") == EXPECTED_SAMPLE_OUTPUT

    def test_missing_folder_raises(self, tmp_path, sample_table):
        with pytest.raises(OSError):
            LuaTableWriter().save(sample_table, tmp_path / "missing" / "out.lua")
