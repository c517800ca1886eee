# -*- coding: utf-8 -*-
"""
Tests for revealing saved files in the file manager.
"""

from pathlib import Path

import pytest

import utils.explorer as explorer


class TestRevealCommand:

    def test_windows(self):
        command = explorer.reveal_command(Path("C:/maps/Texts.lua"), platform="win32")
        assert command.startswith('explorer.exe /select,"')

    def test_macos(self):
        path = Path("/maps/Texts.lua")
        assert explorer.reveal_command(path, platform="darwin") == ["open", "-R", str(path)]

    def test_linux_opens_folder(self):
        path = Path("/maps/Texts.lua")
        assert explorer.reveal_command(path, platform="linux") == ["xdg-open", str(Path("/maps"))]


class TestRevealInFileManager:

    def test_missing_file(self, tmp_path):
        assert explorer.reveal_in_file_manager(tmp_path / "nope.lua") is False

    def test_starts_file_manager(self, tmp_path, monkeypatch):
        path = tmp_path / "Texts.lua"
        path.write_text("", encoding="utf-8")
        started = []
        monkeypatch.setattr(explorer.subprocess, "Popen", lambda command: started.append(command))

        assert explorer.reveal_in_file_manager(path) is True
        assert started == [explorer.reveal_command(path.resolve())]

    def test_command_not_found(self, tmp_path, monkeypatch):
        path = tmp_path / "Texts.lua"
        path.write_text("", encoding="utf-8")

        def fail(command):
            raise FileNotFoundError(command)

        monkeypatch.setattr(explorer.subprocess, "Popen", fail)

        assert explorer.reveal_in_file_manager(path) is False
