# test_filesystem.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unixemu.commands import filesystem
from unixemu.commands.filesystem import (
    DIRECTORY_NAME_REQUIRED,
    FILE_NAME_REQUIRED,
    describe_error,
    strip_quotes,
)
from unixemu.commands.registry import Command
from unixemu.commands.result import Outcome


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestStripQuotes:
    def test_strips_one_layer(self):
        assert strip_quotes('"hello world"') == "hello world"

    def test_strips_only_one_layer(self):
        assert strip_quotes('""nested""') == '"nested"'

    def test_unbalanced_quotes(self):
        assert strip_quotes('"open') == "open"
        assert strip_quotes('close"') == "close"

    def test_inner_quotes_kept(self):
        assert strip_quotes('say "hi" now') == 'say "hi" now'


class TestDescribeError:
    def test_uses_strerror(self):
        assert describe_error(FileNotFoundError(2, "No such file or directory")) == "No such file or directory"

    def test_falls_back_to_message(self):
        assert describe_error(ValueError("bad value")) == "bad value"


class TestFileOperations:
    def test_create_file_without_content(self, workdir):
        result = filesystem.create_file("empty.txt")
        assert result.text == "File 'empty.txt' created."
        assert result.outcome is Outcome.SUCCESS
        assert result.command is Command.TOUCH
        assert (workdir / "empty.txt").read_text() == ""

    def test_create_file_writes_content_with_newline(self, workdir):
        filesystem.create_file("notes.txt", '"hello world"')
        assert (workdir / "notes.txt").read_text() == "hello world\n"

    def test_create_file_truncates_existing(self, workdir):
        (workdir / "old.txt").write_text("previous contents")
        filesystem.create_file("old.txt")
        assert (workdir / "old.txt").read_text() == ""

    def test_create_file_in_missing_directory_fails(self, workdir):
        result = filesystem.create_file("nope/file.txt", "x")
        assert result.outcome is Outcome.FAILURE
        assert result.text.startswith("Error creating file 'nope/file.txt': ")

    def test_create_file_requires_name(self, workdir):
        result = filesystem.create_file("")
        assert result.text == FILE_NAME_REQUIRED
        assert result.outcome is Outcome.MISSING_ARGUMENT

    def test_read_file(self, workdir):
        (workdir / "a.txt").write_text("contents\n")
        result = filesystem.read_file("a.txt")
        assert result.text == "contents\n"
        assert result.outcome is Outcome.OUTPUT

    def test_read_missing_file(self, workdir):
        result = filesystem.read_file("missing.txt")
        assert result.outcome is Outcome.FAILURE
        assert result.text == "Error reading file 'missing.txt': No such file or directory"

    def test_read_invalid_utf8(self, workdir):
        (workdir / "bin.dat").write_bytes(b"\xff\xfe\x00")
        result = filesystem.read_file("bin.dat")
        assert result.outcome is Outcome.FAILURE
        assert result.text.startswith("Error reading file 'bin.dat': ")

    def test_read_file_requires_name(self, workdir):
        assert filesystem.read_file("").text == FILE_NAME_REQUIRED

    def test_delete_file(self, workdir):
        (workdir / "gone.txt").write_text("")
        result = filesystem.delete_file("gone.txt")
        assert result.text == "File 'gone.txt' deleted."
        assert not (workdir / "gone.txt").exists()

    def test_delete_missing_file(self, workdir):
        result = filesystem.delete_file("missing.txt")
        assert result.text.startswith("Error deleting file 'missing.txt':")
        assert result.outcome is Outcome.FAILURE

    def test_delete_file_requires_name(self, workdir):
        assert filesystem.delete_file("").outcome is Outcome.MISSING_ARGUMENT


class TestDirectoryOperations:
    def test_create_directory(self, workdir):
        result = filesystem.create_directory("docs")
        assert result.text == "Directory 'docs' created."
        assert (workdir / "docs").is_dir()

    def test_create_existing_directory_fails(self, workdir):
        (workdir / "docs").mkdir()
        result = filesystem.create_directory("docs")
        assert result.text == "Error creating directory 'docs': File exists"

    def test_create_directory_requires_name(self, workdir):
        result = filesystem.create_directory("")
        assert result.text == DIRECTORY_NAME_REQUIRED

    def test_remove_directory(self, workdir):
        (workdir / "empty").mkdir()
        result = filesystem.remove_directory("empty")
        assert result.text == "Directory 'empty' removed."
        assert not (workdir / "empty").exists()

    def test_remove_non_empty_directory_fails(self, workdir):
        (workdir / "full").mkdir()
        (workdir / "full" / "f.txt").write_text("x")
        result = filesystem.remove_directory("full")
        assert result.outcome is Outcome.FAILURE
        assert result.text.startswith("Error removing directory 'full': ")
        assert (workdir / "full").is_dir()

    def test_remove_directory_requires_name(self, workdir):
        assert filesystem.remove_directory("").text == DIRECTORY_NAME_REQUIRED

    def test_change_directory(self, workdir):
        (workdir / "sub").mkdir()
        result = filesystem.change_directory("sub")
        assert result.text == "Changed directory to 'sub'."
        assert os.path.realpath(os.getcwd()) == os.path.realpath(workdir / "sub")

    def test_change_to_missing_directory_keeps_cwd(self, workdir):
        before = os.getcwd()
        result = filesystem.change_directory("nonexistent_dir")
        assert result.text.startswith("Error changing directory to 'nonexistent_dir': ")
        assert os.getcwd() == before

    def test_change_directory_requires_name(self, workdir):
        before = os.getcwd()
        assert filesystem.change_directory("").outcome is Outcome.MISSING_ARGUMENT
        assert os.getcwd() == before

    def test_list_directory_sorted(self, workdir):
        for name in ["zeta", "alpha", "mid"]:
            (workdir / name).write_text("")
        result = filesystem.list_directory()
        assert result.text == "alpha\nmid\nzeta"
        assert result.command is Command.LS

    def test_list_empty_directory(self, workdir):
        assert filesystem.list_directory().text == ""

    def test_current_directory(self, workdir):
        result = filesystem.current_directory()
        assert result.text == os.getcwd()
        assert result.command is Command.PWD


class TestEcho:
    def test_joins_with_single_spaces(self):
        assert filesystem.echo(["hello", "there", "world"]).text == "hello there world"

    def test_no_arguments(self):
        assert filesystem.echo([]).text == ""
