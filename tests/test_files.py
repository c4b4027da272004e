from pathlib import Path

import pytest

from questionforge.files import read_file, replace_target, walk_dir, write_file


def test_walk_dir_lists_files_only_sorted(tmp_path: Path):
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    assert walk_dir(tmp_path) == [tmp_path / "a.txt", tmp_path / "b.txt"]


def test_walk_dir_empty_directory(tmp_path: Path):
    (tmp_path / "only_dir").mkdir()
    assert walk_dir(tmp_path) == []


def test_walk_dir_missing_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        walk_dir(tmp_path / "missing")


def test_write_read_round_trip_keeps_line_endings(tmp_path: Path):
    target = tmp_path / "note.md"
    content = "日本語の問題\r\n二行目\n"
    write_file(target, content)
    assert read_file(target) == content


def test_read_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "nope.md")


def test_write_file_into_missing_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        write_file(tmp_path / "missing" / "x.md", "x")


def test_replace_target_removes_all_occurrences():
    assert replace_target("foo", "foobarfoo") == "bar"


def test_replace_target_without_match_is_identity():
    assert replace_target("zzz", "abc") == "abc"
    assert replace_target("", "abc") == "abc"