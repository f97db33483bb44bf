from __future__ import annotations

from pathlib import Path

import pytest

from pathname3.core.errors import ArgumentError, InvalidPath, PathPolicyError
from pathname3.tools import (
    ascend,
    cleanpath,
    compare,
    descend,
    find_paths,
    join,
    list_children,
    path_info,
    read_file,
    relative_path_from,
    stat_path,
)


def test_path_info():
    out = path_info("/usr/./lib/../bin")
    assert out["absolute"] is True
    assert out["relative"] is False
    assert out["root"] is False
    assert out["components"] == ["/", "usr", ".", "lib", "..", "bin"]
    assert out["cleaned"] == "/usr/bin"


def test_path_info_rejects_null_byte():
    with pytest.raises(InvalidPath):
        path_info("a\0b")


def test_cleanpath_tool():
    assert cleanpath("a/../..")["cleaned"] == ".."


def test_join_tool_clean_flag():
    assert join("/a", ["..", "b"])["result"] == "/a/../b"
    assert join("/a", ["..", "b"], clean=True)["result"] == "/b"


def test_relative_path_from_tool():
    out = relative_path_from("/Users/stouset/foo", "/Library")
    assert out["result"] == "../Users/stouset/foo"


def test_relative_path_from_tool_propagates_errors():
    with pytest.raises(ArgumentError):
        relative_path_from("foo", "/bar")


def test_ascend_descend_tools():
    assert descend("/a/b")["items"] == ["/", "/a", "/a/b"]
    assert ascend("/a/b")["items"] == ["/a/b", "/a", "/"]


def test_compare_tool():
    out = compare("/a", "/a-b")
    assert out["order"] == -1
    assert out["equal"] is False
    assert compare("/a/./b", "/a/b/")["equal"] is True


def test_list_children_tool(tmp_tree: Path):
    out = list_children(root=str(tmp_tree), path="src")
    assert out["items"] == [f"{tmp_tree}/src/app.py", f"{tmp_tree}/src/pkg"]
    assert out["truncated"] is False


def test_list_children_respects_env_cap(tmp_tree: Path, monkeypatch):
    monkeypatch.setenv("PATHNAME3_MAX_ENTRIES", "1")
    out = list_children(root=str(tmp_tree))
    assert out["returned"] == 1
    assert out["total"] == 3
    assert out["truncated"] is True


def test_stat_path_tool(tmp_tree: Path):
    out = stat_path(root=str(tmp_tree), path="src")
    assert out["ftype"] == "directory"


def test_read_file_tool(tmp_tree: Path):
    out = read_file(root=str(tmp_tree), path="./src/../README.md")
    assert out["path"] == "README.md"
    assert out["content"] == "# dummy"
    assert out["truncated"] is False


def test_read_file_requires_path(tmp_tree: Path):
    with pytest.raises(ValueError, match="path is required"):
        read_file(root=str(tmp_tree), path="  ")


def test_read_file_char_ceiling(tmp_tree: Path, make_file, monkeypatch):
    make_file("big.txt", "x" * 500)
    monkeypatch.setenv("PATHNAME3_MAX_READ_CHARS", "100")
    out = read_file(root=str(tmp_tree), path="big.txt")
    assert out["truncated"] is True
    assert len(out["content"]) == 100


def test_read_file_outside_root_blocked(tmp_tree: Path):
    with pytest.raises(PathPolicyError, match="Path escapes root"):
        read_file(root=str(tmp_tree / "src"), path="../README.md")


def test_find_paths_tool(tmp_tree: Path):
    out = find_paths(root=str(tmp_tree), pattern="*.py")
    assert out["items"] == ["src/app.py", "src/pkg/__init__.py"]
    assert out["total"] == 2


def test_find_paths_without_pattern_includes_root(tmp_tree: Path):
    out = find_paths(root=str(tmp_tree), path="src")
    assert out["items"] == ["src", "src/app.py", "src/pkg", "src/pkg/__init__.py"]


def test_find_paths_respects_env_cap(tmp_tree: Path, monkeypatch):
    monkeypatch.setenv("PATHNAME3_MAX_ENTRIES", "2")
    out = find_paths(root=str(tmp_tree), pattern="*.py")
    assert out["items"] == ["src/app.py", "src/pkg/__init__.py"]
    assert out["total"] == 2
    assert out["truncated"] is False

    out = find_paths(root=str(tmp_tree))
    assert out["returned"] == 2
    assert out["total"] == 7
    assert out["truncated"] is True
    assert out["items"] == [".", "README.md"]
