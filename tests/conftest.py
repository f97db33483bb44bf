from __future__ import annotations

from pathlib import Path

import pytest

from pathname3.core.config import FilesystemConfig
from pathname3.core.filesystem import LocalFilesystem


@pytest.fixture()
def tmp_tree(tmp_path: Path) -> Path:
    """
    Creates a small deterministic tree:
      tree/
        README.md
        src/app.py
        src/pkg/__init__.py
        docs/
    """
    root = tmp_path / "tree"
    root.mkdir()

    (root / "README.md").write_text("# dummy\n", encoding="utf-8")
    (root / "src").mkdir()
    (root / "src" / "app.py").write_text("print('hi')\n", encoding="utf-8")
    (root / "src" / "pkg").mkdir()
    (root / "src" / "pkg" / "__init__.py").write_text("", encoding="utf-8")
    (root / "docs").mkdir()

    return root.resolve()


@pytest.fixture()
def fs() -> LocalFilesystem:
    return LocalFilesystem()


@pytest.fixture()
def writable_fs() -> LocalFilesystem:
    return LocalFilesystem(FilesystemConfig(read_only=False))


@pytest.fixture()
def make_file(tmp_tree: Path):
    """
    Helper: add a file to the tree in a predictable way.
    """
    def _maker(relpath: str = "notes.txt", text: str = "data\n") -> Path:
        p = tmp_tree / relpath
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p
    return _maker
