from __future__ import annotations

from typing import Any

from ..core.limits import MAX_LINES_TEXT
from .common import make_filesystem, sandboxed


def list_children(root: str = ".", path: str = ".") -> dict[str, Any]:
    """
    Immediate children of a directory under `root`, sorted, capped.
    """
    fs = make_filesystem()
    repo_root, target = sandboxed(root, path, fs)
    listing = fs.list_children(target)
    return {"root": str(repo_root), **listing.to_dict()}


def stat_path(root: str = ".", path: str = ".") -> dict[str, Any]:
    fs = make_filesystem()
    repo_root, target = sandboxed(root, path, fs)
    return {"root": str(repo_root), **fs.stat_result(target).to_dict()}


def read_file(root: str = ".", path: str = "") -> dict[str, Any]:
    """
    Read a text file under `root`. Output is capped both by line count and
    by the provider's max_read_chars.
    """
    if not (path or "").strip():
        raise ValueError("path is required")

    fs = make_filesystem()
    repo_root, target = sandboxed(root, path, fs)
    text = fs.read_text(target)

    lines = text.splitlines()
    truncated = False
    if len(lines) > MAX_LINES_TEXT:
        lines = lines[:MAX_LINES_TEXT]
        truncated = True

    content = "\n".join(lines)
    limit = max(1, int(fs.config.max_read_chars))
    if len(content) > limit:
        content = content[:limit]
        truncated = True

    return {
        "root": str(repo_root),
        "path": str(target.relative_path_from(repo_root)),
        "truncated": truncated,
        "line_count": len(text.splitlines()),
        "content": content,
    }


def find_paths(root: str = ".", path: str = ".", pattern: str | None = None) -> dict[str, Any]:
    """
    Recursive walk below `path` (relative to `root`), optionally filtered by a
    shell pattern matched against the basename.
    """
    fs = make_filesystem()
    repo_root, target = sandboxed(root, path, fs)
    limit = max(1, int(fs.config.max_entries))

    items: list[str] = []
    total = 0
    for p in fs.find(target):
        if pattern and not p.basename.fnmatch(pattern):
            continue
        total += 1
        if len(items) < limit:
            items.append(str(p.relative_path_from(repo_root)))

    return {
        "root": str(repo_root),
        "path": str(target),
        "pattern": pattern,
        "total": total,
        "returned": len(items),
        "truncated": total > len(items),
        "items": items,
    }
