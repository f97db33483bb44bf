from __future__ import annotations

from typing import Any

from ..core.models import PathInfo
from ..core.pathname import Pathname
from .common import as_strings


def path_info(path: str) -> dict[str, Any]:
    """
    Lexical facts about a path: absolute/relative, root, components, cleaned form.
    """
    p = Pathname(path)
    return PathInfo(
        path=str(p),
        absolute=p.is_absolute,
        root=p.is_root,
        components=p.components(),
        cleaned=str(p.cleanpath()),
    ).to_dict()


def cleanpath(path: str) -> dict[str, Any]:
    p = Pathname(path)
    return {"path": str(p), "cleaned": str(p.cleanpath())}


def join(path: str, parts: list[str], clean: bool = False) -> dict[str, Any]:
    """
    Join fragments onto `path`. With clean=True the result is normalized
    (same as applying `+` once per fragment).
    """
    joined = Pathname(path).join(*parts)
    if clean:
        joined = joined.cleanpath()
    return {"path": path, "parts": parts, "clean": clean, "result": str(joined)}


def relative_path_from(path: str, base: str) -> dict[str, Any]:
    rel = Pathname(path).relative_path_from(base)
    return {"path": path, "base": base, "result": str(rel)}


def ascend(path: str) -> dict[str, Any]:
    return {"path": path, "items": as_strings(Pathname(path).ascend())}


def descend(path: str) -> dict[str, Any]:
    return {"path": path, "items": as_strings(Pathname(path).descend())}


def compare(left: str, right: str) -> dict[str, Any]:
    a, b = Pathname(left), Pathname(right)
    return {"left": left, "right": right, "order": a.compare(b), "equal": a == b}
