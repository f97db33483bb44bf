from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PathInfo:
    path: str
    absolute: bool
    root: bool
    components: list[str]
    cleaned: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "absolute": self.absolute,
            "relative": not self.absolute,
            "root": self.root,
            "components": self.components,
            "cleaned": self.cleaned,
        }


@dataclass(frozen=True)
class StatResult:
    path: str
    ftype: str
    size: int
    mode: int
    uid: int
    gid: int
    atime: float
    mtime: float
    ctime: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "ftype": self.ftype,
            "size": self.size,
            "mode": oct(self.mode),
            "uid": self.uid,
            "gid": self.gid,
            "atime": self.atime,
            "mtime": self.mtime,
            "ctime": self.ctime,
        }


@dataclass(frozen=True)
class Listing:
    path: str
    items: list[str]
    total: int
    truncated: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "items": self.items,
            "total": self.total,
            "returned": len(self.items),
            "truncated": self.truncated,
        }
