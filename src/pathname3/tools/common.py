from __future__ import annotations

from ..core.config import FilesystemConfig
from ..core.filesystem import LocalFilesystem
from ..core.pathname import Pathname
from ..core.security import ensure_within_root, resolve_root


def make_filesystem(config: FilesystemConfig | None = None) -> LocalFilesystem:
    return LocalFilesystem(config=config or FilesystemConfig.from_env())


def sandboxed(root: str, path: str, fs: LocalFilesystem) -> tuple[Pathname, Pathname]:
    repo_root = resolve_root(root, fs)
    return repo_root, ensure_within_root(repo_root, path or ".", fs)


def as_strings(paths) -> list[str]:
    return [str(p) for p in paths]
