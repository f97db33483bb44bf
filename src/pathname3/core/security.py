from __future__ import annotations

from .errors import ArgumentError, PathPolicyError
from .filesystem import LocalFilesystem
from .pathname import DOT_DOT, PathLike, Pathname, to_path

_LOCAL = LocalFilesystem()


def resolve_root(root: PathLike, fs: LocalFilesystem | None = None) -> Pathname:
    """Resolve and validate the root directory the server may look inside."""
    fs = fs or _LOCAL
    p = fs.realpath(root)

    if not fs.exists(p):
        raise PathPolicyError(f"Root does not exist: {p}")
    if not fs.is_directory(p):
        raise PathPolicyError(f"Root is not a directory: {p}")

    return p


def ensure_within_root(root: Pathname, target: PathLike, fs: LocalFilesystem | None = None) -> Pathname:
    """
    Ensure `target` is inside `root` (prevents path traversal, symlinks included).
    Relative targets are taken relative to `root`. Returns the resolved target.
    """
    fs = fs or _LOCAL
    target = to_path(target)
    if target.is_relative:
        target = root.join(target)
    resolved = fs.realpath(target)

    try:
        rel = resolved.relative_path_from(root)
    except ArgumentError as e:
        raise PathPolicyError(f"Path escapes root. root={root} target={resolved}") from e

    if rel.components()[:1] == [DOT_DOT]:
        raise PathPolicyError(f"Path escapes root. root={root} target={resolved}")

    return resolved
