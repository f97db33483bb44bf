from __future__ import annotations

import contextlib
import errno
import glob as _glob
import os
import stat as _stat
from typing import Any, Callable, Iterator, Protocol, runtime_checkable

from ..logging import get_logger
from .config import FilesystemConfig
from .errors import FilesystemError, PathPolicyError
from .models import Listing, StatResult
from .pathname import DOT, DOT_DOT, ROOT, PathLike, Pathname, to_path

logger = get_logger(__name__)


@runtime_checkable
class FilesystemProvider(Protocol):
    """
    The capability Pathname values are resolved against. Everything in
    pathname.py is lexical; anything that needs the real filesystem goes
    through one of these.
    """

    config: FilesystemConfig

    def stat(self, path: PathLike) -> os.stat_result: ...
    def lstat(self, path: PathLike) -> os.stat_result: ...
    def exists(self, path: PathLike) -> bool: ...
    def is_file(self, path: PathLike) -> bool: ...
    def is_directory(self, path: PathLike) -> bool: ...
    def is_symlink(self, path: PathLike) -> bool: ...
    def entries(self, path: PathLike) -> list[Pathname]: ...
    def children(self, path: PathLike) -> list[Pathname]: ...
    def read_text(self, path: PathLike) -> str: ...
    def readlink(self, path: PathLike) -> Pathname: ...
    def pwd(self) -> Pathname: ...
    def glob(self, pattern: str) -> list[Pathname]: ...
    def unlink(self, path: PathLike) -> None: ...


_FTYPES: tuple[tuple[Callable[[int], bool], str], ...] = (
    (_stat.S_ISREG, "file"),
    (_stat.S_ISDIR, "directory"),
    (_stat.S_ISLNK, "link"),
    (_stat.S_ISCHR, "characterSpecial"),
    (_stat.S_ISBLK, "blockSpecial"),
    (_stat.S_ISFIFO, "fifo"),
    (_stat.S_ISSOCK, "socket"),
)


def ftype_of(mode: int) -> str:
    for check, name in _FTYPES:
        if check(mode):
            return name
    return "unknown"


class LocalFilesystem:
    """
    FilesystemProvider over the local OS:
      - thin one-call delegations to os / os.path / glob
      - OSError wrapped in FilesystemError (path in the message)
      - mutating calls refused unless config.read_only is False
      - listings sorted and capped at config.max_entries
    """

    def __init__(self, config: FilesystemConfig | None = None) -> None:
        self.config = config or FilesystemConfig()

    # -- plumbing ---------------------------------------------------------

    def _call(self, op: str, path: PathLike, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        target = str(to_path(path))
        try:
            return fn(target, *args, **kwargs)
        except OSError as e:
            logger.debug("%s(%s) failed: %s", op, target, e)
            raise FilesystemError(f"{op} failed for {target}: {e.strerror or e}") from e

    def _require_writable(self, op: str, path: PathLike) -> None:
        if self.config.read_only:
            logger.warning("Refused %s(%s): provider is read-only", op, path)
            raise PathPolicyError(f"Blocked {op} in read-only mode: {path}")

    def _cap(self, path: PathLike, items: list[Pathname]) -> Listing:
        items = sorted(items)
        total = len(items)
        limit = max(1, int(self.config.max_entries))
        truncated = total > limit
        if truncated:
            logger.debug("Listing of %s truncated: %d > %d", path, total, limit)
            items = items[:limit]
        return Listing(path=str(path), items=[str(p) for p in items], total=total, truncated=truncated)

    # -- stat family ------------------------------------------------------

    def stat(self, path: PathLike) -> os.stat_result:
        return self._call("stat", path, os.stat)

    def lstat(self, path: PathLike) -> os.stat_result:
        return self._call("lstat", path, os.lstat)

    def stat_result(self, path: PathLike) -> StatResult:
        st = self.lstat(path)
        return StatResult(
            path=str(path),
            ftype=ftype_of(st.st_mode),
            size=st.st_size,
            mode=_stat.S_IMODE(st.st_mode),
            uid=st.st_uid,
            gid=st.st_gid,
            atime=st.st_atime,
            mtime=st.st_mtime,
            ctime=st.st_ctime,
        )

    def atime(self, path: PathLike) -> float:
        return self.stat(path).st_atime

    def mtime(self, path: PathLike) -> float:
        return self.stat(path).st_mtime

    def ctime(self, path: PathLike) -> float:
        return self.stat(path).st_ctime

    def ftype(self, path: PathLike) -> str:
        return ftype_of(self.lstat(path).st_mode)

    # -- predicates (never raise for missing paths) -----------------------

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(to_path(path))

    def is_file(self, path: PathLike) -> bool:
        return os.path.isfile(to_path(path))

    def is_directory(self, path: PathLike) -> bool:
        return os.path.isdir(to_path(path))

    def is_symlink(self, path: PathLike) -> bool:
        return os.path.islink(to_path(path))

    def _mode_check(self, path: PathLike, check: Callable[[int], bool]) -> bool:
        try:
            return check(os.stat(to_path(path)).st_mode)
        except OSError:
            return False

    def is_blockdev(self, path: PathLike) -> bool:
        return self._mode_check(path, _stat.S_ISBLK)

    def is_chardev(self, path: PathLike) -> bool:
        return self._mode_check(path, _stat.S_ISCHR)

    def is_executable(self, path: PathLike) -> bool:
        return os.access(to_path(path), os.X_OK, effective_ids=os.access in os.supports_effective_ids)

    def is_executable_real(self, path: PathLike) -> bool:
        return os.access(to_path(path), os.X_OK)

    def is_grpowned(self, path: PathLike) -> bool:
        try:
            return os.stat(to_path(path)).st_gid == os.getegid()
        except OSError:
            return False

    # -- directories ------------------------------------------------------

    def entries(self, path: PathLike) -> list[Pathname]:
        """Directory entries including "." and "..", sorted."""
        names = self._call("entries", path, os.listdir)
        return sorted([Pathname(DOT), Pathname(DOT_DOT), *(Pathname(n) for n in names)])

    def children(self, path: PathLike) -> list[Pathname]:
        return [p for p in self.entries(path) if not (p.is_dot or p.is_dot_dot)]

    def list_children(self, path: PathLike) -> Listing:
        base = to_path(path)
        return self._cap(base, [base.join(c) for c in self.children(base)])

    def find(self, path: PathLike) -> Iterator[Pathname]:
        """The start path, then every descendant depth first in sorted order. Symlinks are not followed."""
        start = to_path(path)
        yield start
        if self.is_symlink(start) or not self.is_directory(start):
            return
        for child in self.children(start):
            yield from self.find(start.join(child))

    def glob(self, pattern: str) -> list[Pathname]:
        return sorted(Pathname(p) for p in _glob.glob(str(to_path(pattern))))

    def pwd(self) -> Pathname:
        try:
            return Pathname(os.getcwd())
        except OSError as e:
            raise FilesystemError(f"getcwd failed: {e.strerror or e}") from e

    getwd = pwd

    @contextlib.contextmanager
    def chdir(self, path: PathLike) -> Iterator[Pathname]:
        target = to_path(path)
        previous = self.pwd()
        self._call("chdir", target, os.chdir)
        try:
            yield target
        finally:
            os.chdir(previous)

    # -- content ----------------------------------------------------------

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        def _read(p: str) -> str:
            with open(p, encoding=encoding, errors="replace") as f:
                return f.read()

        return self._call("read", path, _read)

    def each_line(self, path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
        f = self._call("open", path, open, encoding=encoding, errors="replace")
        with f:
            yield from f

    # -- mutation (policy-checked) ----------------------------------------

    def unlink(self, path: PathLike) -> None:
        self._require_writable("unlink", path)
        self._call("unlink", path, os.unlink)

    delete = unlink

    def chmod(self, path: PathLike, mode: int) -> None:
        self._require_writable("chmod", path)
        self._call("chmod", path, os.chmod, mode)

    def lchmod(self, path: PathLike, mode: int) -> None:
        self._require_writable("lchmod", path)
        if os.chmod not in os.supports_follow_symlinks:
            raise FilesystemError(f"lchmod is not supported on this platform: {path}")
        self._call("lchmod", path, os.chmod, mode, follow_symlinks=False)

    def chown(self, path: PathLike, owner: int, group: int) -> None:
        self._require_writable("chown", path)
        self._call("chown", path, os.chown, owner, group)

    def lchown(self, path: PathLike, owner: int, group: int) -> None:
        self._require_writable("lchown", path)
        self._call("lchown", path, os.lchown, owner, group)

    # -- resolution -------------------------------------------------------

    def expand_path(self, path: PathLike, base: PathLike | None = None) -> Pathname:
        """Expand a leading "~", anchor relative paths at `base` (or the cwd), then clean."""
        p = Pathname(os.path.expanduser(str(to_path(path))))
        if p.is_relative:
            anchor = self.expand_path(base) if base is not None else self.pwd()
            p = anchor.join(p)
        return p.cleanpath()

    def readlink(self, path: PathLike) -> Pathname:
        return Pathname(self._call("readlink", path, os.readlink))

    def realpath(self, path: PathLike) -> Pathname:
        """
        Resolve every symlink along `path`, one component at a time.
        Following more than config.symloop_max links in one call raises
        FilesystemError (ELOOP), so link cycles always terminate.
        """
        start = Pathname(os.path.expanduser(str(to_path(path))))
        if start.is_relative:
            start = self.pwd().join(start)

        # Not cleaned first: "link/.." must see the link target.
        pending = [c for c in start.components()[1:] if c != DOT]
        resolved = Pathname(ROOT)
        hops = 0

        while pending:
            part = pending.pop(0)
            if part == DOT_DOT:
                resolved = resolved.parent
                continue

            candidate = resolved.join(part)
            if not self.is_symlink(candidate):
                resolved = candidate
                continue

            hops += 1
            if hops > self.config.symloop_max:
                raise FilesystemError(
                    f"realpath failed for {path}: {os.strerror(errno.ELOOP)}"
                )

            target = self.readlink(candidate)
            if target.is_absolute:
                resolved = Pathname(ROOT)
            pending[:0] = [c for c in target.components() if c != ROOT]

        return resolved.cleanpath()
