"""
Pathname: a POSIX path value and its lexical algebra.

Nothing in this module touches the filesystem. Construction only validates
(no NUL bytes); normalization is an explicit step (`cleanpath`).
"""
from __future__ import annotations

import fnmatch as _fnmatch
import os
import re
from typing import Iterator, Union

from .errors import ArgumentError, InvalidPath

VERSION = "1.0.0"

ROOT = "/"
DOT = "."
DOT_DOT = ".."
SYMLOOP_MAX = 8

# Sorts above every other code point, so "/a" < "/a-b" < "/a/b".
_SEPARATOR_SENTINEL = chr(0x10FFFF)

_ROOT_RE = re.compile(r"/+")

PathLike = Union["Pathname", str, os.PathLike]


def _text_of(value: PathLike) -> str:
    if isinstance(value, Pathname):
        return value._text
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str):
        _validate(value)
        return value
    raise TypeError(f"Expected Pathname, str or os.PathLike, got {type(value).__name__}")


def _validate(text: str) -> None:
    if "\0" in text:
        raise InvalidPath(f"Path contains null byte: {text!r}")


def _join_text(first: str, *rest: str) -> str:
    """
    Separator-aware concatenation:
      - empty fragments are dropped
      - exactly one "/" at every boundary
    Fragments are never normalized internally ("a//b" stays as is).
    """
    fragments = [f for f in (first, *rest) if f]
    if not fragments:
        return ""

    out = fragments[0]
    for frag in fragments[1:]:
        tail = frag.lstrip("/")
        if not out.endswith("/"):
            out += "/"
        out += tail
    return out


def _components_of(text: str) -> list[str]:
    parts = [p for p in text.split("/") if p]
    if text.startswith(ROOT):
        parts.insert(0, ROOT)
    return parts


def _clean_text(text: str) -> str:
    final: list[str] = []
    for part in _components_of(text):
        if part == DOT:
            continue
        if part == DOT_DOT:
            if not final or final[-1] == DOT_DOT:
                final.append(DOT_DOT)
            elif final[-1] != ROOT:
                final.pop()
            continue
        final.append(part)

    if not final:
        return DOT
    return _join_text(*final)


class Pathname:
    """
    A filesystem path held as text, with "/" as the only separator.

    Immutable by default: every operation returns a new Pathname, except the
    explicit in-place forms `append` (also `<<`) and `cleanpath_in_place`,
    which rewrite this value's text and return it. Use `copy()` before
    mutating a value that is shared.
    """

    __slots__ = ("_text",)

    def __init__(self, text: PathLike = "") -> None:
        self._text = _text_of(text)

    @classmethod
    def _from_text(cls, text: str) -> Pathname:
        p = object.__new__(cls)
        p._text = text
        return p

    # -- conversion -------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __fspath__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Pathname({self._text!r})"

    def copy(self) -> Pathname:
        return self._from_text(self._text)

    # -- predicates -------------------------------------------------------

    @property
    def is_absolute(self) -> bool:
        return self._text.startswith(ROOT)

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    @property
    def is_root(self) -> bool:
        return _ROOT_RE.fullmatch(self._text) is not None

    @property
    def is_dot(self) -> bool:
        return self._text == DOT

    @property
    def is_dot_dot(self) -> bool:
        return self._text == DOT_DOT

    # -- components -------------------------------------------------------

    def components(self) -> list[str]:
        """
        Non-empty "/"-separated segments, prefixed with ROOT when absolute.
        Recomputed on every call.
        """
        return _components_of(self._text)

    to_a = components

    def each_filename(self) -> Iterator[str]:
        yield from _components_of(self._text)

    # -- normalization ----------------------------------------------------

    def cleanpath(self) -> Pathname:
        return self._from_text(_clean_text(self._text))

    def cleanpath_in_place(self) -> Pathname:
        self._text = _clean_text(self._text)
        return self

    # -- composition ------------------------------------------------------

    def join(self, *paths: PathLike) -> Pathname:
        """Concatenate fragments with single separators. Does not clean."""
        return self._from_text(_join_text(self._text, *(_text_of(p) for p in paths)))

    def __add__(self, other: PathLike) -> Pathname:
        return self.copy().append(other)

    def append(self, other: PathLike) -> Pathname:
        """Join `other` onto this path and clean it, in place."""
        self._text = _clean_text(_join_text(self._text, _text_of(other)))
        return self

    __lshift__ = append

    @property
    def parent(self) -> Pathname:
        return self + DOT_DOT

    # -- traversal --------------------------------------------------------

    def _prefixes(self, longest_first: bool) -> Iterator[Pathname]:
        if self.is_root:
            yield self._from_text(ROOT)
            return

        parts = self.components()
        sizes = range(len(parts), 0, -1) if longest_first else range(1, len(parts) + 1)
        for i in sizes:
            yield self._from_text(_join_text(*parts[:i]))

    def ascend(self) -> Iterator[Pathname]:
        """The path itself first, then each shorter prefix down to the first component."""
        return self._prefixes(longest_first=True)

    def descend(self) -> Iterator[Pathname]:
        """The first component first, then each longer prefix up to the path itself."""
        return self._prefixes(longest_first=False)

    # -- relative paths ---------------------------------------------------

    def relative_path_from(self, base: PathLike) -> Pathname:
        """
        Lexically compute p such that base.join(p).cleanpath() == self.cleanpath().

        Raises ArgumentError when exactly one side is absolute, or when the
        base still needs ".." after the common prefix is stripped.
        """
        base = base if isinstance(base, Pathname) else Pathname(base)

        if self.is_absolute != base.is_absolute:
            raise ArgumentError(
                f"Cannot relate absolute and relative paths: {self._text!r} from {base._text!r}"
            )
        if base._text == DOT:
            return self.copy()
        if self == base:
            return self._from_text(DOT)

        dest = _components_of(_clean_text(self._text))
        base_parts = _components_of(_clean_text(base._text))

        while dest and base_parts and dest[0] == base_parts[0]:
            dest.pop(0)
            base_parts.pop(0)

        # Only a single leading "." is dropped on each side.
        if dest and dest[0] == DOT:
            dest.pop(0)
        if base_parts and base_parts[0] == DOT:
            base_parts.pop(0)

        if DOT_DOT in base_parts:
            raise ArgumentError(f"base directory may not contain '..': {base._text!r}")

        parts = [DOT_DOT] * len(base_parts) + dest
        if not parts:
            return self._from_text(DOT)
        return self._from_text(_join_text(*parts))

    # -- lexical name helpers ---------------------------------------------

    @property
    def basename(self) -> Pathname:
        stripped = self._text.rstrip("/")
        if not stripped:
            return self._from_text(ROOT if self._text else "")
        return self._from_text(stripped.rsplit("/", 1)[-1])

    @property
    def dirname(self) -> Pathname:
        stripped = self._text.rstrip("/")
        if not stripped:
            return self._from_text(ROOT if self._text else DOT)
        if "/" not in stripped:
            return self._from_text(DOT)
        head = stripped.rsplit("/", 1)[0].rstrip("/")
        return self._from_text(head or ROOT)

    @property
    def extname(self) -> str:
        # Leading dots belong to the name: "..foo" has no extension.
        name = self.basename._text.lstrip(".")
        dot = name.rfind(".")
        if dot < 0 or dot == len(name) - 1:
            return ""
        return name[dot:]

    def fnmatch(self, pattern: str) -> bool:
        return _fnmatch.fnmatchcase(self._text, pattern)

    # -- comparison -------------------------------------------------------

    def _sort_key(self) -> str:
        return self._text.replace("/", _SEPARATOR_SENTINEL)

    def compare(self, other: object) -> int | None:
        """-1, 0 or 1 by separator-aware text order; None if `other` is not a Pathname."""
        if not isinstance(other, Pathname):
            return None
        a, b = self._sort_key(), other._sort_key()
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pathname):
            return NotImplemented
        return _clean_text(self._text) == _clean_text(other._text)

    def __hash__(self) -> int:
        return hash(_clean_text(self._text))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pathname):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Pathname):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Pathname):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Pathname):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


def to_path(text: PathLike) -> Pathname:
    """Free constructor: validates `text` exactly like Pathname(text)."""
    if isinstance(text, Pathname):
        return text.copy()
    return Pathname(text)
