from .core.errors import (
    ArgumentError,
    FilesystemError,
    InvalidPath,
    Pathname3Error,
    PathPolicyError,
)
from .core.pathname import DOT, DOT_DOT, ROOT, SYMLOOP_MAX, VERSION, Pathname, to_path

__version__ = VERSION

__all__ = [
    "Pathname",
    "to_path",
    "ROOT",
    "DOT",
    "DOT_DOT",
    "SYMLOOP_MAX",
    "VERSION",
    "Pathname3Error",
    "InvalidPath",
    "ArgumentError",
    "PathPolicyError",
    "FilesystemError",
]
