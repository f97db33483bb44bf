from __future__ import annotations


class Pathname3Error(Exception):
    """Base error for the project."""


class InvalidPath(Pathname3Error, ValueError):
    pass


class ArgumentError(Pathname3Error, ValueError):
    pass


class PathPolicyError(Pathname3Error):
    pass


class FilesystemError(Pathname3Error):
    pass
