from __future__ import annotations

import pytest

from pathname3 import SYMLOOP_MAX
from pathname3.core import config as config_mod
from pathname3.core.config import FilesystemConfig


def test_defaults():
    cfg = FilesystemConfig()
    assert cfg.read_only is True
    assert cfg.max_entries == 1000
    assert cfg.max_read_chars == 80_000
    assert cfg.symloop_max == SYMLOOP_MAX


def test_config_is_frozen():
    cfg = FilesystemConfig()
    with pytest.raises(AttributeError):
        cfg.read_only = False  # type: ignore[misc]


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("PATHNAME3_READ_ONLY", "false")
    monkeypatch.setenv("PATHNAME3_MAX_ENTRIES", "5")
    monkeypatch.setenv("PATHNAME3_MAX_READ_CHARS", "100")
    monkeypatch.setenv("PATHNAME3_SYMLOOP_MAX", "3")
    cfg = FilesystemConfig.from_env()
    assert cfg.symloop_max == 3
    assert cfg.read_only is False
    assert cfg.max_entries == 5
    assert cfg.max_read_chars == 100


def test_from_env_malformed_values_keep_defaults(monkeypatch):
    monkeypatch.setenv("PATHNAME3_READ_ONLY", "maybe")
    monkeypatch.setenv("PATHNAME3_MAX_ENTRIES", "lots")
    monkeypatch.setenv("PATHNAME3_SYMLOOP_MAX", "x")
    cfg = FilesystemConfig.from_env()
    assert cfg.read_only is True
    assert cfg.symloop_max == SYMLOOP_MAX
    assert cfg.max_entries == 1000


def test_env_helper_rejects_foreign_names():
    with pytest.raises(ValueError, match="PATHNAME3_"):
        config_mod._env("HOME", "x")
