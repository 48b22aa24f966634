"""Shared fixtures: a private registry of fake plugins and asset roots."""

import os
from pathlib import Path

import pytest

from fakes import ALT_STYLE, BROKEN, SCRIPT, STYLE, FakeBackend
from kiln.compiler.plugins import PluginRegistry


@pytest.fixture
def registry() -> PluginRegistry:
    """A fresh registry holding the fake plugins."""
    FakeBackend.loads = 0
    return PluginRegistry([STYLE, ALT_STYLE, SCRIPT, BROKEN])


@pytest.fixture
def assets(tmp_path: Path) -> Path:
    """Source root directory."""
    root = tmp_path / "assets"
    root.mkdir()
    return root


@pytest.fixture
def public(tmp_path: Path) -> Path:
    """Artifact root directory."""
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def _clean_compiler_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's KILN_COMPILER_* settings out of the tests."""
    monkeypatch.delenv("KILN_COMPILER_SRC", raising=False)
    monkeypatch.delenv("KILN_COMPILER_DEST", raising=False)


@pytest.fixture
def set_mtime():
    """Pin a file's atime/mtime to a whole number of seconds since the epoch."""

    def pin(path: Path, seconds: int) -> None:
        ns = seconds * 1_000_000_000
        os.utime(path, ns=(ns, ns))

    return pin
