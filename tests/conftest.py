"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

from toolshelf.config import settings
from toolshelf.tools.registry import ToolRegistry


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Keep tests independent of the caller's environment and of each other."""
    for key in (
        "TOOLSHELF_STRICT_TOOL_NAMES",
        "TOOLSHELF_FILE_ENCODING",
        "TOOLSHELF_BASE_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
    settings.reset()
    yield
    settings.reset()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """Use an isolated temp directory as both HOME and cwd."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry(strict=False)
