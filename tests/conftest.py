"""Shared pytest fixtures for mdindex tests."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from mdindex.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep developer env vars and .env files out of every test.

    Runs each test from an empty working directory, strips ``MDINDEX_*``
    variables, and resets the settings cache and package log handlers.
    """
    for key in list(os.environ):
        if key.startswith("MDINDEX_"):
            monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "_cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    package_logger = logging.getLogger("mdindex")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def make_category(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a category directory populated with text files.

    Usage: ``make_category("notes", {"a.md": "# Hi\\n"})``
    """

    def _make(name: str, files: dict[str, str] | None = None) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True)
        for filename, content in (files or {}).items():
            (directory / filename).write_text(content, encoding="utf-8")
        return directory

    return _make
