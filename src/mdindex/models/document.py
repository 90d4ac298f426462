"""Documents and the index page they are collected into.

These are plain dataclasses for in-memory use; the index page is rebuilt
from scratch on every run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class Document:
    """A single Markdown file prepared for the index.

    Attributes:
        path: Location of the source file.
        text: Raw decoded file contents.
        lines: ``text`` split into lines, line endings removed.
        content_lines: ``lines`` with any leading front matter removed.
        summary: Escaped preview used as the ``<summary>`` text.
    """

    path: Path
    text: str
    lines: list[str]
    content_lines: list[str]
    summary: str

    @property
    def name(self) -> str:
        """Display name: the original filename."""
        return self.path.name


@dataclass
class IndexPage:
    """Title plus the documents written to the index, in file order."""

    title: str
    documents: list[Document] = field(default_factory=list)


@dataclass
class SkippedFile:
    """A file that could not be read and was left out of the index."""

    path: Path
    error: OSError


@dataclass
class GenerationResult:
    """Outcome of one index generation run."""

    output_path: Path
    page: IndexPage
    skipped: list[SkippedFile] = field(default_factory=list)
