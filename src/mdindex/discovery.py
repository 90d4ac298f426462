"""Category title derivation and Markdown file discovery."""

from __future__ import annotations

import logging
import os
from itertools import groupby
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"
DEFAULT_INDEX_NAME = "index.md"


def derive_title(name: str) -> str:
    """Turn a directory name into a page title.

    Runs of letters become words; everything else (digits, punctuation,
    whitespace) separates them. Each word is capitalised and the words are
    joined with single spaces, so ``"my-notes_2024"`` gives ``"My Notes"``.
    """
    words = [
        "".join(run) for is_letter, run in groupby(name, key=str.isalpha) if is_letter
    ]
    return " ".join(word[0].upper() + word[1:].lower() for word in words)


def category_title(directory: Path) -> str:
    """Title for a category directory, from the base name of its absolute path.

    ``os.path.abspath`` normalises ``.``, ``..`` and trailing separators
    without following symlinks, so the title matches what the user typed.
    """
    return derive_title(Path(os.path.abspath(directory)).name)


def list_markdown_files(
    directory: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    index_name: str = DEFAULT_INDEX_NAME,
) -> list[Path]:
    """List the documents to index, sorted by filename.

    Regular files and symlinks whose name ends with ``extension`` are kept;
    the index file itself and subdirectories are skipped. Symlinks are not
    followed here, so a broken link or a link to a directory is listed and
    later reported as unreadable. Other special files (FIFOs, sockets) are
    skipped.

    Raises:
        OSError: If the directory cannot be read.
    """
    files = [
        entry
        for entry in directory.iterdir()
        if entry.name.endswith(extension)
        and entry.name != index_name
        and (entry.is_symlink() or entry.is_file())
    ]
    files.sort(key=lambda entry: entry.name)
    logger.debug("Found %d markdown file(s) in %s", len(files), directory)
    return files
