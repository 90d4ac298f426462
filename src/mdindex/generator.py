"""Index generation pipeline: discover, transform, write.

Runs single-pass over the category directory. Failing to list the
directory or create the output file aborts the run; a document that
can't be read is recorded and skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mdindex.config import IndexConfig
from mdindex.discovery import category_title, list_markdown_files
from mdindex.export.index_page import render_block, render_header
from mdindex.models import Document, GenerationResult, IndexPage, SkippedFile
from mdindex.parsers.frontmatter import split_lines, strip_front_matter
from mdindex.parsers.markdown import SUMMARY_SEPARATOR, extract_summary

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryReadError(Exception):
    """The category directory could not be listed."""

    def __init__(self, directory: Path, error: OSError) -> None:
        self.directory = directory
        self.error = error
        super().__init__(f"error reading dir: {error}")


class OutputCreateError(Exception):
    """The index file could not be opened for writing."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"cannot create {path.name}: {error}")


class OutputWriteError(Exception):
    """Writing to the already opened index file failed."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"cannot write {path.name}: {error}")


def load_document(
    path: Path,
    *,
    summary_lines: int = 5,
    summary_separator: str = SUMMARY_SEPARATOR,
) -> Document:
    """Read a Markdown file and derive its content lines and summary.

    Bytes that aren't valid UTF-8 are kept as surrogate escapes and
    written back unchanged, so only OS-level failures prevent a document
    from loading.

    Raises:
        OSError: If the file cannot be read.
    """
    text = path.read_bytes().decode("utf-8", errors="surrogateescape")
    lines = split_lines(text)
    content_lines = strip_front_matter(lines)
    return Document(
        path=path,
        text=text,
        lines=lines,
        content_lines=content_lines,
        summary=extract_summary(content_lines, summary_lines, summary_separator),
    )


def generate_index(
    directory: Path,
    config: IndexConfig | None = None,
) -> GenerationResult:
    """Write ``<directory>/index.md`` and return what went into it.

    Raises:
        DirectoryReadError: If the directory can't be listed.
        OutputCreateError: If the index file can't be opened for writing.
        OutputWriteError: If writing or closing the index file fails.
    """
    config = config or IndexConfig()
    page = IndexPage(title=category_title(directory))

    try:
        paths = list_markdown_files(
            directory, extension=config.extension, index_name=config.index_name
        )
    except OSError as exc:
        raise DirectoryReadError(directory, exc) from exc

    output_path = directory / config.index_name
    try:
        out = output_path.open(
            "w", encoding="utf-8", errors="surrogateescape", newline="\n"
        )
    except OSError as exc:
        raise OutputCreateError(output_path, exc) from exc

    skipped: list[SkippedFile] = []
    try:
        with out:
            out.write(render_header(page.title))
            for path in paths:
                try:
                    document = load_document(
                        path,
                        summary_lines=config.summary_lines,
                        summary_separator=config.summary_separator,
                    )
                except OSError as exc:
                    logger.debug("Skipping %s: %s", path, exc)
                    skipped.append(SkippedFile(path=path, error=exc))
                    continue

                logger.debug(
                    "Indexed %s (%d content lines of %d)",
                    document.name,
                    len(document.content_lines),
                    len(document.lines),
                )
                out.write(render_block(document, demote=config.demote_headings))
                page.documents.append(document)
    except OSError as exc:
        raise OutputWriteError(output_path, exc) from exc

    logger.info(
        "Wrote %s: %d document(s), %d skipped",
        output_path,
        len(page.documents),
        len(skipped),
    )
    return GenerationResult(output_path=output_path, page=page, skipped=skipped)
