"""Command-line entry point for mdindex.

Usage:
    mdindex <category-dir>
    python -m mdindex <category-dir>

Writes ``<category-dir>/index.md`` and prints its path. Exits 1 on a
usage error or when the directory or index file can't be accessed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from mdindex import setup_logging
from mdindex.config import get_settings
from mdindex.generator import (
    DirectoryReadError,
    OutputCreateError,
    OutputWriteError,
    generate_index,
)

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits 1 (not 2) on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mdindex",
        description=(
            "Generate index.md for a directory of Markdown documents: "
            "one collapsible block per document with an escaped preview."
        ),
    )
    parser.add_argument(
        "category_dir",
        type=Path,
        help="Directory containing the Markdown documents to index.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for index generation."""
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log)

    try:
        result = generate_index(args.category_dir, settings.index)
    except (DirectoryReadError, OutputCreateError, OutputWriteError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/]")
        sys.exit(1)

    for skipped in result.skipped:
        err_console.print(
            f"[yellow]failed to read {escape(str(skipped.path))}:[/] "
            f"{escape(str(skipped.error))}"
        )

    console.print(f"Generated {escape(str(result.output_path))}")


if __name__ == "__main__":
    main()
