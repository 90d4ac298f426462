"""Parsers for Markdown documents: line splitting, front matter, summaries."""

from mdindex.parsers.frontmatter import (
    find_content_start,
    split_lines,
    strip_front_matter,
)
from mdindex.parsers.markdown import demote_headings, escape_line, extract_summary

__all__ = [
    "demote_headings",
    "escape_line",
    "extract_summary",
    "find_content_start",
    "split_lines",
    "strip_front_matter",
]
