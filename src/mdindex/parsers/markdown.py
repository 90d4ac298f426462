"""Summary extraction and heading rewriting for Markdown bodies."""

from __future__ import annotations

import html

CODE_FENCE = "```"
SUMMARY_SEPARATOR = "<br>"


def escape_line(line: str) -> str:
    """HTML-escape ``&``, ``<``, ``>`` and both quote characters."""
    return html.escape(line, quote=True)


def extract_summary(
    lines: list[str],
    count: int,
    separator: str = SUMMARY_SEPARATOR,
) -> str:
    """Join the first ``count`` lines, each HTML-escaped, with ``separator``.

    Fewer lines than ``count`` just yields a shorter summary.
    """
    return separator.join(escape_line(line) for line in lines[: max(count, 0)])


def demote_headings(lines: list[str]) -> list[str]:
    """Push every heading down one level so it nests under the page title.

    Lines inside fenced code blocks are left alone. Any line starting with
    the fence marker toggles the fence state; nested fences and fence
    lengths are not tracked.
    """
    demoted = []
    in_fence = False
    for line in lines:
        if line.startswith(CODE_FENCE):
            in_fence = not in_fence
        elif not in_fence and line.startswith("#"):
            line = "#" + line
        demoted.append(line)
    return demoted
