"""Line splitting and YAML front-matter removal.

Front matter is only recognised when the very first line is ``---``. If no
closing ``---`` follows, the whole file is treated as body and nothing is
stripped.
"""

from __future__ import annotations

FRONT_MATTER_DELIMITER = "---"


def split_lines(text: str) -> list[str]:
    """Split text into lines, accepting both ``\\n`` and ``\\r\\n`` endings.

    A trailing newline does not produce a final empty line, and empty
    text yields no lines.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def find_content_start(lines: list[str]) -> int:
    """Return the index of the first line after the front matter.

    Returns 0 when there is no front matter or it is never closed.
    """
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return 0
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_DELIMITER:
            return i + 1
    return 0


def strip_front_matter(lines: list[str]) -> list[str]:
    """Drop a leading front-matter block (delimiters included)."""
    return lines[find_content_start(lines) :]
