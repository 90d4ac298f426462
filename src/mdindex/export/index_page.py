"""Markdown/HTML rendering for the index page.

The page is a ``# Title`` heading followed by one ``<details>`` block per
document. The summary line holds the escaped preview; the body is the
document's content as Markdown, separated from the tags by blank lines so
Markdown renderers process it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdindex.parsers.markdown import demote_headings

if TYPE_CHECKING:
    from mdindex.models import Document


def render_header(title: str) -> str:
    """Page title line followed by a blank line."""
    return f"# {title}\n\n"


def render_block(document: Document, *, demote: bool = False) -> str:
    """Render one collapsible block, trailing blank line included.

    Args:
        document: The prepared document.
        demote: Add one ``#`` to headings outside code fences in the body.
    """
    body = document.content_lines
    if demote:
        body = demote_headings(body)

    parts = ["<details>\n", f"<summary>{document.summary}</summary>\n\n"]
    parts.extend(f"{line}\n" for line in body)
    if body:
        parts.append("\n")
    parts.append("</details>\n\n")
    return "".join(parts)
