"""Rendering of the index page."""

from mdindex.export.index_page import render_block, render_header

__all__ = ["render_block", "render_header"]
