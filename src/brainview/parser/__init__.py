"""Markdown, frontmatter and sidecar parsing."""

from .markdown import LookupStatus, ParsedMarkdown, parse_markdown, parse_markdown_text
from .md_renderer import render_markdown
from .sidecar import SidecarLookup, read_sidecar

__all__ = [
    "LookupStatus",
    "ParsedMarkdown",
    "parse_markdown",
    "parse_markdown_text",
    "render_markdown",
    "SidecarLookup",
    "read_sidecar",
]
