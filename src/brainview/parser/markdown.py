"""Markdown parsing with YAML frontmatter support."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import frontmatter
import yaml

log = logging.getLogger(__name__)

LookupStatus = Literal["found", "absent", "malformed"]


@dataclass
class ParsedMarkdown:
    """Frontmatter mapping and body text of a markdown file.

    status is "absent" when the file does not exist and "malformed" when the
    frontmatter block could not be parsed. In both cases metadata is empty.
    """

    status: LookupStatus
    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""


def parse_markdown(path: Path) -> ParsedMarkdown:
    """Split a markdown file into frontmatter and body.

    Args:
        path: Path to the markdown file.

    Returns:
        ParsedMarkdown. A malformed frontmatter block yields empty metadata and
        the raw file text as content.

    Raises:
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if not path.is_file():
        return ParsedMarkdown(status="absent")

    text = path.read_text(encoding="utf-8")
    return parse_markdown_text(text, source=path)


def parse_markdown_text(text: str, source: Path | str = "<string>") -> ParsedMarkdown:
    """Split markdown text into frontmatter and body."""
    # parse() rather than loads(): a Post cannot hold keys named content or handler
    try:
        metadata, content = frontmatter.parse(text)
    except (yaml.YAMLError, ValueError) as e:
        log.warning("Ignoring malformed frontmatter in %s: %s", source, e)
        return ParsedMarkdown(status="malformed", content=text)

    if not isinstance(metadata, dict):
        metadata = {}

    return ParsedMarkdown(status="found", metadata=dict(metadata), content=content)
