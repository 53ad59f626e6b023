"""Merge frontmatter and sidecar metadata.

Frontmatter wins over the sidecar field by field; empty values do not count.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .models import SidecarMeta


@dataclass
class ResolvedMetadata:
    """Optional document fields after precedence has been applied."""

    title: str | None = None
    date: str | None = None
    tags: list[str] = field(default_factory=list)
    summary: str | None = None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, dict)):
        return None
    text = str(value)
    return text if text.strip() else None


def _tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value if tag is not None]
    return []


def resolve_metadata(
    frontmatter: dict[str, Any],
    sidecar: SidecarMeta | None = None,
) -> ResolvedMetadata:
    """Apply frontmatter-over-sidecar precedence.

    Args:
        frontmatter: Parsed frontmatter mapping (may be empty).
        sidecar: Sidecar record, or None for documents without a folder.

    Returns:
        ResolvedMetadata with each field taken from the first non-empty source.
    """
    sidecar = sidecar or SidecarMeta()

    return ResolvedMetadata(
        title=_text(frontmatter.get("title")) or _text(sidecar.title),
        date=_text(frontmatter.get("date")) or _text(sidecar.date),
        tags=_tags(frontmatter.get("tags")) or list(sidecar.tags),
        summary=_text(frontmatter.get("summary")) or _text(sidecar.summary),
    )
