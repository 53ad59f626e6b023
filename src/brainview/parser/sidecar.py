"""Sidecar metadata (meta.json) reading."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from ..config import META_FILENAME
from ..models import SidecarMeta
from .markdown import LookupStatus

log = logging.getLogger(__name__)


@dataclass
class SidecarLookup:
    """Result of reading a document folder's sidecar file."""

    status: LookupStatus
    meta: SidecarMeta = field(default_factory=SidecarMeta)


def read_sidecar(doc_dir: Path) -> SidecarLookup:
    """Read and validate meta.json from a document folder.

    Never raises: a missing file is "absent", anything unreadable or invalid
    is "malformed" (logged) and both carry an empty SidecarMeta.
    """
    meta_path = doc_dir / META_FILENAME
    if not meta_path.is_file():
        return SidecarLookup(status="absent")

    try:
        data = json.loads(meta_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.warning("Error reading %s: %s", meta_path, e)
        return SidecarLookup(status="malformed")

    if not isinstance(data, dict):
        log.warning("Error reading %s: expected a JSON object, got %s", meta_path, type(data).__name__)
        return SidecarLookup(status="malformed")

    try:
        meta = SidecarMeta.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        log.warning("Invalid fields in %s: %s", meta_path, "; ".join(errors))
        return SidecarLookup(status="malformed")

    return SidecarLookup(status="found", meta=meta)
