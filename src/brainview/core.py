"""Document discovery and loading for the knowledge base.

Supported layouts under each type folder (projects/, journals/, concepts/):

    projects/foo/body.md            document folder        -> projects/foo
    projects/foo/bar/body.md        subdocument folder     -> projects/foo/bar
    projects/foo/notes.md           subdocument file       -> projects/foo/notes
    journals/2026-01-28.md          flat file              -> journals/2026-01-28

A document folder may also hold meta.json (sidecar metadata) and a sections/
directory. All functions take the root explicitly and read the filesystem
fresh on every call.
"""

import logging
from pathlib import Path

from .config import (
    BODY_FILENAMES,
    DOCUMENT_TYPES,
    MARKDOWN_SUFFIX,
    SECTIONS_DIRNAME,
)
from .errors import DocumentNotFoundError, InvalidDocumentIdError
from .metadata import resolve_metadata
from .models import CategoryGroup, Document, DocumentMeta, SidecarMeta
from .parser import ParsedMarkdown, parse_markdown, read_sidecar

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def _singular(type_dir: str) -> str:
    """projects -> project"""
    return type_dir[:-1]


def _humanize(name: str) -> str:
    return name.replace("-", " ")


def _visible_entries(path: Path) -> list[Path]:
    """Return non-hidden children of a directory, sorted by name."""
    return sorted(
        (p for p in path.iterdir() if not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def _is_markdown(path: Path) -> bool:
    return path.is_file() and path.suffix == MARKDOWN_SUFFIX


def _shadowed_by_folder(path: Path) -> bool:
    """A name.md file is unreachable when a name/ folder sits beside it."""
    if path.with_suffix("").is_dir():
        log.warning("Skipping %s: shadowed by folder %s", path, path.with_suffix(""))
        return True
    return False


def find_body_file(doc_dir: Path) -> Path | None:
    """Return the primary body file of a document folder, if any."""
    for name in BODY_FILENAMES:
        candidate = doc_dir / name
        if candidate.is_file():
            return candidate
    return None


def _read_folder(doc_dir: Path) -> tuple[ParsedMarkdown, SidecarMeta]:
    body = find_body_file(doc_dir)
    parsed = parse_markdown(body) if body else ParsedMarkdown(status="absent")
    sidecar = read_sidecar(doc_dir)
    return parsed, sidecar.meta


def _build_meta(
    doc_id: str,
    parsed: ParsedMarkdown,
    sidecar: SidecarMeta | None,
    *,
    category: str | None,
    flat: bool = False,
) -> DocumentMeta:
    """Build a DocumentMeta from parsed sources.

    Flat files directly under a type folder fall back to the bare filename for
    both title and date; everything else falls back to a humanized name.
    """
    parts = doc_id.split("/")
    name = parts[-1]
    resolved = resolve_metadata(parsed.metadata, sidecar)

    if flat:
        title = resolved.title or name
        date = resolved.date or name
    else:
        title = resolved.title or _humanize(name)
        date = resolved.date

    return DocumentMeta(
        id=doc_id,
        title=title,
        type=_singular(parts[0]),
        category=category,
        date=date,
        tags=resolved.tags,
        summary=resolved.summary,
    )


def sort_documents(documents: list[DocumentMeta]) -> list[DocumentMeta]:
    """Sort by date descending; undated documents last, by title ascending.

    Dates compare as plain strings, so ISO-8601 dates sort chronologically.
    """
    dated = [d for d in documents if d.date]
    undated = [d for d in documents if not d.date]
    dated.sort(key=lambda d: d.date, reverse=True)
    undated.sort(key=lambda d: d.title)
    return dated + undated


# ─────────────────────────────────────────────────────────────────────────────
# Indexer
# ─────────────────────────────────────────────────────────────────────────────


def _index_category_folder(type_dir: str, category_dir: Path) -> list[DocumentMeta]:
    documents: list[DocumentMeta] = []
    category = category_dir.name

    for child in _visible_entries(category_dir):
        try:
            if child.is_dir():
                parsed, sidecar = _read_folder(child)
                doc_id = f"{type_dir}/{category}/{child.name}"
                documents.append(_build_meta(doc_id, parsed, sidecar, category=category))
            elif _is_markdown(child) and not _shadowed_by_folder(child):
                parsed = parse_markdown(child)
                doc_id = f"{type_dir}/{category}/{child.stem}"
                documents.append(_build_meta(doc_id, parsed, None, category=category))
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Skipping %s: %s", child, e)

    return documents


def _index_entry(type_dir: str, entry: Path) -> list[DocumentMeta]:
    if entry.is_dir():
        if find_body_file(entry) is None:
            return _index_category_folder(type_dir, entry)

        parsed, sidecar = _read_folder(entry)
        category = entry.name if type_dir == "projects" else None
        return [_build_meta(f"{type_dir}/{entry.name}", parsed, sidecar, category=category)]

    if _is_markdown(entry) and not _shadowed_by_folder(entry):
        parsed = parse_markdown(entry)
        return [_build_meta(f"{type_dir}/{entry.stem}", parsed, None, category=None, flat=True)]

    return []


def list_documents(root: Path) -> list[DocumentMeta]:
    """Walk the knowledge base and return every document, sorted.

    Only the projects/, journals/ and concepts/ folders are scanned; a
    missing folder is skipped. A failure reading one entry skips that entry
    and is logged.

    Args:
        root: Knowledge base root directory.

    Returns:
        Documents ordered by sort_documents().
    """
    documents: list[DocumentMeta] = []

    for type_dir in DOCUMENT_TYPES:
        type_path = root / type_dir
        if not type_path.is_dir():
            continue

        try:
            entries = _visible_entries(type_path)
        except OSError as e:
            log.warning("Skipping %s: %s", type_path, e)
            continue

        for entry in entries:
            try:
                documents.extend(_index_entry(type_dir, entry))
            except (OSError, UnicodeDecodeError) as e:
                log.warning("Skipping %s: %s", entry, e)

    log.debug("Indexed %d documents under %s", len(documents), root)
    return sort_documents(documents)


def list_categories(root: Path) -> list[CategoryGroup]:
    """List the folders directly under each existing type folder."""
    result: list[CategoryGroup] = []

    for type_dir in DOCUMENT_TYPES:
        type_path = root / type_dir
        if not type_path.is_dir():
            continue

        try:
            categories = [p.name for p in _visible_entries(type_path) if p.is_dir()]
        except OSError as e:
            log.warning("Skipping %s: %s", type_path, e)
            continue

        result.append(CategoryGroup(type=type_dir, categories=categories))

    return result


# ─────────────────────────────────────────────────────────────────────────────
# Loader
# ─────────────────────────────────────────────────────────────────────────────


def _validate_id(doc_id: str) -> list[str]:
    parts = doc_id.strip("/").split("/")

    if not doc_id.strip("/"):
        raise InvalidDocumentIdError(doc_id, "empty id")
    if parts[0] not in DOCUMENT_TYPES:
        raise InvalidDocumentIdError(doc_id, f"unknown type folder '{parts[0]}'")
    if len(parts) < 2:
        raise InvalidDocumentIdError(doc_id, "id names a type folder, not a document")
    if any(part in ("", ".", "..") or part.startswith(".") for part in parts):
        raise InvalidDocumentIdError(doc_id, "invalid path segment")

    return parts


def _list_sections(doc_dir: Path) -> list[str]:
    """Section names from sections/*.md, in filesystem order."""
    sections_dir = doc_dir / SECTIONS_DIRNAME
    if not sections_dir.is_dir():
        return []
    return [p.stem for p in sections_dir.iterdir() if p.suffix == MARKDOWN_SUFFIX]


def get_document(root: Path, doc_id: str) -> Document:
    """Load a single document by id.

    The id is resolved as the folder root/id, then the file root/id.md. Folders
    read body.md or index.md, meta.json and sections/; files are parsed on
    their own.

    Args:
        root: Knowledge base root directory.
        doc_id: Document id as produced by list_documents().

    Returns:
        The Document, with metadata matching its listing entry.

    Raises:
        DocumentNotFoundError: If the id resolves to nothing under root, or
            the resolved file cannot be read as UTF-8.
    """
    parts = _validate_id(doc_id)
    doc_id = "/".join(parts)

    path = root.joinpath(*parts)
    if not path.is_dir():
        path = path.with_name(path.name + MARKDOWN_SUFFIX)
        if not path.is_file():
            raise DocumentNotFoundError(doc_id)

    category = parts[1] if len(parts) > 2 else None

    try:
        if path.is_dir():
            if category is None and parts[0] == "projects":
                category = parts[1]
            parsed, sidecar = _read_folder(path)
            meta = _build_meta(doc_id, parsed, sidecar, category=category)
            sections = _list_sections(path)
        else:
            parsed = parse_markdown(path)
            meta = _build_meta(doc_id, parsed, None, category=category, flat=len(parts) == 2)
            sections = []
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Cannot read %s: %s", path, e)
        raise DocumentNotFoundError(doc_id) from e

    log.debug("Loaded %s from %s", doc_id, path)
    return Document(**meta.model_dump(), content=parsed.content, sections=sections)
