"""Listing page logic: tab filtering, free-text search and grouping."""

from dataclasses import dataclass, field

from ..models import DocumentMeta

TABS = ("all", "projects", "journals", "concepts")

UNCATEGORIZED = "uncategorized"


@dataclass
class GroupedDocuments:
    """Documents grouped for the listing page."""

    projects: dict[str, list[DocumentMeta]] = field(default_factory=dict)  # category -> docs
    journals: list[DocumentMeta] = field(default_factory=list)
    concepts: list[DocumentMeta] = field(default_factory=list)


def normalize_tab(tab: str | None) -> str:
    """Return a known tab name, defaulting to "all"."""
    if tab in TABS:
        return tab
    return "all"


def group_documents(documents: list[DocumentMeta]) -> GroupedDocuments:
    """Group documents by type, and projects by category.

    Categories keep the order in which they first appear in documents.
    """
    grouped = GroupedDocuments()
    for doc in documents:
        if doc.type == "project":
            grouped.projects.setdefault(doc.category or UNCATEGORIZED, []).append(doc)
        elif doc.type == "journal":
            grouped.journals.append(doc)
        elif doc.type == "concept":
            grouped.concepts.append(doc)
    return grouped


def matches_query(doc: DocumentMeta, query: str) -> bool:
    """Case-insensitive substring match on title, summary or any tag."""
    q = query.lower()
    if q in doc.title.lower():
        return True
    if doc.summary and q in doc.summary.lower():
        return True
    return any(q in tag.lower() for tag in doc.tags)


def filter_documents(
    documents: list[DocumentMeta],
    query: str | None = None,
    tab: str = "all",
) -> list[DocumentMeta]:
    """Filter the listing.

    A non-empty query overrides the tab and searches every document.
    """
    query = (query or "").strip()
    if query:
        return [doc for doc in documents if matches_query(doc, query)]

    tab = normalize_tab(tab)
    if tab == "all":
        return list(documents)
    doc_type = tab[:-1]
    return [doc for doc in documents if doc.type == doc_type]


def tab_counts(grouped: GroupedDocuments, total: int) -> dict[str, int]:
    """Badge counts for each tab."""
    return {
        "all": total,
        "projects": sum(len(docs) for docs in grouped.projects.values()),
        "journals": len(grouped.journals),
        "concepts": len(grouped.concepts),
    }
