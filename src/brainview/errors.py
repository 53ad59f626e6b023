"""Exceptions raised by brainview core operations."""


class DocumentNotFoundError(LookupError):
    """Raised when a document id does not resolve to a file or folder."""

    def __init__(self, doc_id: str, message: str | None = None) -> None:
        self.doc_id = doc_id
        super().__init__(message or f"Document not found: {doc_id}")


class InvalidDocumentIdError(DocumentNotFoundError):
    """Raised for ids that cannot name a document under the root.

    Subclasses DocumentNotFoundError so every boundary reports it as not found.
    """

    def __init__(self, doc_id: str, reason: str) -> None:
        self.reason = reason
        super().__init__(doc_id, f"Document not found: {doc_id} ({reason})")
