"""REST API and HTML pages for the second-brain browser."""

import logging
import os
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .. import __version__
from ..config import DEFAULT_HOST, DEFAULT_PORT, get_brain_root
from ..core import get_document, list_categories, list_documents
from ..errors import DocumentNotFoundError
from ..models import CategoryGroup, DocumentDetail, DocumentMeta
from ..parser import render_markdown
from .templates import render_document_page, render_listing_page, render_not_found_page
from .views import filter_documents, group_documents, normalize_tab, tab_counts

log = logging.getLogger(__name__)

app = FastAPI(
    title="Second Brain",
    description="Read-only browser for projects, journals and concepts",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_root() -> Path:
    """Resolve the knowledge base root for a request."""
    return get_brain_root()


def _load_detail(root: Path, doc_id: str) -> DocumentDetail:
    doc = get_document(root, doc_id)
    return DocumentDetail(**doc.model_dump(), content_html=render_markdown(doc.content))


# API Routes


@app.get("/api/documents", response_model=list[DocumentMeta])
def get_documents(root: Path = Depends(get_root)):
    """List every document, newest first."""
    try:
        return list_documents(root)
    except Exception:
        log.exception("Error fetching documents from %s", root)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch documents"})


@app.get("/api/documents/{doc_id:path}", response_model=DocumentDetail)
def get_document_by_id(doc_id: str, root: Path = Depends(get_root)):
    """Get a single document. The id may contain slashes."""
    try:
        return _load_detail(root, doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=f"Document not found: {doc_id}")


@app.get("/api/categories", response_model=list[CategoryGroup])
def get_categories(root: Path = Depends(get_root)):
    """List category folders per document type."""
    return list_categories(root)


# HTML Pages


@app.get("/", response_class=HTMLResponse)
def index_page(
    q: str = Query("", description="Free-text filter on title, summary and tags"),
    tab: str = Query("all"),
    root: Path = Depends(get_root),
):
    """Serve the document listing."""
    documents = list_documents(root)
    grouped = group_documents(documents)
    active_tab = normalize_tab(tab)
    query = q.strip()

    return render_listing_page(
        filter_documents(documents, query, active_tab),
        grouped,
        tab_counts(grouped, len(documents)),
        query=query,
        active_tab=active_tab,
    )


@app.get("/doc/{doc_id:path}", response_class=HTMLResponse)
def document_page(doc_id: str, root: Path = Depends(get_root)):
    """Serve a single document page."""
    try:
        detail = _load_detail(root, doc_id)
    except DocumentNotFoundError:
        return HTMLResponse(render_not_found_page(f"Document not found: {doc_id}"), status_code=404)
    return render_document_page(detail)


def main():
    """Run the webapp server."""
    import uvicorn

    from .._logging import configure_logging

    configure_logging()

    host = os.environ.get("HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORT", str(DEFAULT_PORT)))

    log.info("Serving %s on %s:%d", get_brain_root(), host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
