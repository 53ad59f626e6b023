"""Configuration for brainview.

The only external setting that affects document discovery is BRAIN_PATH.
Core functions take the root directory as an argument; only the web app and
CLI edges call get_brain_root().
"""

import os
from pathlib import Path


def get_brain_root() -> Path:
    """Get the knowledge base root directory.

    Discovery order:
    1. BRAIN_PATH environment variable
    2. ~/second-brain
    """
    root = os.environ.get("BRAIN_PATH")
    if root:
        return Path(root).expanduser()
    return Path.home() / "second-brain"


# =============================================================================
# Filesystem Layout
# =============================================================================

# Top-level folders scanned for documents, in listing order.
# The document type is the folder name without its trailing "s".
DOCUMENT_TYPES = ("projects", "journals", "concepts")

# Sidecar metadata file inside a document folder
META_FILENAME = "meta.json"

# Primary body file candidates inside a document folder; first existing wins
BODY_FILENAMES = ("body.md", "index.md")

# Subdirectory of a document folder whose markdown files name its sections
SECTIONS_DIRNAME = "sections"

MARKDOWN_SUFFIX = ".md"


# =============================================================================
# Web Server
# =============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

# Tags shown on a listing card; the document page shows all of them
CARD_TAG_LIMIT = 4
