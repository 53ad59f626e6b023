"""Shared test fixtures for the brainview test suite.

Design:
- brain: builds a sample second brain under tmp_path covering every
  supported layout (document folders, category folders, subdocument files,
  flat files, sidecars, sections, malformed sidecar, ignored entries)
- write_doc: helper for tests that need a one-off layout
"""

import json
from pathlib import Path

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helper Functions (for test code, not fixtures)
# ─────────────────────────────────────────────────────────────────────────────


def write_doc(root: Path, rel_path: str, content: str = "", meta: dict | str | None = None) -> Path:
    """Write a markdown file, plus meta.json beside it when meta is given.

    A str meta is written verbatim (for malformed sidecars).
    """
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

    if meta is not None:
        meta_text = meta if isinstance(meta, str) else json.dumps(meta)
        (path.parent / "meta.json").write_text(meta_text, encoding="utf-8")

    return path


# ─────────────────────────────────────────────────────────────────────────────
# Core Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def empty_brain(tmp_path: Path) -> Path:
    root = tmp_path / "brain"
    root.mkdir()
    return root


@pytest.fixture
def brain(empty_brain: Path) -> Path:
    """Sample second brain.

    Expected listing order:
        journals/2026-01-28                 2026-01-28 (flat file, date from name)
        journals/2025-12-31                 2025-12-30 (frontmatter date)
        projects/quizzydots/roadmap         2024-03-01
        projects/quizzydots/launch-notes    2024-02-01
        projects/solo                       2024-01-01 (sidecar only)
        concepts/zettelkasten               undated, "Zettelkasten"
        concepts/broken                     undated, "broken" (malformed sidecar)
    """
    root = empty_brain

    # Category folder with a subdocument folder and a subdocument file
    write_doc(
        root,
        "projects/quizzydots/roadmap/body.md",
        "---\ntitle: Roadmap\ndate: 2024-03-01\ntags: [planning, q1]\n---\n\n# Roadmap\n\nShip the **beta**.\n",
        meta={"title": "Sidecar Roadmap", "summary": "Where quizzydots is heading", "tags": ["ignored"]},
    )
    write_doc(root, "projects/quizzydots/roadmap/sections/intro.md", "Intro")
    write_doc(root, "projects/quizzydots/roadmap/sections/goals.md", "Goals")
    write_doc(root, "projects/quizzydots/roadmap/sections/diagram.png", "")
    write_doc(
        root,
        "projects/quizzydots/launch-notes.md",
        "---\ndate: 2024-02-01\ntags: launch\n---\nLaunch checklist.\n",
    )
    write_doc(root, "projects/quizzydots/.draft.md", "---\ntitle: Hidden\n---\n")
    write_doc(root, "projects/quizzydots/cover.png", "")

    # Document folder whose metadata comes only from the sidecar
    write_doc(
        root,
        "projects/solo/body.md",
        "Just a body.\n",
        meta={"title": "Solo Project", "date": "2024-01-01", "tags": ["solo"], "summary": "A solo project"},
    )

    # Flat journal files
    write_doc(root, "journals/2026-01-28.md", "Today I wrote code.\n")
    write_doc(root, "journals/2025-12-31.md", "---\ntitle: Year End\ndate: '2025-12-30'\n---\nReview.\n")

    # Concept folders: index.md body, malformed sidecar
    write_doc(
        root,
        "concepts/zettelkasten/index.md",
        "---\ntitle: Zettelkasten\ntags: [notes, method]\nsummary: Slip-box note taking\n---\nAtomic notes.\n",
    )
    write_doc(root, "concepts/broken/body.md", "Body survives a bad sidecar.\n", meta="{not valid json")

    # Ignored: top-level files and folders outside the three type folders
    write_doc(root, "README.md", "# My brain\n")
    write_doc(root, "notes/stray.md", "---\ntitle: Stray\n---\n")

    return root


EXPECTED_ORDER = [
    "journals/2026-01-28",
    "journals/2025-12-31",
    "projects/quizzydots/roadmap",
    "projects/quizzydots/launch-notes",
    "projects/solo",
    "concepts/zettelkasten",
    "concepts/broken",
]
