"""
bv: CLI for the second-brain browser

Usage:
    bv list                        # List documents, newest first
    bv list --type journal         # Only journals
    bv get projects/foo            # Print a document body
    bv categories                  # Category folders per type
    bv serve                       # Run the web UI
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from . import __version__ as BRAINVIEW_VERSION
from .config import DEFAULT_HOST, DEFAULT_PORT


def format_table(rows: list[dict], columns: list[str], max_widths: dict | None = None) -> str:
    """Format rows as a simple table."""
    if not rows:
        return ""

    max_widths = max_widths or {}

    def cell(row: dict, col: str) -> str:
        val = str(row.get(col) or "")
        limit = max_widths.get(col, 50)
        if len(val) > limit:
            val = val[: limit - 3] + "..."
        return val

    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            widths[col] = max(widths[col], len(cell(row, col)))

    lines = [
        "  ".join(col.upper().ljust(widths[col]) for col in columns),
        "  ".join("-" * widths[col] for col in columns),
    ]
    for row in rows:
        lines.append("  ".join(cell(row, col).ljust(widths[col]) for col in columns).rstrip())

    return "\n".join(lines)


def output(data: Any, as_json: bool = False):
    """Output data as JSON or formatted text."""
    if as_json:
        click.echo(json.dumps(data, indent=2, default=str))
    else:
        click.echo(data)


def _root(ctx: click.Context) -> Path:
    from .config import get_brain_root

    root = ctx.obj.get("root") if ctx.obj else None
    return Path(root) if root else get_brain_root()


# ─────────────────────────────────────────────────────────────────────────────
# Main CLI Group
# ─────────────────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version=BRAINVIEW_VERSION, prog_name="bv")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Knowledge base root (default: $BRAIN_PATH or ~/second-brain)",
)
@click.pass_context
def cli(ctx: click.Context, root: Path | None):
    """bv: browse a second brain of projects, journals and concepts.

    \b
    Quick start:
      bv list                        # Everything, newest first
      bv list --query=python         # Filter by title, summary or tag
      bv get journals/2026-01-28     # Read a document
      bv serve                       # Web UI on http://localhost:8080
    """
    ctx.ensure_object(dict)
    ctx.obj["root"] = root


# ─────────────────────────────────────────────────────────────────────────────
# List Command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command("list")
@click.option(
    "--type",
    "doc_type",
    type=click.Choice(["project", "journal", "concept"]),
    help="Only documents of this type",
)
@click.option("--query", "-q", help="Filter by title, summary or tag (ignores --type)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_cmd(ctx: click.Context, doc_type: str | None, query: str | None, as_json: bool):
    """List documents.

    \b
    Examples:
      bv list
      bv list --type=journal
      bv list --query=rust --json
    """
    from .core import list_documents
    from .webapp.views import filter_documents

    documents = list_documents(_root(ctx))
    tab = f"{doc_type}s" if doc_type else "all"
    documents = filter_documents(documents, query, tab)

    if as_json:
        output([d.model_dump() for d in documents], as_json=True)
        return

    if not documents:
        click.echo("No documents found.")
        return

    rows = [d.model_dump() for d in documents]
    click.echo(format_table(rows, ["id", "title", "date"], {"id": 45, "title": 40, "date": 20}))


# ─────────────────────────────────────────────────────────────────────────────
# Get Command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command()
@click.argument("doc_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON with metadata")
@click.option("--metadata", "-m", is_flag=True, help="Show only metadata")
@click.pass_context
def get(ctx: click.Context, doc_id: str, as_json: bool, metadata: bool):
    """Read a document.

    \b
    Examples:
      bv get projects/quizzydots/roadmap
      bv get journals/2026-01-28 --json
      bv get concepts/zettelkasten --metadata
    """
    from .core import get_document
    from .errors import DocumentNotFoundError

    try:
        doc = get_document(_root(ctx), doc_id)
    except DocumentNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        data = doc.model_dump(exclude={"content"} if metadata else None)
        output(data, as_json=True)
        return

    lines = [f"# {doc.title}", f"type: {doc.type}"]
    if doc.category:
        lines.append(f"category: {doc.category}")
    if doc.date:
        lines.append(f"date: {doc.date}")
    if doc.tags:
        lines.append(f"tags: {', '.join(doc.tags)}")
    if doc.summary:
        lines.append(f"summary: {doc.summary}")
    if doc.sections:
        lines.append(f"sections: {', '.join(doc.sections)}")

    if not metadata:
        lines.extend(["", doc.content])

    click.echo("\n".join(lines))


# ─────────────────────────────────────────────────────────────────────────────
# Categories Command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def categories(ctx: click.Context, as_json: bool):
    """List category folders for each document type."""
    from .core import list_categories

    groups = list_categories(_root(ctx))

    if as_json:
        output([g.model_dump() for g in groups], as_json=True)
        return

    for group in groups:
        click.echo(f"{group.type}/")
        for name in group.categories:
            click.echo(f"  {name}")


# ─────────────────────────────────────────────────────────────────────────────
# Serve Command
# ─────────────────────────────────────────────────────────────────────────────


@cli.command()
@click.option("--host", envvar="HOST", default=DEFAULT_HOST, show_default=True)
@click.option("--port", envvar="PORT", default=DEFAULT_PORT, type=int, show_default=True)
@click.pass_context
def serve(ctx: click.Context, host: str, port: int):
    """Run the web UI and JSON API."""
    import logging
    import os

    import uvicorn

    from .webapp.api import app

    root = _root(ctx)
    # The app resolves the root per request from the environment
    os.environ["BRAIN_PATH"] = str(root)

    logging.getLogger(__name__).info("Serving %s on %s:%d", root, host, port)
    uvicorn.run(app, host=host, port=port)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main():
    """Entry point for bv CLI."""
    from ._logging import configure_logging

    configure_logging()
    cli()


if __name__ == "__main__":
    main()
