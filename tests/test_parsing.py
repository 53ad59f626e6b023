"""Tests for brainview parsing modules.

Coverage:
- src/brainview/parser/markdown.py - frontmatter splitting
- src/brainview/parser/sidecar.py - meta.json reading and validation
- src/brainview/metadata.py - frontmatter/sidecar precedence
- src/brainview/parser/md_renderer.py - markdown rendering

Philosophy: Test behaviors, not library internals. Use parametrize for variations.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path

import pytest

from brainview.metadata import resolve_metadata
from brainview.models import SidecarMeta
from brainview.parser import parse_markdown, parse_markdown_text, read_sidecar, render_markdown

# ─────────────────────────────────────────────────────────────────────────────
# Frontmatter Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestParseMarkdown:
    """Tests for parse_markdown."""

    def test_missing_file_is_absent(self, tmp_path: Path):
        result = parse_markdown(tmp_path / "nope.md")

        assert result.status == "absent"
        assert result.metadata == {}
        assert result.content == ""

    def test_frontmatter_and_body(self, tmp_path: Path):
        path = tmp_path / "doc.md"
        path.write_text("---\ntitle: Hello\ntags: [a, b]\n---\n\nBody text\n", encoding="utf-8")

        result = parse_markdown(path)

        assert result.status == "found"
        assert result.metadata == {"title": "Hello", "tags": ["a", "b"]}
        assert result.content.strip() == "Body text"

    def test_no_frontmatter(self):
        result = parse_markdown_text("# Just markdown\n")

        assert result.status == "found"
        assert result.metadata == {}
        assert result.content.strip() == "# Just markdown"

    def test_malformed_frontmatter_keeps_raw_text(self, caplog):
        text = "---\ntitle: [unclosed\n---\nBody\n"

        with caplog.at_level(logging.WARNING, logger="brainview"):
            result = parse_markdown_text(text)

        assert result.status == "malformed"
        assert result.metadata == {}
        assert result.content == text
        assert "malformed frontmatter" in caplog.text

    @pytest.mark.parametrize("key", ["content", "handler"])
    def test_reserved_post_keys_keep_metadata(self, key):
        result = parse_markdown_text(f"---\ntitle: Real Title\n{key}: draft\n---\nBody\n")

        assert result.status == "found"
        assert result.metadata == {"title": "Real Title", key: "draft"}
        assert result.content.strip() == "Body"

    def test_non_mapping_frontmatter_is_empty(self):
        result = parse_markdown_text("---\n- a\n- b\n---\nBody\n")

        assert result.metadata == {}
        assert "Body" in result.content

    def test_directory_is_absent(self, tmp_path: Path):
        assert parse_markdown(tmp_path).status == "absent"


# ─────────────────────────────────────────────────────────────────────────────
# Sidecar Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestReadSidecar:
    """Tests for read_sidecar."""

    def test_absent(self, tmp_path: Path):
        lookup = read_sidecar(tmp_path)

        assert lookup.status == "absent"
        assert lookup.meta == SidecarMeta()

    def test_found(self, tmp_path: Path):
        (tmp_path / "meta.json").write_text(
            '{"title": "T", "date": "2024-01-01", "tags": ["x"], "summary": "S", "extra": 1}'
        )

        lookup = read_sidecar(tmp_path)

        assert lookup.status == "found"
        assert lookup.meta == SidecarMeta(title="T", date="2024-01-01", tags=["x"], summary="S")

    def test_single_tag_string_becomes_list(self, tmp_path: Path):
        (tmp_path / "meta.json").write_text('{"tags": "solo"}')
        assert read_sidecar(tmp_path).meta.tags == ["solo"]

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "",
            "[1, 2, 3]",
            '"just a string"',
            '{"tags": {"nested": true}}',
            '{"title": ["not", "a", "string"]}',
        ],
    )
    def test_malformed_is_empty_and_logged(self, tmp_path: Path, caplog, content):
        """Malformed sidecars never raise."""
        (tmp_path / "meta.json").write_text(content)

        with caplog.at_level(logging.WARNING, logger="brainview"):
            lookup = read_sidecar(tmp_path)

        assert lookup.status == "malformed"
        assert lookup.meta == SidecarMeta()
        assert "meta.json" in caplog.text

    def test_invalid_utf8_is_malformed(self, tmp_path: Path):
        (tmp_path / "meta.json").write_bytes(b"\xff\xfe{}")
        assert read_sidecar(tmp_path).status == "malformed"


# ─────────────────────────────────────────────────────────────────────────────
# Metadata Precedence Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestResolveMetadata:
    """Tests for resolve_metadata."""

    def test_frontmatter_wins_field_by_field(self):
        resolved = resolve_metadata({"title": "A"}, SidecarMeta(title="B", date="2024-01-01"))

        assert resolved.title == "A"
        assert resolved.date == "2024-01-01"

    def test_empty_frontmatter_values_fall_through(self):
        resolved = resolve_metadata(
            {"title": "  ", "tags": [], "summary": None},
            SidecarMeta(title="B", tags=["x"], summary="S"),
        )

        assert resolved.title == "B"
        assert resolved.tags == ["x"]
        assert resolved.summary == "S"

    def test_no_sources(self):
        resolved = resolve_metadata({})

        assert resolved.title is None
        assert resolved.date is None
        assert resolved.tags == []
        assert resolved.summary is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 3, 1), "2024-03-01"),
            (datetime(2024, 3, 1, 9, 30), "2024-03-01T09:30:00"),
            ("2024-03-01", "2024-03-01"),
            (2024, "2024"),
        ],
    )
    def test_date_values_become_strings(self, value, expected):
        assert resolve_metadata({"date": value}).date == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("single", ["single"]),
            (["a", "b", "a"], ["a", "b", "a"]),
            ([1, None, "x"], ["1", "x"]),
            ({"not": "tags"}, []),
        ],
    )
    def test_tag_values_normalized(self, value, expected):
        assert resolve_metadata({"tags": value}).tags == expected


# ─────────────────────────────────────────────────────────────────────────────
# Rendering Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestRenderMarkdown:
    """Tests for render_markdown."""

    @pytest.mark.parametrize(
        "source,fragment",
        [
            ("# Title", "<h1>Title</h1>"),
            ("### Small", "<h3>Small</h3>"),
            ("**bold**", "<strong>bold</strong>"),
            ("*italic*", "<em>italic</em>"),
            ("`code`", "<code>code</code>"),
            ("```python\nx = 1\n```", "<pre><code"),
            ("> quoted", "<blockquote>"),
            ("- one\n- two", "<li>one</li>"),
            ("1. first\n2. second", "<ol>"),
            ("---", "<hr />"),
        ],
    )
    def test_common_blocks(self, source, fragment):
        assert fragment in render_markdown(source)

    def test_links_open_in_new_tab(self):
        html = render_markdown("[site](https://example.com)")

        assert 'href="https://example.com"' in html
        assert 'target="_blank"' in html
        assert 'rel="noopener noreferrer"' in html

    def test_line_breaks_and_paragraphs(self):
        html = render_markdown("line one\nline two\n\nnext paragraph")

        assert "<br />" in html
        assert html.count("<p>") == 2

    def test_raw_html_is_escaped(self):
        html = render_markdown("<script>alert(1)</script>")

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty_content(self):
        assert render_markdown("") == ""
        assert render_markdown("  \n") == ""
