"""Markdown to HTML rendering for the document page.

Best-effort display rendering: headers, emphasis, code, links, blockquotes,
lists and rules. Raw HTML in the source is escaped.
"""

from markdown_it import MarkdownIt

_md: MarkdownIt | None = None


def _render_link_open(self, tokens, idx, options, env):
    token = tokens[idx]
    token.attrSet("target", "_blank")
    token.attrSet("rel", "noopener noreferrer")
    return self.renderToken(tokens, idx, options, env)


def _get_renderer() -> MarkdownIt:
    global _md
    if _md is None:
        md = MarkdownIt("commonmark", {"html": False, "breaks": True})
        md.add_render_rule("link_open", _render_link_open)
        _md = md
    return _md


def render_markdown(content: str) -> str:
    """Render markdown to an HTML fragment.

    Args:
        content: Markdown source (frontmatter already stripped).

    Returns:
        HTML string. Empty input renders to an empty string.
    """
    if not content.strip():
        return ""
    return _get_renderer().render(content)
