"""HTML pages for the browser UI.

Uses Jinja2 with inline template definitions: listing page, document page
and the not-found page.
"""

from jinja2 import BaseLoader, Environment, select_autoescape
from markupsafe import Markup

from ..config import CARD_TAG_LIMIT
from ..models import DocumentDetail, DocumentMeta
from .views import TABS, GroupedDocuments

STYLE = """
body { margin: 0; background: #0a0a0f; color: #e5e7eb; font-family: system-ui, sans-serif; }
a { color: inherit; text-decoration: none; }
.header { border-bottom: 1px solid rgba(255,255,255,0.05); padding: 1rem 1.5rem; }
.header h1 { font-size: 1.25rem; margin: 0; }
.container { max-width: 64rem; margin: 0 auto; padding: 2rem 1.5rem; }
.search { float: right; }
.search input { background: rgba(255,255,255,0.05); border: 1px solid rgba(255,255,255,0.1);
  border-radius: 0.5rem; color: inherit; padding: 0.5rem 1rem; width: 16rem; }
.tabs { margin-top: 1rem; display: flex; gap: 0.25rem; }
.tab { padding: 0.5rem 1rem; border-radius: 0.5rem; color: #9ca3af; }
.tab.active { background: rgba(255,255,255,0.1); color: #fff; }
.tab .count { margin-left: 0.5rem; font-size: 0.75rem; opacity: 0.5; }
.card { display: block; padding: 1rem; margin-bottom: 0.75rem; border-radius: 0.75rem;
  background: rgba(255,255,255,0.02); border: 1px solid rgba(255,255,255,0.05); }
.card:hover { background: rgba(255,255,255,0.04); }
.badge { font-size: 0.75rem; padding: 0.125rem 0.5rem; border-radius: 9999px; border: 1px solid; }
.badge.project { color: #a78bfa; } .badge.journal { color: #34d399; } .badge.concept { color: #fbbf24; }
.muted { color: #6b7280; font-size: 0.75rem; }
.date { float: right; }
.tag { font-size: 0.75rem; padding: 0.125rem 0.5rem; border-radius: 0.25rem;
  background: rgba(255,255,255,0.05); color: #9ca3af; margin-right: 0.25rem; }
.summary { color: #9ca3af; font-size: 0.875rem; }
.empty { text-align: center; padding: 4rem 0; color: #6b7280; }
article a { color: #a78bfa; }
article code { background: rgba(255,255,255,0.05); padding: 0.1rem 0.3rem; border-radius: 0.25rem; }
article pre { background: rgba(255,255,255,0.05); padding: 1rem; border-radius: 0.5rem; overflow-x: auto; }
article blockquote { border-left: 3px solid rgba(139,92,246,0.5); margin-left: 0; padding-left: 1rem; }
.section { padding: 0.75rem; margin-bottom: 0.5rem; border-radius: 0.5rem;
  background: rgba(255,255,255,0.02); border: 1px solid rgba(255,255,255,0.05); }
"""


def _base_wrapper(title: str, content: str) -> str:
    """Wrap content in the base HTML layout.

    Plain string formatting keeps user content out of Jinja parsing.
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_escape_html(title)} - Second Brain</title>
    <style>{STYLE}</style>
</head>
<body>
{content}
</body>
</html>
"""


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


CARD_MACRO = """
{% macro card(doc, tag_limit) %}
<a class="card" href="/doc/{{ doc.id | urlencode }}">
    {% if doc.date %}<span class="muted date">{{ doc.date }}</span>{% endif %}
    <span class="badge {{ doc.type }}">{{ doc.type }}</span>
    {% if doc.category %}<span class="muted">{{ doc.category }}</span>{% endif %}
    <h3>{{ doc.title }}</h3>
    {% if doc.summary %}<p class="summary">{{ doc.summary }}</p>{% endif %}
    {% if doc.tags %}
    <div>{% for tag in doc.tags[:tag_limit] %}<span class="tag">#{{ tag }}</span>{% endfor %}</div>
    {% endif %}
</a>
{% endmacro %}
"""

LISTING_TEMPLATE = CARD_MACRO + """
<header class="header">
    <form class="search" method="get" action="/">
        <input type="text" name="q" value="{{ query }}" placeholder="Search documents...">
        <input type="hidden" name="tab" value="{{ active_tab }}">
    </form>
    <h1>Second Brain</h1>
    <nav class="tabs">
        {% for tab in tabs %}
        <a class="tab{% if tab == active_tab %} active{% endif %}" href="/?tab={{ tab }}">
            {{ tab | capitalize }}<span class="count">{{ counts[tab] }}</span>
        </a>
        {% endfor %}
    </nav>
</header>
<main class="container">
    {% if active_tab == "projects" and not query %}
        {% for category, docs in grouped.projects.items() %}
        <section>
            <h2>{{ category[:1] | upper }}{{ category[1:] }}</h2>
            {% for doc in docs %}{{ card(doc, tag_limit) }}{% endfor %}
        </section>
        {% endfor %}
    {% elif documents %}
        {% for doc in documents %}{{ card(doc, tag_limit) }}{% endfor %}
    {% else %}
        <div class="empty">
            <p>No documents found</p>
            <p class="muted">Documents will appear here as you create them</p>
        </div>
    {% endif %}
</main>
"""

DOCUMENT_TEMPLATE = """
<header class="header">
    <a href="/" class="muted">&larr; Back to documents</a>
    <div>
        <span class="badge {{ doc.type }}">{{ doc.type }}</span>
        {% if doc.category %}<span class="muted">{{ doc.category }}</span>{% endif %}
        {% if doc.date %}<span class="muted">{{ doc.date }}</span>{% endif %}
    </div>
    <h1>{{ doc.title }}</h1>
</header>
<main class="container">
    {% if doc.summary %}<p class="summary"><em>{{ doc.summary }}</em></p>{% endif %}
    {% if doc.tags %}
    <div>{% for tag in doc.tags %}<span class="tag">#{{ tag }}</span>{% endfor %}</div>
    {% endif %}
    <article>{{ html_content }}</article>
    {% if doc.sections %}
    <section>
        <h2 class="muted">Sections</h2>
        {% for section in doc.sections %}<div class="section">{{ section }}</div>{% endfor %}
    </section>
    {% endif %}
</main>
"""

NOT_FOUND_TEMPLATE = """
<main class="container empty">
    <p>{{ message }}</p>
    <a href="/" class="badge project">&larr; Back to documents</a>
</main>
"""


def _get_env() -> Environment:
    """Create Jinja2 environment with autoescape enabled."""
    return Environment(
        loader=BaseLoader(),
        autoescape=select_autoescape(default=True, default_for_string=True),
    )


def render_listing_page(
    documents: list[DocumentMeta],
    grouped: GroupedDocuments,
    counts: dict[str, int],
    *,
    query: str,
    active_tab: str,
) -> str:
    """Render the document listing.

    Args:
        documents: Documents after filtering.
        grouped: All documents grouped by type and project category.
        counts: Tab badge counts.
        query: Current free-text query (may be empty).
        active_tab: Selected tab.

    Returns:
        Complete HTML page string.
    """
    tmpl = _get_env().from_string(LISTING_TEMPLATE)
    content = tmpl.render(
        documents=documents,
        grouped=grouped,
        counts=counts,
        query=query,
        active_tab=active_tab,
        tabs=TABS,
        tag_limit=CARD_TAG_LIMIT,
    )
    return _base_wrapper("Documents", content)


def render_document_page(doc: DocumentDetail) -> str:
    """Render a single document page."""
    tmpl = _get_env().from_string(DOCUMENT_TEMPLATE)
    # content_html comes from the markdown renderer, which escapes raw HTML
    content = tmpl.render(doc=doc, html_content=Markup(doc.content_html))
    return _base_wrapper(doc.title, content)


def render_not_found_page(message: str = "Document not found") -> str:
    tmpl = _get_env().from_string(NOT_FOUND_TEMPLATE)
    return _base_wrapper("Not found", tmpl.render(message=message))
