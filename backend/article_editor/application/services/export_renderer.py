"""Export renderer — turns articles into one self-contained HTML document.

The output has three parts:
    1. a header with the document title,
    2. a clickable table of contents (one ``#article-<id>`` link per article),
    3. one ``<article>`` section per article: title, created/updated
       metadata, the properties block and the raw rich-text content.

Titles and property names/values are escaped; ``content`` is inserted as-is
because it is the editor's own markup.

The same pipeline serves both export kinds. ``ExportFormat.PDF`` only adds
print-oriented styling (A4 page rules, one article per page).
"""

from collections.abc import Sequence
from datetime import datetime

from article_editor.domain.entities import Article, ArticleProperty, ExportFormat

DEFAULT_DOCUMENT_TITLE = "Article Documentation"

_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
})

_BASE_STYLE = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
           max-width: 800px; margin: 0 auto; padding: 20px; color: #1f2937; line-height: 1.6; }
    header h1 { text-align: center; border-bottom: 2px solid #3b82f6; padding-bottom: 10px; }
    .generated { text-align: center; color: #6b7280; font-size: 0.875rem; }
    nav.toc { margin: 30px 0; }
    nav.toc ol { padding-left: 1.5rem; }
    nav.toc li { margin-bottom: 8px; }
    nav.toc a { color: #3b82f6; text-decoration: none; font-weight: 500; }
    article { margin: 40px 0; padding-top: 20px; border-top: 1px solid #e5e7eb; }
    .meta { color: #6b7280; font-size: 0.875rem; }
    .properties { background: #f9fafb; border-radius: 6px; padding: 10px 16px; margin: 16px 0; }
    .properties h3 { margin: 0 0 8px; font-size: 1rem; }
    .properties table { border-collapse: collapse; }
    .properties th { text-align: left; padding: 2px 16px 2px 0; font-weight: 600; }
    .properties td { padding: 2px 0; }
"""

_PRINT_STYLE = """
    @page { size: A4; margin: 20mm; }
    @media print {
        body { max-width: none; padding: 0; }
        nav.toc { page-break-after: always; }
        article { page-break-before: always; border-top: none; }
        nav.toc a { color: #1f2937; }
    }
"""


def escape_text(value: str) -> str:
    """Replace markup-significant characters with named character references."""
    return value.translate(_ESCAPE_TABLE)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``M/D/YYYY, HH:MM``."""
    return f"{value.month}/{value.day}/{value.year}, {value:%H:%M}"


def article_anchor(article: Article) -> str:
    return f"article-{article.id}"


def render_export_document(
    articles: Sequence[Article],
    export_format: ExportFormat = ExportFormat.HTML,
    generated_at: datetime | None = None,
    document_title: str = DEFAULT_DOCUMENT_TITLE,
) -> str:
    """Render the complete export document for ``articles``, in the given order."""
    title = escape_text(document_title)
    style = _BASE_STYLE + (_PRINT_STYLE if export_format == ExportFormat.PDF else "")

    generated = ""
    if generated_at is not None:
        generated = (
            f'    <p class="generated">Generated {format_timestamp(generated_at)}'
            f" &middot; {len(articles)} article(s)</p>\n"
        )

    toc = "\n".join(_render_toc_entry(a) for a in articles)
    sections = "\n".join(_render_article(a) for a in articles)

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f'  <meta name="export-format" content="{export_format.value}">\n'
        f"  <title>{title}</title>\n"
        f"  <style>{style}  </style>\n"
        "</head>\n"
        "<body>\n"
        "  <header>\n"
        f"    <h1>{title}</h1>\n"
        f"{generated}"
        "  </header>\n"
        '  <nav class="toc">\n'
        "    <h2>Table of Contents</h2>\n"
        "    <ol>\n"
        f"{toc}\n"
        "    </ol>\n"
        "  </nav>\n"
        "  <main>\n"
        f"{sections}\n"
        "  </main>\n"
        "</body>\n"
        "</html>\n"
    )


def _render_toc_entry(article: Article) -> str:
    return (
        f'      <li><a href="#{article_anchor(article)}">'
        f"{escape_text(article.title)}</a></li>"
    )


def _render_article(article: Article) -> str:
    return (
        f'    <article id="{article_anchor(article)}">\n'
        f"      <h2>{escape_text(article.title)}</h2>\n"
        '      <p class="meta">'
        f"<strong>Created:</strong> {format_timestamp(article.created_at)}"
        " &nbsp;|&nbsp; "
        f"<strong>Updated:</strong> {format_timestamp(article.updated_at)}</p>\n"
        f"{_render_properties(article.properties)}"
        f'      <div class="content">{article.content}</div>\n'
        "    </article>"
    )


def _render_properties(properties: Sequence[ArticleProperty]) -> str:
    # Articles without properties get no block at all.
    if not properties:
        return ""
    rows = "\n".join(
        f"          <tr><th>{escape_text(p.property_name)}</th>"
        f"<td>{escape_text(p.property_value)}</td></tr>"
        for p in properties
    )
    return (
        '      <section class="properties">\n'
        "        <h3>Properties:</h3>\n"
        "        <table>\n"
        f"{rows}\n"
        "        </table>\n"
        "      </section>\n"
    )
