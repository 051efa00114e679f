"""Wiki markup renderer: internal links, external links and paragraphs."""

from __future__ import annotations

import re

WIKI_LINK = re.compile(r"\[\[([a-zA-Z0-9]+)\]\]")
EXTERNAL_LINK = re.compile(r"\[(https?://[^\s]+)\s([^\]]+)\]", re.ASCII)


def html_link(href: str, text: str) -> str:
    return f'<a href="{href}">{text}</a>'


def _wiki_link_to_html(match: re.Match) -> str:
    title = match.group(1)
    return html_link(f"/view/{title}", title)


def _external_link_to_html(match: re.Match) -> str:
    return html_link(match.group(1), match.group(2))


def render_wiki_links(text: str) -> str:
    """Replace [[Title]] and [url text] markup with anchors.

    Wiki links are substituted first, so an external link's display text may
    itself contain a rendered wiki link.
    """
    text = WIKI_LINK.sub(_wiki_link_to_html, text)
    text = EXTERNAL_LINK.sub(_external_link_to_html, text)
    return text


def wrap_paragraphs(text: str) -> str:
    """Wrap every non-blank line in <p> tags and drop blank lines."""
    paragraphs = [f"<p>{line}</p>" for line in text.split("\n") if line.strip()]
    return "\n".join(paragraphs)


def process_body(body: bytes) -> str:
    """Render a raw page body into displayable HTML. The body is not escaped."""
    text = body.decode("utf-8", errors="replace")
    return wrap_paragraphs(render_wiki_links(text))
