"""Render OneNote page HTML (Graph API) as Markdown for the CLI."""

from __future__ import annotations

import re

import markdownify

_TITLE_RE = re.compile(r"<title>(.*?)</title>", re.IGNORECASE | re.DOTALL)
_HEAD_RE = re.compile(r"<head\b.*?</head>", re.IGNORECASE | re.DOTALL)
_ONENOTE_ATTR_RE = re.compile(r'\s+(?:data-[\w-]+|style|lang)="[^"]*"')


def html_to_markdown(html: str | bytes) -> str:
    """Convert the HTML of one or more OneNote pages to Markdown.

    Each page's <title> becomes a level-one heading. Section content is
    several HTML documents back to back, so every <head> is handled.
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")

    def _head_to_heading(match: re.Match) -> str:
        title = _TITLE_RE.search(match.group(0))
        if title and title.group(1).strip():
            return f"<h1>{title.group(1).strip()}</h1>"
        return ""

    cleaned = _HEAD_RE.sub(_head_to_heading, html)
    cleaned = _ONENOTE_ATTR_RE.sub("", cleaned)

    result = markdownify.markdownify(
        cleaned,
        heading_style="ATX",
        bullets="-",
        strip=["img", "object"],  # embedded resources are Graph URLs, not content
    )

    result = re.sub(r"\n{3,}", "\n\n", result)
    return result.strip()
