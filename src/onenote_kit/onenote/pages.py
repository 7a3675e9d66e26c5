"""OneNote page lookups and content via Microsoft Graph API."""

from __future__ import annotations

import logging
from typing import Sequence

from msgraph import GraphServiceClient
from msgraph.generated.models.onenote_page import OnenotePage

from ..errors import NotFoundError
from ..paths import as_segments, first_match, join_path, require_segments
from .notebooks import link_hrefs
from .paging import collect
from .sections import walk_to_section

logger = logging.getLogger(__name__)


async def fetch_pages(client: GraphServiceClient, section_id: str) -> list[OnenotePage]:
    """All pages of a section, in listing order."""
    return await collect(client.me.onenote.sections.by_onenote_section_id(section_id).pages)


async def list_pages(client: GraphServiceClient, section_id: str) -> list[dict]:
    """List all pages in a section."""
    return [_page_to_dict(page) for page in await fetch_pages(client, section_id)]


async def resolve_page(
    client: GraphServiceClient,
    notebook_id: str,
    path: str | Sequence[str],
) -> OnenotePage:
    """Resolve a page path ("Group/.../Section/Page") inside a notebook.

    The last name is the page title; the names before it are resolved as
    a section path first. A bare page title is not a valid page path.
    """
    segments = as_segments(path)
    require_segments(segments, 2, "page")
    full_path = join_path(segments)

    *section_path, title = segments
    section = await walk_to_section(client, notebook_id, section_path, full_path)

    page = first_match(await fetch_pages(client, section.id), title, "title")
    if page is None:
        raise NotFoundError("page", title, full_path)
    logger.debug("Page '%s' is %s", title, page.id)
    return page


async def get_page_content(client: GraphServiceClient, page_id: str) -> bytes:
    """Fetch a page's HTML body from the $value endpoint."""
    content = await client.me.onenote.pages.by_onenote_page_id(page_id).content.get()
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _page_to_dict(page: OnenotePage) -> dict:
    """Convert a Page model to a plain dict."""
    return {
        "id": page.id,
        "title": page.title,
        "createdDateTime": page.created_date_time.isoformat() if page.created_date_time else None,
        "lastModifiedDateTime": page.last_modified_date_time.isoformat() if page.last_modified_date_time else None,
        "contentUrl": page.content_url,
        **link_hrefs(page.links),
    }
