"""Read OneNote content and links addressed by notebook name and path."""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Sequence

from msgraph import GraphServiceClient

from . import config
from .errors import InvalidArgumentError, NoteError
from .multistream import ConcatStream
from .onenote import notebooks, pages, sections
from .paths import as_segments, join_path, require_segments

logger = logging.getLogger(__name__)

# Share link type -> attribute of the OneNote links object that provides it.
LINK_TYPES = {
    "view": "one_note_web_url",
    "client": "one_note_client_url",
}

# OneNote publishes its links to anyone holding them; no other audience can be requested.
LINK_SCOPES = ("anonymous",)


def _check_link_options(link_type: str, scope: str) -> str:
    if link_type not in LINK_TYPES:
        raise InvalidArgumentError(
            f"unsupported link type '{link_type}', expected one of: {', '.join(LINK_TYPES)}"
        )
    if scope not in LINK_SCOPES:
        raise InvalidArgumentError(
            f"unsupported link scope '{scope}', expected one of: {', '.join(LINK_SCOPES)}"
        )
    return LINK_TYPES[link_type]


def _link_href(entity, attr: str, kind: str, path: str) -> str:
    link = getattr(entity.links, attr, None) if entity.links else None
    if link is None or not link.href:
        raise NoteError(f"{kind} '{path}' has no {attr} link")
    return link.href


class OneNoteConnector:
    """Locate notebooks, sections and pages by name and read them.

    Paths may be given as "A/B/C" or as a sequence of names; a sequence
    lets a name contain '/'. Lookups are issued one at a time. Cancelling
    the awaiting task aborts the remote call in flight.
    """

    def __init__(self, client: GraphServiceClient) -> None:
        if client is None:
            raise InvalidArgumentError("a GraphServiceClient is required")
        self._client = client

    async def get_page_content_stream(self, notebook_name: str, path: str | Sequence[str]) -> BinaryIO:
        """Return the HTML body of the page at `path` as a binary stream."""
        segments = as_segments(path)
        require_segments(segments, 2, "page")
        notebook = await notebooks.find_notebook(self._client, notebook_name)
        page = await pages.resolve_page(self._client, notebook.id, segments)

        logger.debug("Reading page '%s' from notebook '%s'", join_path(segments), notebook_name)
        return io.BytesIO(await pages.get_page_content(self._client, page.id))

    async def get_section_content_stream(self, notebook_name: str, path: str | Sequence[str]) -> ConcatStream:
        """Return every page of the section at `path`, in listing order, as one stream.

        msgraph-sdk hands each page body back as bytes, so every page is held
        in memory before the stream is built.
        """
        segments = as_segments(path)
        notebook = await notebooks.find_notebook(self._client, notebook_name)
        section = await sections.resolve_section(self._client, notebook.id, segments)

        section_pages = await pages.fetch_pages(self._client, section.id)
        logger.debug(
            "Reading %d page(s) of section '%s' from notebook '%s'",
            len(section_pages),
            join_path(segments),
            notebook_name,
        )

        streams: list[BinaryIO] = []
        try:
            for page in section_pages:
                streams.append(io.BytesIO(await pages.get_page_content(self._client, page.id)))
        except BaseException:
            for stream in streams:
                stream.close()
            raise
        return ConcatStream(streams)

    async def create_page_share_link(
        self,
        notebook_name: str,
        path: str | Sequence[str],
        link_type: str = config.DEFAULT_LINK_TYPE,
        scope: str = config.DEFAULT_LINK_SCOPE,
    ) -> str:
        """Return a link to the page at `path`."""
        attr = _check_link_options(link_type, scope)
        segments = as_segments(path)
        require_segments(segments, 2, "page")
        notebook = await notebooks.find_notebook(self._client, notebook_name)
        page = await pages.resolve_page(self._client, notebook.id, segments)
        return _link_href(page, attr, "page", join_path(segments))

    async def create_section_share_link(
        self,
        notebook_name: str,
        path: str | Sequence[str],
        link_type: str = config.DEFAULT_LINK_TYPE,
        scope: str = config.DEFAULT_LINK_SCOPE,
    ) -> str:
        """Return a link to the section at `path`."""
        attr = _check_link_options(link_type, scope)
        segments = as_segments(path)
        notebook = await notebooks.find_notebook(self._client, notebook_name)
        section = await sections.resolve_section(self._client, notebook.id, segments)
        return _link_href(section, attr, "section", join_path(segments))
