"""Text-returning wrapper around OneNoteConnector for tool/plugin callers."""

from __future__ import annotations

import logging

from . import config
from .connector import OneNoteConnector
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class NoteSkill:
    """Read notebook text and create links, addressed by notebook name and path."""

    def __init__(
        self,
        connector: OneNoteConnector,
        link_type: str = config.DEFAULT_LINK_TYPE,
        link_scope: str = config.DEFAULT_LINK_SCOPE,
    ) -> None:
        if connector is None:
            raise InvalidArgumentError("connector is required")
        self._connector = connector
        self.link_type = link_type
        self.link_scope = link_scope

    async def get_page_content(self, name: str, path: str) -> str:
        """Read text from a page in a notebook."""
        logger.info("Reading text from %s OneNote", name)
        stream = await self._connector.get_page_content_stream(name, path)
        with stream:
            return stream.read().decode("utf-8")

    async def get_section_content(self, name: str, path: str) -> str:
        """Read text from all pages in a section of a notebook."""
        logger.info("Reading text from %s OneNote", name)
        stream = await self._connector.get_section_content_stream(name, path)
        with stream:
            return stream.read().decode("utf-8")

    async def create_page_link(self, name: str, path: str) -> str:
        """Create a sharable link to a page in a notebook."""
        logger.debug("Creating link for page at '%s' in notebook '%s'", path, name)
        return await self._connector.create_page_share_link(name, path, self.link_type, self.link_scope)

    async def create_section_link(self, name: str, path: str) -> str:
        """Create a sharable link to a section in a notebook."""
        logger.debug("Creating link for section at '%s' in notebook '%s'", path, name)
        return await self._connector.create_section_share_link(name, path, self.link_type, self.link_scope)
