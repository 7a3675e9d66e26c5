"""OneNote section and section group lookups via Microsoft Graph API."""

from __future__ import annotations

import logging
from typing import Sequence

from msgraph import GraphServiceClient
from msgraph.generated.models.onenote_section import OnenoteSection

from ..errors import NotFoundError
from ..paths import as_segments, first_match, join_path, require_segments
from .notebooks import link_hrefs
from .paging import collect

logger = logging.getLogger(__name__)


async def list_sections(client: GraphServiceClient, notebook_id: str) -> list[dict]:
    """List the top-level sections of a notebook."""
    sections = await collect(client.me.onenote.notebooks.by_notebook_id(notebook_id).sections)
    return [_section_to_dict(sec) for sec in sections]


async def resolve_section(
    client: GraphServiceClient,
    notebook_id: str,
    path: str | Sequence[str],
) -> OnenoteSection:
    """Resolve a section path ("Group/.../Section") inside a notebook.

    Every name but the last is a section group, nested from the notebook
    down; the last is a section in the innermost group. One listing call
    is made per level and the first case-insensitive match is taken.
    A name with no match raises NotFoundError; there is no backtracking
    into other groups of the same name.
    """
    segments = as_segments(path)
    require_segments(segments, 1, "section")
    return await walk_to_section(client, notebook_id, segments, join_path(segments))


async def walk_to_section(
    client: GraphServiceClient,
    notebook_id: str,
    segments: Sequence[str],
    full_path: str,
) -> OnenoteSection:
    """Walk already-validated `segments`; `full_path` is used in errors."""
    *group_names, section_name = segments
    onenote = client.me.onenote

    parent = onenote.notebooks.by_notebook_id(notebook_id)
    for group_name in group_names:
        groups = await collect(parent.section_groups)
        group = first_match(groups, group_name, "display_name")
        if group is None:
            raise NotFoundError("section group", group_name, full_path)
        logger.debug("Section group '%s' is %s", group_name, group.id)
        parent = onenote.section_groups.by_section_group_id(group.id)

    section = first_match(await collect(parent.sections), section_name, "display_name")
    if section is None:
        raise NotFoundError("section", section_name, full_path)
    logger.debug("Section '%s' is %s", section_name, section.id)
    return section


def _section_to_dict(sec: OnenoteSection) -> dict:
    """Convert a section model to a plain dict."""
    return {
        "id": sec.id,
        "displayName": sec.display_name,
        "createdDateTime": sec.created_date_time.isoformat() if sec.created_date_time else None,
        "lastModifiedDateTime": sec.last_modified_date_time.isoformat() if sec.last_modified_date_time else None,
        **link_hrefs(sec.links),
    }
