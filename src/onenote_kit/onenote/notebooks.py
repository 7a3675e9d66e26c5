"""OneNote notebook lookups via Microsoft Graph API."""

from __future__ import annotations

import logging

from msgraph import GraphServiceClient
from msgraph.generated.models.notebook import Notebook

from ..errors import InvalidArgumentError, NotFoundError
from ..paths import first_match
from .paging import collect

logger = logging.getLogger(__name__)


async def fetch_notebooks(client: GraphServiceClient) -> list[Notebook]:
    return await collect(client.me.onenote.notebooks)


async def list_notebooks(client: GraphServiceClient) -> list[dict]:
    """List all notebooks for the authenticated user."""
    return [_notebook_to_dict(nb) for nb in await fetch_notebooks(client)]


async def find_notebook(client: GraphServiceClient, name: str) -> Notebook:
    """Find a notebook by display name, ignoring case.

    Raises NotFoundError if none of the user's notebooks has that name.
    """
    if name is None or not name.strip():
        raise InvalidArgumentError("notebook name must not be blank")

    notebook = first_match(await fetch_notebooks(client), name, "display_name")
    if notebook is None:
        raise NotFoundError("notebook", name)
    logger.debug("Notebook '%s' is %s", name, notebook.id)
    return notebook


def link_hrefs(links) -> dict:
    """Pull the web and client hrefs out of a OneNote links object."""
    web = getattr(links, "one_note_web_url", None) if links else None
    client = getattr(links, "one_note_client_url", None) if links else None
    return {
        "webUrl": web.href if web else None,
        "clientUrl": client.href if client else None,
    }


def _notebook_to_dict(nb: Notebook) -> dict:
    """Convert a Notebook model to a plain dict."""
    return {
        "id": nb.id,
        "displayName": nb.display_name,
        "createdDateTime": nb.created_date_time.isoformat() if nb.created_date_time else None,
        "lastModifiedDateTime": nb.last_modified_date_time.isoformat() if nb.last_modified_date_time else None,
        "isShared": nb.is_shared,
        **link_hrefs(nb.links),
    }
