"""Gather every item of a paged Graph collection."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


async def collect(builder) -> list:
    """GET `builder` and follow @odata.nextLink until the listing ends.

    `builder` is any msgraph-sdk collection request builder; each further
    page is requested through `builder.with_url(next_link)`.
    """
    items: list = []
    result = await builder.get()
    while result is not None:
        if result.value:
            items.extend(result.value)
        next_link = getattr(result, "odata_next_link", None)
        if not next_link:
            break
        logger.debug("Following next link %s", next_link)
        result = await builder.with_url(next_link).get()
    return items
