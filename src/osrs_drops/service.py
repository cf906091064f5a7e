"""
Item drop lookup orchestration.

Builds the drop source list for one item:
1. Return the cached response if the item was already looked up
2. Load the item id to name mapping (once per process)
3. Build the wiki URL and fetch the item page
4. Extract drop and shop rows from the page
5. Load matching rows from the local override dataset
6. Merge, overrides first, and cache the result

Any upstream failure aborts the lookup; nothing is retried.
"""

import logging
from pathlib import Path

from osrs_drops import api, extract, overrides, wiki
from osrs_drops.cache import DropsCache
from osrs_drops.config import get_settings
from osrs_drops.exceptions import InvalidItemIdError
from osrs_drops.merge import merge
from osrs_drops.models import ItemDropsResponse

log = logging.getLogger(__name__)


def _build_item_drops(
    item_id: int,
    cache: DropsCache,
    extractor: extract.PageExtractor | None,
    override_dir: Path,
) -> ItemDropsResponse:
    item_name = api.resolve_item_name(item_id, cache)
    url = wiki.build_page_url(item_name)
    html = wiki.fetch_page_html(url)

    page = extract.extract(html, item_name, extractor)
    local = overrides.load_overrides(override_dir, page.item_title, item_id)

    sources = merge(local, page.sources)
    log.info(
        "Item %d (%s): %d sources (%d override, %d scraped)",
        item_id,
        page.item_title,
        len(sources),
        len(local),
        len(page.sources),
    )
    return ItemDropsResponse(
        item_id=item_id,
        item_name=page.item_title,
        sources=sources,
        source_url=url,
    )


def get_item_drops(
    item_id: int,
    cache: DropsCache,
    *,
    extractor: extract.PageExtractor | None = None,
    override_dir: Path | None = None,
) -> ItemDropsResponse:
    if item_id < 0:
        raise InvalidItemIdError(item_id)

    cached = cache.get_item_drops(item_id)
    if cached is not None:
        log.info("Item %d: using cached drops", item_id)
        return cached

    with cache.item_lock(item_id):
        cached = cache.get_item_drops(item_id)
        if cached is not None:
            log.info("Item %d: using cached drops", item_id)
            return cached

        response = _build_item_drops(
            item_id,
            cache,
            extractor,
            override_dir if override_dir is not None else get_settings().override_dir,
        )
        cache.set_item_drops(item_id, response)
        return response
