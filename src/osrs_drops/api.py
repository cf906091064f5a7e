"""
Prices API client for the item id to name mapping.

Wraps the OSRS wiki prices API mapping endpoint, which returns every tradeable
and untradeable item as an {id, name, ...} record. The mapping is fetched once
per process and held in the cache; failures are not retried.
"""

import logging
from typing import Any

import httpx

from osrs_drops.cache import DropsCache
from osrs_drops.config import get_settings
from osrs_drops.exceptions import MappingError
from osrs_drops.types import MappingEntry

log = logging.getLogger(__name__)


def _fetch_mapping() -> list[MappingEntry]:
    settings = get_settings()
    try:
        response = httpx.get(
            settings.mapping_url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.api_timeout,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise MappingError(f"Failed to fetch item mapping: HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise MappingError(f"Network error fetching item mapping: {e}") from e

    try:
        data: Any = response.json()
    except (ValueError, TypeError) as e:
        raise MappingError("Invalid JSON response for item mapping") from e

    if not isinstance(data, list):
        raise MappingError(f"Unexpected item mapping format: {type(data).__name__}")

    entries: list[MappingEntry] = [
        entry
        for entry in data
        if isinstance(entry, dict) and isinstance(entry.get("id"), int) and entry.get("name")
    ]
    skipped = len(data) - len(entries)
    if skipped:
        log.warning("Item mapping: skipped %d malformed entries", skipped)
    return entries


def load_mapping(cache: DropsCache) -> dict[int, MappingEntry]:
    cached = cache.get_mapping()
    if cached is not None:
        return cached

    with cache.mapping_lock:
        cached = cache.get_mapping()
        if cached is not None:
            return cached

        log.info("Item mapping: fetching from prices API")
        entries = _fetch_mapping()
        cache.set_mapping(entries)
        log.info("Item mapping: loaded %d items", len(entries))
        return cache.get_mapping() or {}


def resolve_item_name(item_id: int, cache: DropsCache) -> str:
    load_mapping(cache)
    name = cache.get_item_name(item_id)
    if name is None:
        log.warning("Item %d: not in mapping, using placeholder name", item_id)
        return f"Item_{item_id}"
    return name
