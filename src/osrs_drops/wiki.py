"""
OSRS Wiki client for fetching rendered item pages.

Builds canonical article URLs from item names and fetches the rendered HTML
with the service's identifying user agent. Pages are fetched once per item and
never retried; caching happens at the response level in the orchestrator.
"""

import logging
import re

import httpx

from osrs_drops.config import get_settings
from osrs_drops.exceptions import WikiError

log = logging.getLogger(__name__)


def clean_name(name: str) -> str:
    return re.sub(r"\s+", " ", name.replace("\n", " ").replace("\r", " ")).strip()


def page_path(item_name: str) -> str:
    return clean_name(item_name).replace(" ", "_")


def build_page_url(item_name: str, base_url: str | None = None) -> str:
    base = (base_url or get_settings().wiki_base_url).rstrip("/")
    return f"{base}/w/{page_path(item_name)}"


def fetch_page_html(url: str) -> str:
    settings = get_settings()
    log.info("Fetching wiki page %s", url)
    try:
        response = httpx.get(
            url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.api_timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise WikiError(f"Failed to fetch wiki page '{url}': HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise WikiError(f"Network error fetching wiki page '{url}': {e}") from e

    return response.text
