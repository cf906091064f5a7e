"""
CLI script for looking up an item's drop sources.

Runs the same pipeline as the HTTP endpoint:
1. Resolve the item name from the prices API mapping
2. Fetch the item's wiki page
3. Extract drop and shop tables
4. Merge local override files
5. Print sources most likely first (or the raw merged JSON with --json)
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from osrs_drops import service, sorter, terminal
from osrs_drops.cache import DropsCache
from osrs_drops.config import get_settings
from osrs_drops.exceptions import InvalidItemIdError, MappingError, WikiError
from osrs_drops.models import ItemDropsResponse


def print_item_drops(result: ItemDropsResponse) -> None:
    terminal.section_header(f"Item: {result.item_name} (ID: {result.item_id})")
    if result.source_url:
        terminal.info(f"  {terminal.link(result.source_url, 'View on Wiki')}")

    if not result.sources:
        terminal.warning("No known sources on the wiki.")
        return

    terminal.key_value("Sources", str(len(result.sources)))
    for source in sorter.sort_for_display(result.sources):
        terminal.drop_source(source)


def main() -> None:
    parser = argparse.ArgumentParser(description="Look up drop sources for an OSRS item")
    parser.add_argument("--item-id", type=int, required=True, help="OSRS item ID")
    parser.add_argument(
        "--override-dir",
        type=Path,
        default=None,
        help="Directory of override drop table files (default: from settings)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the merged response as JSON, unsorted"
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )
    cache = DropsCache()

    try:
        result = service.get_item_drops(args.item_id, cache, override_dir=args.override_dir)
    except (InvalidItemIdError, MappingError, WikiError) as e:
        terminal.error(str(e))
        sys.exit(1)
    except Exception as e:
        terminal.error(f"Unexpected error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
        return

    print_item_drops(result)


if __name__ == "__main__":
    main()
