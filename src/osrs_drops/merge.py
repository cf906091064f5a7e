"""
Merging of curated override sources with scraped page sources.

Overrides come first and win: when an override and a scraped row share a
dedup key (source name, type, raw rarity), only the first one seen is kept.
Order is otherwise preserved. The key deliberately ignores quantity and notes.
"""

from osrs_drops.models import DropSource


def merge(overrides: list[DropSource], scraped: list[DropSource]) -> list[DropSource]:
    seen: set[tuple[str, str, str]] = set()
    merged = []
    for source in [*overrides, *scraped]:
        key = source.dedup_key()
        if key in seen:
            continue
        seen.add(key)
        merged.append(source)
    return merged
