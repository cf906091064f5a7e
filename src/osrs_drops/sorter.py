"""
Display ordering for drop sources.

The merged source list keeps its first-seen order; only display code re-sorts
it. Sources are shown most likely first: descending numeric drop rate, with
unparseable rates last and ties broken by source name.
"""

from osrs_drops.models import DropSource


def _display_sort_key(source: DropSource) -> tuple[float, str]:
    rate = source.drop_rate_numeric if source.drop_rate_numeric is not None else -1.0
    return (-rate, source.source_name.lower())


def sort_for_display(sources: list[DropSource]) -> list[DropSource]:
    return sorted(sources, key=_display_sort_key)


def format_percent(rate: float | None) -> str:
    if rate is None:
        return ""
    return f"{rate * 100:.3f}%"


def format_rate(source: DropSource) -> str:
    """Percentage when the rate parsed, else the raw rarity text."""
    if source.drop_rate_numeric is not None:
        return format_percent(source.drop_rate_numeric)
    return source.drop_rate_raw or ""
