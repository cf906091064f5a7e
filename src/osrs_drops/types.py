"""
Type definitions for external API responses.

Provides TypedDict structures matching the prices API mapping schema to enable
strict type checking and better IDE support.
"""

from typing import NamedTuple, NotRequired, TypedDict

from osrs_drops.models import DropSource


class MappingEntry(TypedDict):
    id: int
    name: str
    examine: NotRequired[str]
    members: NotRequired[bool]
    lowalch: NotRequired[int]
    highalch: NotRequired[int]
    limit: NotRequired[int]
    value: NotRequired[int]
    icon: NotRequired[str]


class PageExtraction(NamedTuple):
    item_title: str
    sources: list[DropSource]
