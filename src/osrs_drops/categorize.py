"""
Heuristic source categorization for scraped drop rows.

Categories are assigned from an ordered rule table: each rule pairs a
predicate over the source name and the nearest section heading with the
category it implies. Rules are evaluated top to bottom and the first match
wins. Rules are kept in one place so the heuristic stays auditable and can be
tested without any HTML.

The extractor applies the matched category on top of the table's default
("monster" for drop tables), so a heading match replaces the default.
"""

import re
from collections.abc import Callable
from typing import NamedTuple

from osrs_drops.models import SourceType


class CategoryRule(NamedTuple):
    category: SourceType
    predicate: Callable[[str, str], bool]
    description: str


def _heading_has(*keywords: str) -> Callable[[str, str], bool]:
    def predicate(source_name: str, heading: str) -> bool:
        return any(keyword in heading for keyword in keywords)

    return predicate


def _name_has(*keywords: str) -> Callable[[str, str], bool]:
    # Whole words only, with an optional plural: "box" matches "boxes" but not "boxer".
    pattern = re.compile(
        r"\b(?:" + "|".join(re.escape(keyword) for keyword in keywords) + r")(?:e?s)?\b"
    )

    def predicate(source_name: str, heading: str) -> bool:
        return pattern.search(source_name) is not None

    return predicate


# Clue rules precede container rules: "Reward casket (hard)" is both.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("thieving", _heading_has("pickpocket", "thieving", "stall"), "heading: thieving"),
    CategoryRule("clue", _heading_has("clue", "treasure trail"), "heading: clue rewards"),
    CategoryRule("clue", _name_has("clue scroll", "reward casket"), "name: clue reward"),
    CategoryRule(
        "minigame", _heading_has("minigame", "activity", "activities"), "heading: minigame"
    ),
    CategoryRule(
        "skilling",
        _heading_has(
            "skilling", "fishing", "mining", "woodcutting", "farming", "hunter", "farmed"
        ),
        "heading: skilling",
    ),
    CategoryRule("shop", _heading_has("shop", "store", "sold by"), "heading: shops"),
    CategoryRule(
        "container",
        _heading_has("container", "contained in", "opened from"),
        "heading: containers",
    ),
    CategoryRule(
        "container",
        _name_has("casket", "chest", "crate", "supply", "sack", "pouch", "box"),
        "name: container",
    ),
)


def categorize(
    source_name: str,
    heading: str | None = None,
    rules: tuple[CategoryRule, ...] = CATEGORY_RULES,
) -> SourceType | None:
    name = source_name.lower()
    heading_text = (heading or "").lower()
    for rule in rules:
        if rule.predicate(name, heading_text):
            return rule.category
    return None
