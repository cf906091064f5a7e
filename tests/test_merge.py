"""Tests for merging override and scraped sources."""

from osrs_drops.merge import merge
from osrs_drops.models import DropSource


def _source(name: str, rarity: str | None = "1/128", type: str = "monster", **fields):
    return DropSource.from_rarity(name, type, rarity, **fields)


def _keys(sources: list[DropSource]) -> list[tuple[str, str, str]]:
    return [s.dedup_key() for s in sources]


def test_overrides_precede_scraped():
    overrides = [_source("Hill giant")]
    scraped = [_source("Moss giant"), _source("Cyclops")]

    result = merge(overrides, scraped)

    assert [s.source_name for s in result] == ["Hill giant", "Moss giant", "Cyclops"]


def test_override_wins_over_scraped_duplicate():
    override = _source("Hill giant", notes="Other")
    scraped = _source("Hill giant", quantity="1", notes="Rare drop", wiki_url="https://w/Hill")

    result = merge([override], [scraped])

    assert len(result) == 1
    assert result[0] is override
    assert result[0].notes == "Other"
    assert result[0].wiki_url is None


def test_key_ignores_quantity_and_notes():
    result = merge([], [_source("Goblin", quantity="1"), _source("Goblin", quantity="5")])
    assert len(result) == 1
    assert result[0].quantity == "1"


def test_different_rarity_or_type_kept():
    result = merge(
        [],
        [
            _source("Goblin", "1/128"),
            _source("Goblin", "1/64"),
            _source("Goblin", "1/128", type="thieving"),
        ],
    )
    assert len(result) == 3


def test_missing_rarity_matches_empty_rarity():
    overrides = [_source("General store", None, type="shop")]
    result = merge(overrides, [_source("General store", "", type="shop")])
    assert len(result) == 1


def test_duplicates_within_one_list_removed_first_seen_order():
    scraped = [_source("A"), _source("B"), _source("A"), _source("C"), _source("B")]
    assert [s.source_name for s in merge([], scraped)] == ["A", "B", "C"]


def test_merge_is_idempotent():
    overrides = [_source("A"), _source("B", "1/4")]
    scraped = [_source("B", "1/4"), _source("C"), _source("A")]

    once = merge(overrides, scraped)
    twice = merge(once, [])

    assert _keys(twice) == _keys(once)
    assert set(_keys(merge(once, once))) == set(_keys(once))


def test_empty_inputs():
    assert merge([], []) == []
