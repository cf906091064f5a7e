"""Pydantic models for item drop sources and the curated override files."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from osrs_drops.rates import parse_rate

# --- Source Types ---

SourceType = Literal[
    "monster",
    "thieving",
    "skilling",
    "container",
    "minigame",
    "clue",
    "shop",
    "other",
]


# --- Drop Sources ---


class DropSource(BaseModel):
    source_name: str = Field(alias="sourceName", min_length=1)
    type: SourceType
    drop_rate_raw: str | None = Field(default=None, alias="dropRateRaw")
    drop_rate_numeric: float | None = Field(default=None, alias="dropRateNumeric", gt=0, le=1)
    quantity: str | None = None
    requirements: str | None = None
    notes: str | None = None
    wiki_url: str | None = Field(default=None, alias="wikiUrl")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _validate_numeric_rate_matches_raw(self) -> DropSource:
        if self.drop_rate_numeric is None:
            return self
        if self.drop_rate_numeric != parse_rate(self.drop_rate_raw):
            raise ValueError(
                f"dropRateNumeric ({self.drop_rate_numeric}) must be derived from "
                f"dropRateRaw ({self.drop_rate_raw!r})"
            )
        return self

    @classmethod
    def from_rarity(
        cls, source_name: str, type: SourceType, rarity: str | None, **fields: Any
    ) -> DropSource:
        return cls(
            source_name=source_name,
            type=type,
            drop_rate_raw=rarity,
            drop_rate_numeric=parse_rate(rarity),
            **fields,
        )

    def dedup_key(self) -> tuple[str, str, str]:
        return (self.source_name, self.type, self.drop_rate_raw or "")


class ItemDropsResponse(BaseModel):
    item_id: int = Field(alias="itemId")
    item_name: str = Field(alias="itemName")
    sources: list[DropSource] = Field(default_factory=list)
    source_url: str | None = Field(default=None, alias="sourceUrl")

    model_config = {"populate_by_name": True}


# --- Override Files ---


class OverrideItem(BaseModel):
    item_id: int | None = Field(default=None, alias="itemId")
    name: str | None = None
    rarity: str | None = None
    quantity: str | None = None

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}


class OverrideSection(BaseModel):
    header: str | None = None
    items: list[OverrideItem] | None = None


class OverrideFile(BaseModel):
    name: str | None = None
    drop_table_sections: list[OverrideSection] | None = Field(
        default=None, alias="dropTableSections"
    )

    model_config = {"populate_by_name": True}
