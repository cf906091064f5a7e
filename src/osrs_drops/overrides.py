"""
Loader for the curated drop-table override dataset.

The override directory holds one document per source (usually one monster),
each listing drop table sections and the items in them. The directory is
maintained by hand, so a broken file is logged and skipped rather than failing
the whole lookup.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from osrs_drops.models import DropSource, OverrideFile

log = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def read_override_file(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(f)
        return json.load(f)


def _parse_override_file(path: Path) -> OverrideFile | None:
    try:
        data = read_override_file(path)
        return OverrideFile.model_validate(data)
    except (
        OSError,
        UnicodeDecodeError,
        RecursionError,
        json.JSONDecodeError,
        yaml.YAMLError,
    ) as e:
        log.warning("Skipping override file '%s': %s", path.name, e)
    except ValidationError as e:
        log.warning(
            "Skipping override file '%s': %d schema error(s)", path.name, e.error_count()
        )
    return None


def matching_sources(
    override: OverrideFile, item_name: str, item_id: int, fallback_name: str
) -> list[DropSource]:
    source_name = override.name or fallback_name
    results = []
    for section in override.drop_table_sections or []:
        for entry in section.items or []:
            if entry.item_id != item_id and entry.name != item_name:
                continue
            results.append(
                DropSource.from_rarity(
                    source_name,
                    "monster",
                    entry.rarity,
                    quantity=entry.quantity,
                    notes=section.header,
                )
            )
    return results


def load_overrides(directory: Path, item_name: str, item_id: int) -> list[DropSource]:
    if not directory.is_dir():
        log.debug("Override directory '%s' not found", directory)
        return []

    results: list[DropSource] = []
    for path in sorted(directory.iterdir()):
        if not path.is_file():
            continue
        override = _parse_override_file(path)
        if override is None:
            continue
        results.extend(matching_sources(override, item_name, item_id, path.name))

    if results:
        log.info("Item %d: %d override source(s) found", item_id, len(results))
    return results
