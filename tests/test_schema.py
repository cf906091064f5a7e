"""Tests for the override file schema and Pydantic models."""

import json
from pathlib import Path

import pytest
import yaml
from jsonschema import Draft202012Validator
from pydantic import ValidationError

from osrs_drops.models import DropSource, ItemDropsResponse, OverrideFile
from scripts.validate import main as validate_main
from scripts.validate import validate_file

SCHEMA_PATH = Path(__file__).parent.parent / "data" / "schema" / "override.schema.json"
SAMPLE_DIR = Path(__file__).parent.parent / "public" / "chance_drops"


@pytest.fixture
def schema():
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@pytest.fixture
def validator(schema):
    return Draft202012Validator(schema)


VALID_OVERRIDE = """
name: Hill giant
dropTableSections:
  - header: Weapons and armour
    items:
      - itemId: 1323
        name: Iron full helm
        rarity: 5/128
  - header: Other
    items:
      - name: Giant key
        rarity: 1/128
        quantity: "1"
"""


class TestOverrideSchema:
    def test_schema_is_valid(self, schema):
        Draft202012Validator.check_schema(schema)

    def test_valid_override(self, validator):
        data = yaml.safe_load(VALID_OVERRIDE)
        assert list(validator.iter_errors(data)) == []
        assert OverrideFile.model_validate(data).name == "Hill giant"

    def test_item_needs_id_or_name(self, validator):
        data = {"name": "X", "dropTableSections": [{"items": [{"rarity": "1/2"}]}]}
        assert list(validator.iter_errors(data))

    def test_missing_name_rejected(self, validator):
        assert list(validator.iter_errors({"dropTableSections": []}))

    def test_sample_files_are_valid(self, validator):
        files = sorted(SAMPLE_DIR.glob("*.json"))
        assert files
        for path in files:
            assert validate_file(path, validator) == []


class TestValidateScript:
    def test_reports_errors(self, tmp_path: Path, capsys):
        (tmp_path / "bad.json").write_text('{"dropTableSections": "nope"}')
        (tmp_path / "broken.json").write_text("{")

        assert validate_main([str(tmp_path)]) == 1

        output = capsys.readouterr().out
        assert "bad.json" in output
        assert "broken.json" in output
        assert "Parse error" in output

    def test_all_valid(self, tmp_path: Path, capsys):
        (tmp_path / "hill_giant.yaml").write_text(VALID_OVERRIDE)

        assert validate_main([str(tmp_path)]) == 0
        assert "All 1 file(s) valid." in capsys.readouterr().out

    def test_empty_directory(self, tmp_path: Path):
        assert validate_main([str(tmp_path / "missing")]) == 0


class TestDropSourceModel:
    def test_camel_case_aliases(self):
        source = DropSource.model_validate(
            {
                "sourceName": "Goblin",
                "type": "monster",
                "dropRateRaw": "1/4",
                "dropRateNumeric": 0.25,
            }
        )
        assert source.source_name == "Goblin"
        assert source.model_dump(by_alias=True)["dropRateNumeric"] == 0.25

    def test_empty_source_name_rejected(self):
        with pytest.raises(ValidationError):
            DropSource(source_name="", type="monster")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            DropSource(source_name="Goblin", type="boss")

    def test_numeric_rate_must_come_from_raw(self):
        with pytest.raises(ValidationError, match="must be derived from dropRateRaw"):
            DropSource(source_name="Goblin", type="monster", drop_rate_numeric=0.5)

        with pytest.raises(ValidationError, match="must be derived from dropRateRaw"):
            DropSource(
                source_name="Goblin", type="monster", drop_rate_raw="1/4", drop_rate_numeric=0.5
            )

    def test_from_rarity_derives_numeric_rate(self):
        assert DropSource.from_rarity("Goblin", "monster", "1 in 8").drop_rate_numeric == 1 / 8
        assert DropSource.from_rarity("Goblin", "monster", "Rare").drop_rate_numeric is None

    def test_dedup_key(self):
        assert DropSource.from_rarity("Goblin", "monster", None).dedup_key() == (
            "Goblin",
            "monster",
            "",
        )


def test_item_drops_response_serializes_with_aliases():
    response = ItemDropsResponse(item_id=1, item_name="Cabbage", sources=[])
    assert response.model_dump(by_alias=True) == {
        "itemId": 1,
        "itemName": "Cabbage",
        "sources": [],
        "sourceUrl": None,
    }
