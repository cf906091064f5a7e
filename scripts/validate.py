"""Validate all override drop table files against the JSON Schema and Pydantic models."""

import argparse
import json
import sys
from pathlib import Path

import yaml
from jsonschema import Draft202012Validator
from pydantic import ValidationError as PydanticValidationError

from osrs_drops import terminal
from osrs_drops.config import get_settings
from osrs_drops.models import OverrideFile
from osrs_drops.overrides import read_override_file

REPO_ROOT = Path(__file__).parent.parent
SCHEMA_PATH = REPO_ROOT / "data" / "schema" / "override.schema.json"


def load_schema() -> dict:
    with open(SCHEMA_PATH) as f:
        return json.load(f)


def validate_file(filepath: Path, validator: Draft202012Validator) -> list[str]:
    errors: list[str] = []

    try:
        data = read_override_file(filepath)
    except (RecursionError, json.JSONDecodeError, yaml.YAMLError) as e:
        errors.append(f"Parse error: {e}")
        return errors
    except (OSError, UnicodeDecodeError) as e:
        errors.append(f"Read error: {e}")
        return errors

    if data is None:
        errors.append("File is empty")
        return errors

    for error in validator.iter_errors(data):
        path = " -> ".join(str(p) for p in error.absolute_path)
        location = f" at {path}" if path else ""
        errors.append(f"Schema: {error.message}{location}")

    try:
        OverrideFile.model_validate(data)
    except PydanticValidationError as e:
        for err in e.errors():
            loc = " -> ".join(str(part) for part in err["loc"])
            errors.append(f"Model: {err['msg']} at {loc}")

    return errors


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate override drop table files")
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help="Override directory (default: from settings)",
    )
    args = parser.parse_args(argv)
    directory: Path = args.directory or get_settings().override_dir

    schema = load_schema()
    validator = Draft202012Validator(schema)

    files = sorted(p for p in directory.glob("*") if p.is_file()) if directory.is_dir() else []

    if not files:
        print(f"No override files found in {directory}. Nothing to validate.")
        return 0

    total_errors = 0
    for filepath in files:
        errors = validate_file(filepath, validator)
        if errors:
            print(f"\n{filepath.name}:")
            for error in errors:
                print(f"  - {error}")
            total_errors += len(errors)

    if total_errors:
        print(f"\n{total_errors} error(s) in {len(files)} file(s)")
        return 1

    terminal.success(f"All {len(files)} file(s) valid.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
