from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from jsonschema.validators import Draft202012Validator as Validator

# Repo-relative schemas folder
SCHEMAS_ROOT = Path(__file__).resolve().parents[1] / "schemas"


def load_schema(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        schema = yaml.safe_load(f)
    Validator.check_schema(schema)
    return schema


def validate_obj(schema: dict[str, Any], obj: dict[str, Any]) -> None:
    Validator(schema).validate(obj)


def validate_named(name: str, obj: dict[str, Any], *, schemas_root: Path | None = None) -> None:
    """Validate ``obj`` against ``<schemas_root>/<name>.schema.yaml``."""
    schema = load_schema((schemas_root or SCHEMAS_ROOT) / f"{name}.schema.yaml")
    validate_obj(schema, obj)
