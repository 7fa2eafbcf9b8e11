from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from jsonschema import ValidationError

from pipeline.io.files import write_table
from pipeline.io.validate import SCHEMAS_ROOT, load_schema, validate_named, validate_obj


def test_config_schema_loads() -> None:
    schema = load_schema(SCHEMAS_ROOT / "order_report_config.schema.yaml")
    assert schema["type"] == "object"
    validate_obj(schema, {"top_n": 3, "tie_break": "first_seen"})


def test_validate_named_rejects_wrong_type() -> None:
    with pytest.raises(ValidationError):
        validate_named("order_report_config", {"top_n": "three"})


def test_write_table_csv_creates_parent(tmp_path: Path) -> None:
    out = tmp_path / "a" / "b" / "t.csv"
    write_table(pd.DataFrame([{"rank": 1, "food_menu_id": 2, "count": 5}]), out)
    assert pd.read_csv(out).to_dict(orient="records") == [{"rank": 1, "food_menu_id": 2, "count": 5}]


def test_write_table_unknown_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_table(pd.DataFrame(), tmp_path / "t.json")
    assert not (tmp_path / "t.json").exists()
