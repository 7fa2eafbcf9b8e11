from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from pipeline.io.files import write_table
from pipeline.io.validate import validate_named
from validators import validate_log_path

from .engine import TieBreak, count_ordered_items, sort_items_by_count_desc
from .io_schemas import load_orders

logger = logging.getLogger("processes.orders")

DEFAULT_LOG_PATH = Path("log.txt")
DEFAULT_TOP_N = 3
CONFIG_SCHEMA = "order_report_config"


@dataclass(frozen=True)
class TopItem:
    rank: int
    food_menu_id: int
    count: int


def _coerce_scalar(v: str) -> Any:
    lv = v.lower()
    if lv in ("true", "false"):
        return lv == "true"
    try:
        return int(v)
    except ValueError:
        return v


def load_config(
    config_path: Path | None, inline_kv: Sequence[str] | None = None
) -> dict[str, Any]:
    """Read a YAML/JSON config, apply ``key=value`` overrides and validate it."""
    cfg: dict[str, Any] = {}
    if config_path:
        text = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() in (".yaml", ".yml"):
            import yaml  # lazy

            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse YAML config {config_path}: {e}") from e
        else:
            data = json.loads(text)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config {config_path} must be a mapping")
        cfg = dict(data)
    if inline_kv:
        for item in inline_kv:
            if "=" not in item:
                raise ValueError(f"Invalid config override {item!r}; expected key=value")
            k, v = item.split("=", 1)
            cfg[k.strip()] = _coerce_scalar(v.strip())
    validate_named(CONFIG_SCHEMA, cfg)
    return cfg


def fetch_top_three_ordered_items(
    path: str | Path, *, tie_break: TieBreak = TieBreak.FIRST_SEEN
) -> tuple[list[int], dict[int, int]]:
    """Run file gate → line parser → aggregator → ranker over one order log.

    Returns ``(ranked_ids, item_counts)``: every food menu id ordered by
    descending count, and the count per id. The ranked list is not
    truncated; callers pick the top entries with :func:`top_items`.

    Raises:
        OrderLogError: the first failure from any stage, unchanged.
    """
    t0 = time.time()
    log_path = validate_log_path(path)
    logger.debug(json.dumps({"event": "orders_gate_ok", "path": str(log_path)}))

    orders = load_orders(log_path)
    logger.debug(json.dumps({"event": "orders_parsed", "orders": len(orders)}))

    item_counts = count_ordered_items(orders)
    ranked_ids = sort_items_by_count_desc(item_counts, tie_break)

    dt = time.time() - t0
    logger.info(
        json.dumps(
            {
                "event": "orders_ranked",
                "path": str(log_path),
                "orders": len(orders),
                "distinct_items": len(item_counts),
                "tie_break": tie_break.value,
                "dt_s": round(dt, 6),
            }
        )
    )
    return ranked_ids, item_counts


def top_items(
    ranked_ids: Sequence[int],
    item_counts: Mapping[int, int],
    limit: int = DEFAULT_TOP_N,
) -> list[TopItem]:
    return [
        TopItem(rank=i + 1, food_menu_id=menu_id, count=item_counts[menu_id])
        for i, menu_id in enumerate(ranked_ids[:limit])
    ]


def format_top_items(items: Sequence[TopItem], limit: int = DEFAULT_TOP_N) -> str:
    lines = [f"Top {limit} menu items consumed:"]
    lines.extend(f"{it.rank}. {it.food_menu_id} ({it.count})" for it in items)
    return "\n".join(lines)


def top_items_frame(items: Sequence[TopItem]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"rank": it.rank, "food_menu_id": it.food_menu_id, "count": it.count}
            for it in items
        ],
        columns=["rank", "food_menu_id", "count"],
    )


def run_report(
    *,
    log_path: Path,
    top_n: int = DEFAULT_TOP_N,
    tie_break: TieBreak = TieBreak.FIRST_SEEN,
    out_path: Path | None = None,
) -> dict[str, Any]:
    """Rank the log and optionally export the top items.

    Nothing is written unless the whole pipeline succeeds.
    """
    if out_path is not None and out_path.suffix.lower() not in (".csv", ".parquet"):
        raise ValueError(f"Unsupported report format for {out_path} (use .csv or .parquet)")

    ranked_ids, item_counts = fetch_top_three_ordered_items(log_path, tie_break=tie_break)
    items = top_items(ranked_ids, item_counts, top_n)

    if out_path is not None:
        write_table(top_items_frame(items), out_path)
        logger.info(json.dumps({"event": "orders_report_written", "out": str(out_path)}))

    return {
        "log_path": str(log_path),
        "ranked_ids": ranked_ids,
        "item_counts": item_counts,
        "top_items": items,
        "out_path": str(out_path) if out_path is not None else None,
    }
