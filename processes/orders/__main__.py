from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from jsonschema import ValidationError

from validators import OrderLogError

from .adapter import DEFAULT_LOG_PATH, DEFAULT_TOP_N, format_top_items, load_config, run_report
from .engine import TieBreak


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m processes.orders",
        description="Report the most-ordered menu items from a dining-hall order log",
    )
    p.add_argument("--log", type=Path, help=f"Order log path (default {DEFAULT_LOG_PATH})")
    p.add_argument("--config", type=Path, help="YAML or JSON config file")
    p.add_argument("--config-kv", nargs="*", help="Inline overrides key=value")
    p.add_argument("--top", type=int, help=f"Number of items to report (default {DEFAULT_TOP_N})")
    p.add_argument(
        "--tie-break",
        choices=[t.value for t in TieBreak],
        help="Ordering among items with equal counts (default first_seen)",
    )
    p.add_argument("--out", type=Path, help="Optional report export (.csv or .parquet)")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = load_config(args.config, args.config_kv)
    except (OSError, ValueError, ValidationError) as e:
        msg = e.message if isinstance(e, ValidationError) else str(e)
        print(f"Config error: {msg}", file=sys.stderr)
        return 2

    log_path = args.log or Path(cfg.get("log_path", DEFAULT_LOG_PATH))
    top_n = args.top if args.top is not None else int(cfg.get("top_n", DEFAULT_TOP_N))
    if top_n < 1:
        print("Config error: --top must be >= 1", file=sys.stderr)
        return 2
    tie_break = TieBreak(args.tie_break or cfg.get("tie_break", TieBreak.FIRST_SEEN.value))
    out = args.out or (Path(cfg["out"]) if cfg.get("out") else None)

    try:
        result = run_report(log_path=log_path, top_n=top_n, tie_break=tie_break, out_path=out)
    except OrderLogError as e:
        print(f"error[{int(e.code)}/{e.error_type.value}]: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_top_items(result["top_items"], top_n))
    if args.verbose and result["out_path"]:
        print(f"[orders] report={result['out_path']}", file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
