"""Pure order log rules: path gate and duplicate detection."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .types import ORDER_LOG_SUFFIX, ErrorCode, OrderLogError


def validate_log_path(path: str | Path) -> Path:
    """Check that ``path`` names a ``.txt`` order log.

    Pure string inspection, no filesystem access. Returns the path as a
    ``Path`` so callers can chain straight into reading it.

    Raises:
        OrderLogError: code ``INVALID_FILE`` when the suffix is not ``.txt``.
    """
    p = Path(path)
    if p.suffix.lower() != ORDER_LOG_SUFFIX:
        raise OrderLogError.unknown(
            ErrorCode.INVALID_FILE,
            f"Invalid file type: {p.name or str(path)!r} (expected {ORDER_LOG_SUFFIX})",
        )
    return p


def is_duplicate_order(
    consumed: Mapping[int, int], eater_id: int, food_menu_id: int
) -> bool:
    # Only the eater's most recent item is remembered
    prev = consumed.get(eater_id)
    return prev is not None and prev == food_menu_id
