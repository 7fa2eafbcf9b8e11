from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from validators import ErrorCode, OrderLogError

# Base-10 integer with an optional sign; surrounding spaces are trimmed first
_INT_RE = re.compile(r"[+-]?[0-9]+")
# Signed 64-bit range
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class OrderRecord(BaseModel):  # type: ignore[misc]
    model_config = ConfigDict(frozen=True)

    eater_id: int
    food_menu_id: int


def _parse_int(raw: str) -> int | None:
    s = raw.strip(" ")
    if not _INT_RE.fullmatch(s):
        return None
    n = int(s)
    if not _INT_MIN <= n <= _INT_MAX:
        return None
    return n


def parse_order_line(text: str, line_number: int | None = None) -> OrderRecord:
    """Parse one ``eaterID, foodMenuID`` line into an OrderRecord."""
    parts = text.split(",")
    if len(parts) != 2:
        raise OrderLogError.incorrect_input(
            ErrorCode.INCORRECT_INPUT,
            "Invalid order log entry",
            line_number=line_number,
        )

    eater_id = _parse_int(parts[0])
    if eater_id is None:
        raise OrderLogError.incorrect_input(
            ErrorCode.INCORRECT_INPUT,
            f"Invalid eater_id: {parts[0]}",
            field="eater_id",
            line_number=line_number,
        )

    food_menu_id = _parse_int(parts[1])
    if food_menu_id is None:
        raise OrderLogError.incorrect_input(
            ErrorCode.INCORRECT_INPUT,
            f"Invalid foodmenu_id: {parts[1]}",
            field="food_menu_id",
            line_number=line_number,
        )

    return OrderRecord(eater_id=eater_id, food_menu_id=food_menu_id)


def load_orders(path: Path) -> list[OrderRecord]:
    """Read every order in ``path``, in file order.

    All-or-nothing: the first malformed line raises and nothing read so far
    is returned. Empty lines are skipped.
    """
    try:
        f = path.open("r", encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        raise OrderLogError.not_found(
            ErrorCode.FILE_NOT_FOUND, f"File not found: {path}"
        ) from e

    orders: list[OrderRecord] = []
    with f:
        for line_number, line in enumerate(f, start=1):
            # Lines end at "\n" only; one trailing "\r" is dropped
            text = line.removesuffix("\n").removesuffix("\r")
            if not text:
                continue
            orders.append(parse_order_line(text, line_number))
    return orders
