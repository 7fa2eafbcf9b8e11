from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum

from validators import ErrorCode, OrderLogError, is_duplicate_order

from .io_schemas import OrderRecord


class TieBreak(Enum):
    """Ordering among menu items with equal counts."""

    # Order in which items first appeared in the log
    FIRST_SEEN = "first_seen"
    # Ascending food menu id
    MENU_ID = "menu_id"


def count_ordered_items(orders: Iterable[OrderRecord]) -> dict[int, int]:
    """Tally valid orders per food menu id.

    An eater ordering the same item as their most recent order is rejected as
    a duplicate entry. Only the latest item per eater is remembered, so
    X, Y, X for one eater is accepted.

    Raises:
        OrderLogError: code ``INCORRECT_INPUT`` on a duplicate entry. No
            partial counts are returned.
    """
    counts: dict[int, int] = {}
    consumed: dict[int, int] = {}
    for order in orders:
        if is_duplicate_order(consumed, order.eater_id, order.food_menu_id):
            raise OrderLogError.incorrect_input(
                ErrorCode.INCORRECT_INPUT,
                (
                    "Duplicate entry found for "
                    f"eater_id={order.eater_id} and foodmenu_id={order.food_menu_id}"
                ),
            )
        counts[order.food_menu_id] = counts.get(order.food_menu_id, 0) + 1
        consumed[order.eater_id] = order.food_menu_id
    return counts


def sort_items_by_count_desc(
    counts: Mapping[int, int], tie_break: TieBreak = TieBreak.FIRST_SEEN
) -> list[int]:
    # sorted() is stable, so FIRST_SEEN keeps the mapping's insertion order on ties
    if tie_break is TieBreak.MENU_ID:
        return sorted(counts, key=lambda menu_id: (-counts[menu_id], menu_id))
    return sorted(counts, key=lambda menu_id: -counts[menu_id])
