"""
Stale stock detection against a canonical import.

A canonical import is the latest full list of owned cards. Any inventory
row without an exact counterpart in it (same name and expansion after
trim + uppercase, same quantity) is stale. A quantity off by one is
enough to make a row stale.
"""

from collections.abc import Iterable, Sequence

from mtg_inventory.models.card import ImportLine, InventoryCard
from mtg_inventory.services.card_names import upper_name

StockKey = tuple[str | None, str | None, int]


def _stock_key(name: str, expansion_name: str | None, quantity: int) -> StockKey:
    return (upper_name(name), upper_name(expansion_name), quantity)


def _line_keys(lines: Iterable[ImportLine]) -> set[StockKey]:
    return {_stock_key(line.name, line.expansion_name, line.quantity) for line in lines}


def _card_keys(inventory: Iterable[InventoryCard]) -> set[StockKey]:
    return {_stock_key(card.name, card.expansion_name, card.quantity) for card in inventory}


def find_stale_rows(
    canonical: Sequence[ImportLine],
    inventory: Sequence[InventoryCard],
) -> list[InventoryCard]:
    """
    Return inventory rows no canonical entry accounts for.

    Normalization is used for comparison only; returned rows are the
    original snapshot objects, in snapshot order.
    """
    canonical_keys = _line_keys(canonical)
    return [
        card
        for card in inventory
        if _stock_key(card.name, card.expansion_name, card.quantity) not in canonical_keys
    ]


def find_unmatched_lines(
    lines: Sequence[ImportLine],
    inventory: Sequence[InventoryCard],
) -> list[ImportLine]:
    """
    Return import lines with no exact inventory row.

    The mirror of find_stale_rows, using the same name, expansion and
    quantity matching. Lines keep batch order.
    """
    inventory_keys = _card_keys(inventory)
    return [
        line
        for line in lines
        if _stock_key(line.name, line.expansion_name, line.quantity) not in inventory_keys
    ]
