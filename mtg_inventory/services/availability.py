"""
Want-list availability reconciliation.

Splits a want-list into cards the inventory can cover and cards that
are missing or short.

Matching rules:
- Names match exactly and case-sensitively against the stored name.
- Only the FIRST inventory row carrying a name is considered, even when
  several printings share it. Quantities are not summed across rows.
- A name with no inventory row is reported missing with quantity 1,
  whatever was requested.
- A short row is reported missing with the signed deficit
  `requested - available`. Negative availability (in_use > quantity)
  inflates the deficit; it is never clamped.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from mtg_inventory.models.card import FilteredCard, ImportLine, InventoryCard

# Reported for want-list names the inventory has never seen
UNKNOWN_CARD_QUANTITY = 1


@dataclass
class WantListResult:
    """Outcome of reconciling a want-list against inventory."""

    found: list[FilteredCard] = field(default_factory=list)
    """Lines fully covered by available stock, with the requested quantity."""

    missing: list[FilteredCard] = field(default_factory=list)
    """Lines not covered, with the quantity still needed."""


def _first_rows_by_name(inventory: Iterable[InventoryCard]) -> dict[str, InventoryCard]:
    first: dict[str, InventoryCard] = {}
    for card in inventory:
        first.setdefault(card.name, card)
    return first


def _sorted_by_name(cards: list[FilteredCard]) -> list[FilteredCard]:
    return sorted(cards, key=lambda card: card.name)


def reconcile_want_list(
    want_list: Sequence[ImportLine] | None,
    inventory: Sequence[InventoryCard],
) -> WantListResult:
    """
    Reconcile a want-list against an inventory snapshot.

    Each line lands in exactly one of `found` or `missing`. Both lists
    are sorted by name (ordinal comparison).

    Args:
        want_list: Requested cards; None or empty yields an empty result
        inventory: Inventory snapshot in store iteration order

    Returns:
        WantListResult with found and missing cards.
    """
    result = WantListResult()
    if not want_list:
        return result

    first_rows = _first_rows_by_name(inventory)

    for line in want_list:
        row = first_rows.get(line.name)
        if row is None:
            result.missing.append(FilteredCard(name=line.name, quantity=UNKNOWN_CARD_QUANTITY))
        elif line.quantity > row.available:
            result.missing.append(
                FilteredCard(name=line.name, quantity=line.quantity - row.available)
            )
        else:
            result.found.append(FilteredCard(name=line.name, quantity=line.quantity))

    result.found = _sorted_by_name(result.found)
    result.missing = _sorted_by_name(result.missing)
    return result


def find_missing_cards(
    want_list: Sequence[ImportLine] | None,
    inventory: Sequence[InventoryCard],
) -> list[FilteredCard]:
    """Return only the missing half of a want-list reconciliation."""
    return reconcile_want_list(want_list, inventory).missing


def find_found_cards(
    want_list: Sequence[ImportLine] | None,
    inventory: Sequence[InventoryCard],
) -> list[FilteredCard]:
    """Return only the found half of a want-list reconciliation."""
    return reconcile_want_list(want_list, inventory).found
