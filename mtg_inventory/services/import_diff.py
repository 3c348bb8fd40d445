"""
Import batch diffing.

Decides which entries of an incoming import batch are stock the
inventory does not already account for, so only those rows get inserted.

Two passes run over the batch:
1. Names are folded (trim + casefold). An entry whose folded name has no
   inventory row is new.
2. Every remaining entry is new unless some inventory row stores it as
   one face of a split or double-faced name ("Fire // Ice") with the
   same quantity.

The name -> quantity lookup needs the inventory quantity column. A
snapshot fetched with a projection that leaves quantity out makes every
summed quantity zero.
"""

import logging
from collections.abc import Sequence

from mtg_inventory.models.card import ImportLine, InventoryCard
from mtg_inventory.services.card_names import fold_name, is_split_face

logger = logging.getLogger(__name__)


def _quantity_by_name(inventory: Sequence[InventoryCard]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for card in inventory:
        key = fold_name(card.name)
        totals[key] = totals.get(key, 0) + card.quantity
    return totals


def _has_split_match(line: ImportLine, inventory: Sequence[InventoryCard]) -> bool:
    face = line.name.strip()
    return any(
        card.quantity == line.quantity and is_split_face(face, card.name) for card in inventory
    )


def find_new_entries(
    batch: Sequence[ImportLine],
    inventory: Sequence[InventoryCard],
    *,
    log: logging.Logger | None = None,
) -> list[ImportLine]:
    """
    Return the batch entries that represent new stock.

    Args:
        batch: Parsed import entries
        inventory: Inventory snapshot, quantity included
        log: Sink for the diagnostic count; defaults to this module's logger

    Returns:
        New entries in batch order, each at most once.
    """
    known_quantities = _quantity_by_name(inventory)
    flagged: set[int] = set()

    for index, line in enumerate(batch):
        key = fold_name(line.name)
        if key not in known_quantities:
            flagged.add(index)
        else:
            known_quantities[key] += line.quantity

    for index, line in enumerate(batch):
        if index in flagged:
            continue
        if not _has_split_match(line, inventory):
            flagged.add(index)

    new_entries = [line for index, line in enumerate(batch) if index in flagged]

    (log or logger).info(
        "import_diff_computed",
        extra={
            "inventory_rows": len(inventory),
            "new_entries": len(new_entries),
        },
    )
    return new_entries
