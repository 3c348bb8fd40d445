"""
Keyset pagination over a filtered inventory view.

Pages are addressed by the last identity seen rather than an offset, so
the cost of a page does not depend on how many pages came before it.
Cursor 0 means "start of collection" on the way in and "no more rows"
on the way out; an empty page tells the two apart.
"""

import heapq
from collections.abc import Sequence
from dataclasses import dataclass, field

from mtg_inventory.models.card import InventoryCard
from mtg_inventory.models.card_filter import CardFilter
from mtg_inventory.models.failure import InvalidPageRequestError

END_OF_COLLECTION = 0


@dataclass
class InventoryPage:
    """One page of inventory rows."""

    items: list[InventoryCard] = field(default_factory=list)
    next_cursor: int = END_OF_COLLECTION

    @property
    def is_empty(self) -> bool:
        return not self.items


def validate_page_request(cursor: int, page_size: int) -> None:
    """Raise InvalidPageRequestError for a negative cursor or a page size below 1."""
    if cursor < 0:
        raise InvalidPageRequestError(
            "Cursor must not be negative",
            detail=f"cursor={cursor}",
        )
    if page_size < 1:
        raise InvalidPageRequestError(
            "Page size must be at least 1",
            detail=f"page_size={page_size}",
        )


def build_page(items: list[InventoryCard]) -> InventoryPage:
    """Wrap rows already in page order, deriving the next cursor."""
    if not items:
        return InventoryPage()
    return InventoryPage(items=items, next_cursor=items[-1].id)


def paginate(
    inventory: Sequence[InventoryCard],
    cursor: int,
    page_size: int,
    card_filter: CardFilter | None = None,
) -> InventoryPage:
    """
    Return the page of filtered rows following `cursor`.

    Args:
        inventory: Inventory snapshot, any order
        cursor: Identity of the last row already seen, 0 to start
        page_size: Maximum rows on the page
        card_filter: Optional predicates; None matches everything

    Returns:
        InventoryPage ordered by ascending identity.

    Raises:
        InvalidPageRequestError: cursor < 0 or page_size < 1
    """
    validate_page_request(cursor, page_size)
    card_filter = card_filter or CardFilter()

    candidates = (card for card in inventory if card.id > cursor and card_filter.matches(card))
    return build_page(heapq.nsmallest(page_size, candidates, key=lambda card: card.id))
