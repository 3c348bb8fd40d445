"""
Inventory workflows.

Ties the store to the pure reconciliation components: fetch a snapshot,
compute, then commit the result back through the store. Nothing here
retries or masks store errors, and nothing guards quantity or in_use
against concurrent writers.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from sqlalchemy.ext.asyncio import AsyncSession

from mtg_inventory.config import settings
from mtg_inventory.db.operations import (
    fetch_all,
    fetch_page,
    get_card,
    insert_many,
    remove_many,
    update_many,
)
from mtg_inventory.models.card import ImportLine, InventoryCard
from mtg_inventory.models.card_filter import CardFilter
from mtg_inventory.models.failure import FailureKind, KnownError
from mtg_inventory.services.availability import WantListResult, reconcile_want_list
from mtg_inventory.services.duplicates import find_duplicates
from mtg_inventory.services.import_diff import find_new_entries
from mtg_inventory.services.pagination import InventoryPage
from mtg_inventory.services.stock_pruner import find_stale_rows, find_unmatched_lines

logger = logging.getLogger(__name__)

# Fields the want-list reconciliation reads
WANT_LIST_COLUMNS = ("name", "quantity", "in_use")


@dataclass
class ImportSummary:
    """What an import changed in the store."""

    inserted: list[InventoryCard] = field(default_factory=list)
    pruned: list[InventoryCard] = field(default_factory=list)
    duplicates_removed: list[InventoryCard] = field(default_factory=list)


def line_to_card(line: ImportLine) -> InventoryCard:
    """Build an unsaved inventory row from an import line."""
    return InventoryCard(
        name=line.name.strip(),
        quantity=line.quantity,
        expansion_name=line.expansion_name,
        language=line.language or "",
        card_number=line.card_number or "",
        foil=bool(line.foil),
    )


async def compare_want_list(
    session: AsyncSession, want_list: Sequence[ImportLine] | None
) -> WantListResult:
    """Reconcile a want-list against current inventory."""
    if not want_list:
        return WantListResult()

    inventory = await fetch_all(session, columns=WANT_LIST_COLUMNS)
    result = reconcile_want_list(want_list, inventory)

    logger.info(
        "want_list_compared",
        extra={
            "requested_lines": len(want_list),
            "found_count": len(result.found),
            "missing_count": len(result.missing),
        },
    )
    return result


async def remove_duplicates(session: AsyncSession) -> list[InventoryCard]:
    """Delete redundant duplicate rows. Returns the rows removed."""
    inventory = await fetch_all(session)
    duplicates = find_duplicates(inventory)
    if duplicates:
        await remove_many(session, duplicates)
        logger.info(
            "inventory_duplicates_removed",
            extra={
                "removed_count": len(duplicates),
                "removed_card_names": [card.name for card in duplicates][:10],
            },
        )
    return duplicates


async def import_inventory(
    session: AsyncSession,
    lines: Sequence[ImportLine],
    *,
    remove_duplicate_rows: bool = True,
) -> ImportSummary:
    """
    Apply a canonical import to the store.

    Inserts the entries the import differ reports as new that also have
    no exact inventory row (name, expansion and quantity), then removes
    rows with no exact counterpart in `lines`. Optionally finishes by
    collapsing duplicate rows.

    An empty import is a no-op rather than a request to empty the store.
    """
    summary = ImportSummary()
    if not lines:
        return summary

    inventory = await fetch_all(session)

    # Lines already held as an exact row are never re-inserted
    to_insert = find_unmatched_lines(find_new_entries(lines, inventory), inventory)
    if to_insert:
        summary.inserted = await insert_many(session, [line_to_card(line) for line in to_insert])

    summary.pruned = find_stale_rows(lines, inventory)
    if summary.pruned:
        await remove_many(session, summary.pruned)

    if remove_duplicate_rows:
        summary.duplicates_removed = await remove_duplicates(session)

    logger.info(
        "inventory_imported",
        extra={
            "import_lines": len(lines),
            "inserted_count": len(summary.inserted),
            "pruned_count": len(summary.pruned),
            "duplicates_removed_count": len(summary.duplicates_removed),
        },
    )
    return summary


async def list_inventory(
    session: AsyncSession,
    cursor: int = 0,
    page_size: int | None = None,
    card_filter: CardFilter | None = None,
) -> InventoryPage:
    """
    List one page of inventory.

    page_size defaults to settings.default_page_size and is clamped to
    settings.max_page_size.
    """
    if page_size is None:
        page_size = settings.default_page_size
    page_size = min(page_size, settings.max_page_size)
    return await fetch_page(session, cursor, page_size, card_filter)


async def _adjust_in_use(session: AsyncSession, card_id: int, delta: int) -> InventoryCard:
    card = await get_card(session, card_id)
    updated = replace(card, in_use=card.in_use + delta)
    await update_many(session, [updated])
    return updated


async def reserve_cards(session: AsyncSession, card_id: int, amount: int) -> InventoryCard:
    """
    Mark `amount` copies of a row as in use.

    Availability is not checked: reserving past quantity drives
    `available` negative, which later surfaces as an inflated
    want-list deficit.
    """
    if amount < 1:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Reserved amount must be at least 1",
            detail=f"amount={amount}",
        )
    return await _adjust_in_use(session, card_id, amount)


async def release_cards(session: AsyncSession, card_id: int, amount: int) -> InventoryCard:
    """Return `amount` reserved copies of a row to available stock."""
    if amount < 1:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Released amount must be at least 1",
            detail=f"amount={amount}",
        )

    card = await get_card(session, card_id)
    if amount > card.in_use:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Cannot release {amount} copies of '{card.name}'",
            detail=f"in_use={card.in_use}",
        )
    return await _adjust_in_use(session, card_id, -amount)
