"""
Inventory store operations.

Async reads and batch writes against the inventory table. Each write
call flushes once; committing is left to the session owner. Store errors
propagate unchanged.
"""

from collections.abc import Sequence
from dataclasses import fields

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mtg_inventory.models.card import InventoryCard
from mtg_inventory.models.card_filter import CardFilter
from mtg_inventory.models.db import InventoryCardDB
from mtg_inventory.models.failure import CardNotFoundError
from mtg_inventory.services.pagination import InventoryPage, build_page, validate_page_request

CARD_FIELDS = tuple(f.name for f in fields(InventoryCard))

# Always selected so projected rows stay addressable
REQUIRED_FIELDS = ("id", "name")

# Fields written back by update_many; id is the lookup key
_WRITABLE_FIELDS = tuple(name for name in CARD_FIELDS if name != "id")


def card_to_model(row: InventoryCardDB) -> InventoryCard:
    """Convert a database row to a domain model."""
    return InventoryCard(**{name: getattr(row, name) for name in CARD_FIELDS})


def model_to_card_db(card: InventoryCard) -> InventoryCardDB:
    """Build a new database row from a domain model. The id is store-assigned."""
    return InventoryCardDB(**{name: getattr(card, name) for name in _WRITABLE_FIELDS})


# --- Reads ---


async def fetch_all(
    session: AsyncSession, columns: Sequence[str] | None = None
) -> list[InventoryCard]:
    """
    Fetch the full inventory snapshot ordered by identity.

    Args:
        session: Database session
        columns: Optional projection. id and name are always included;
            fields left out come back as InventoryCard defaults (quantity 0).

    Raises:
        ValueError: a projected column is not an inventory field
    """
    if columns is None:
        result = await session.execute(select(InventoryCardDB).order_by(InventoryCardDB.id))
        return [card_to_model(row) for row in result.scalars().all()]

    unknown = set(columns) - set(CARD_FIELDS)
    if unknown:
        msg = f"Unknown inventory columns: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    selected = dict.fromkeys([*REQUIRED_FIELDS, *columns])
    result = await session.execute(
        select(*[getattr(InventoryCardDB, name) for name in selected]).order_by(
            InventoryCardDB.id
        )
    )
    return [InventoryCard(**row) for row in result.mappings().all()]


async def get_card(session: AsyncSession, card_id: int) -> InventoryCard:
    """
    Get one inventory row by identity.

    Raises CardNotFoundError if no such row exists.
    """
    row = await session.get(InventoryCardDB, card_id)
    if row is None:
        raise CardNotFoundError(card_id)
    return card_to_model(row)


async def fetch_missing_sync(session: AsyncSession) -> list[InventoryCard]:
    """Fetch rows still waiting for catalog backfill (no type line yet)."""
    result = await session.execute(
        select(InventoryCardDB)
        .where(InventoryCardDB.type_line.is_(None))
        .order_by(InventoryCardDB.id)
    )
    return [card_to_model(row) for row in result.scalars().all()]


def _filter_clauses(card_filter: CardFilter) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []
    if card_filter.name is not None:
        clauses.append(
            func.lower(InventoryCardDB.name).contains(card_filter.name.lower(), autoescape=True)
        )
    if card_filter.color_identity is not None:
        clauses.append(
            func.lower(InventoryCardDB.color_identity) == card_filter.color_identity.lower()
        )
    if card_filter.type_line is not None:
        clauses.append(func.lower(InventoryCardDB.type_line) == card_filter.type_line.lower())
    if card_filter.is_commander is not None:
        clauses.append(InventoryCardDB.is_commander == card_filter.is_commander)
    if card_filter.cmc is not None:
        clauses.append(InventoryCardDB.cmc == card_filter.cmc)
    return clauses


async def fetch_page(
    session: AsyncSession,
    cursor: int,
    page_size: int,
    card_filter: CardFilter | None = None,
) -> InventoryPage:
    """
    Fetch one keyset page straight from the store.

    Same contract as services.pagination.paginate, evaluated in SQL so
    only the requested rows are loaded.

    Text filters fold case with the backend's lower(). PostgreSQL folds
    per the database locale; SQLite folds ASCII letters only, so a filter
    such as "éowyn" will not match "Éowyn" there while the in-memory
    paginator (str.lower) does. The two paths agree on ASCII text.
    """
    validate_page_request(cursor, page_size)
    clauses = _filter_clauses(card_filter or CardFilter())

    result = await session.execute(
        select(InventoryCardDB)
        .where(InventoryCardDB.id > cursor, *clauses)
        .order_by(InventoryCardDB.id)
        .limit(page_size)
    )
    return build_page([card_to_model(row) for row in result.scalars().all()])


# --- Writes ---


async def insert_many(
    session: AsyncSession, cards: Sequence[InventoryCard]
) -> list[InventoryCard]:
    """
    Insert new inventory rows.

    Returns the inserted cards carrying their store-assigned ids.
    """
    rows = [model_to_card_db(card) for card in cards]
    session.add_all(rows)
    await session.flush()
    return [card_to_model(row) for row in rows]


async def update_many(session: AsyncSession, cards: Sequence[InventoryCard]) -> None:
    """
    Overwrite existing rows with the given values, matched by id.

    Raises CardNotFoundError if any id is unknown.
    """
    for card in cards:
        row = await session.get(InventoryCardDB, card.id)
        if row is None:
            raise CardNotFoundError(card.id)
        for name in _WRITABLE_FIELDS:
            setattr(row, name, getattr(card, name))

    await session.flush()


async def remove_many(session: AsyncSession, cards: Sequence[InventoryCard]) -> int:
    """
    Delete rows by id.

    Returns the number of deleted records.
    """
    ids = [card.id for card in cards]
    if not ids:
        return 0

    result = await session.execute(delete(InventoryCardDB).where(InventoryCardDB.id.in_(ids)))
    # rowcount is available on DELETE results; type stubs incomplete for async
    return int(result.rowcount)  # type: ignore[attr-defined]
