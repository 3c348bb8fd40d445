from mtg_inventory.models.card import FilteredCard, IdentityKey, ImportLine, InventoryCard
from mtg_inventory.models.card_filter import CardFilter
from mtg_inventory.models.failure import (
    CardNotFoundError,
    FailureKind,
    InvalidPageRequestError,
    KnownError,
)

__all__ = [
    "CardFilter",
    "CardNotFoundError",
    "FailureKind",
    "FilteredCard",
    "IdentityKey",
    "ImportLine",
    "InvalidPageRequestError",
    "InventoryCard",
    "KnownError",
]
