"""
Inventory card models.

InventoryCard is a row of owned stock as the store hands it over.
ImportLine and FilteredCard are transient: they live for a single
reconciliation call and are never persisted by the engine.
"""

from dataclasses import dataclass
from decimal import Decimal

IdentityKey = tuple[str, str, str | None, str, int, bool]


@dataclass(frozen=True, slots=True)
class InventoryCard:
    """
    A row of owned stock.

    Attributes:
        id: Store-assigned identity (0 until persisted)
        name: Card name as stored, split cards as "Front // Back"
        expansion_name: Expansion the printing belongs to
        language: Printing language
        card_number: Collector number within the expansion
        quantity: Total copies owned
        in_use: Copies reserved elsewhere (e.g. committed to a deck)
        foil: Whether the printing is foil
        color_identity: Color identity letters (e.g. "BR")
        type_line: Full type line, None until backfilled from the catalog
        cmc: Mana value
        image_uri: Card image location
        is_commander: Whether the card can lead a commander deck
    """

    name: str
    quantity: int = 0
    id: int = 0
    expansion_name: str | None = None
    language: str = ""
    card_number: str = ""
    in_use: int = 0
    foil: bool = False
    color_identity: str | None = None
    type_line: str | None = None
    cmc: Decimal | None = None
    image_uri: str | None = None
    is_commander: bool | None = None

    @property
    def available(self) -> int:
        """Copies not reserved. Negative when in_use exceeds quantity."""
        return self.quantity - self.in_use

    @property
    def identity_key(self) -> IdentityKey:
        """Composite key shared by rows that describe the same stock."""
        return (
            self.name,
            self.language,
            self.expansion_name,
            self.card_number,
            self.quantity,
            self.foil,
        )


@dataclass(frozen=True, slots=True)
class ImportLine:
    """
    A parsed entry from a want-list or an import file.

    quantity is the requested amount for want-lists and the owned
    amount for imports.
    """

    name: str
    quantity: int
    expansion_name: str | None = None
    language: str | None = None
    card_number: str | None = None
    foil: bool | None = None


@dataclass(frozen=True, slots=True)
class FilteredCard:
    """A reconciliation result row."""

    name: str
    quantity: int
