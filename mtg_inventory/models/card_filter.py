"""
Listing filter for inventory pages.

Every predicate is optional. A field left as None (or sent as a blank
string) does not constrain the result.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from mtg_inventory.models.card import InventoryCard


class CardFilter(BaseModel):
    """Caller-supplied predicates, ANDed together."""

    name: str | None = Field(
        default=None,
        description="Case-insensitive substring of the card name",
    )
    color_identity: str | None = Field(
        default=None,
        description="Exact color identity, case-insensitive",
    )
    type_line: str | None = Field(
        default=None,
        description="Exact type line, case-insensitive",
    )
    is_commander: bool | None = None
    cmc: Decimal | None = None

    @field_validator("name", "color_identity", "type_line", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def matches(self, card: InventoryCard) -> bool:
        """Check whether a card satisfies every set predicate."""
        if self.name is not None and self.name.lower() not in card.name.lower():
            return False

        if self.color_identity is not None and not _equals_ignore_case(
            card.color_identity, self.color_identity
        ):
            return False

        if self.type_line is not None and not _equals_ignore_case(
            card.type_line, self.type_line
        ):
            return False

        if self.is_commander is not None and card.is_commander != self.is_commander:
            return False

        if self.cmc is not None and card.cmc != self.cmc:
            return False

        return True


def _equals_ignore_case(value: str | None, expected: str) -> bool:
    return value is not None and value.lower() == expected.lower()
