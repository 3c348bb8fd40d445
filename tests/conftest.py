from decimal import Decimal

import pytest

from mtg_inventory.models.card import InventoryCard


@pytest.fixture
def sample_inventory() -> list[InventoryCard]:
    """Small inventory snapshot with a split card and a reserved row."""
    return [
        InventoryCard(
            id=1,
            name="Lightning Bolt",
            quantity=4,
            in_use=1,
            expansion_name="Limited Edition Alpha",
            language="English",
            card_number="161",
            color_identity="R",
            type_line="Instant",
            cmc=Decimal("1"),
            is_commander=False,
        ),
        InventoryCard(
            id=2,
            name="Fire // Ice",
            quantity=2,
            expansion_name="Apocalypse",
            language="English",
            card_number="128",
            color_identity="UR",
            type_line="Instant // Instant",
            cmc=Decimal("4"),
            is_commander=False,
        ),
        InventoryCard(
            id=3,
            name="Sheoldred, the Apocalypse",
            quantity=1,
            expansion_name="Dominaria United",
            language="English",
            card_number="107",
            foil=True,
            color_identity="B",
            type_line="Legendary Creature — Phyrexian Praetor",
            cmc=Decimal("4"),
            is_commander=True,
        ),
        InventoryCard(
            id=4,
            name="Counterspell",
            quantity=3,
            in_use=3,
            expansion_name="Ice Age",
            language="English",
            card_number="64",
            color_identity="U",
            type_line="Instant",
            cmc=Decimal("2"),
            is_commander=False,
        ),
    ]
