"""
Duplicate inventory row detection.

Rows sharing the full identity key (name, language, expansion, card
number, quantity, foil) describe the same stock. The first row of each
cluster in store iteration order is kept; the others are redundant.
"""

from collections.abc import Sequence

from mtg_inventory.models.card import IdentityKey, InventoryCard


def find_duplicates(inventory: Sequence[InventoryCard]) -> list[InventoryCard]:
    """
    Return the redundant rows of every duplicate cluster.

    Clusters appear in the order their first row was seen; within a
    cluster, rows keep snapshot order. Removing the returned rows and
    running again yields an empty list.
    """
    clusters: dict[IdentityKey, list[InventoryCard]] = {}
    for card in inventory:
        clusters.setdefault(card.identity_key, []).append(card)

    duplicates: list[InventoryCard] = []
    for members in clusters.values():
        duplicates.extend(members[1:])
    return duplicates
