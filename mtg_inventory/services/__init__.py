"""
Inventory services.

Pure reconciliation components. Each works on an in-memory snapshot and
returns derived results; committing them is up to the caller.
"""

from mtg_inventory.services.availability import (
    WantListResult,
    find_found_cards,
    find_missing_cards,
    reconcile_want_list,
)
from mtg_inventory.services.duplicates import find_duplicates
from mtg_inventory.services.import_diff import find_new_entries
from mtg_inventory.services.pagination import InventoryPage, paginate
from mtg_inventory.services.stock_pruner import find_stale_rows, find_unmatched_lines

__all__ = [
    "InventoryPage",
    "WantListResult",
    "find_duplicates",
    "find_found_cards",
    "find_missing_cards",
    "find_new_entries",
    "find_stale_rows",
    "find_unmatched_lines",
    "paginate",
    "reconcile_want_list",
]
