from mtg_inventory.db.database import async_session_factory, session_scope
from mtg_inventory.db.operations import (
    card_to_model,
    fetch_all,
    fetch_missing_sync,
    fetch_page,
    get_card,
    insert_many,
    model_to_card_db,
    remove_many,
    update_many,
)

__all__ = [
    "async_session_factory",
    "card_to_model",
    "fetch_all",
    "fetch_missing_sync",
    "fetch_page",
    "get_card",
    "insert_many",
    "model_to_card_db",
    "remove_many",
    "session_scope",
    "update_many",
]
