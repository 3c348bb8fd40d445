"""
Scheduled job to collapse duplicate inventory rows.

Removes rows that share the full identity key with an earlier row.
Can be run as a standalone script or called from a scheduler.
"""

import asyncio
import logging

from mtg_inventory.db.database import session_scope
from mtg_inventory.services.inventory import remove_duplicates

logger = logging.getLogger(__name__)


async def run_dedupe() -> int:
    """
    Remove duplicate rows in one committed unit of work.

    Store errors roll the removal back and propagate.

    Returns:
        Number of rows removed
    """
    logger.info("Scanning inventory for duplicate rows...")

    async with session_scope() as session:
        removed = await remove_duplicates(session)

    logger.info("Dedupe complete. Rows removed: %d", len(removed))
    return len(removed)


def main() -> None:
    """CLI entry point for running the dedupe job."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_dedupe())


if __name__ == "__main__":
    main()
