"""Inventory reconciliation and deduplication for trading-card stock."""
