"""Composition root — wires the JSON store to the warehouse manager.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import click

from warehouse.application.warehouse_manager import WarehouseManager
from warehouse.config import get_settings
from warehouse.infrastructure.persistence.json_inventory_store import (
    JsonInventoryStore,
)


def inventory_store() -> JsonInventoryStore:
    return JsonInventoryStore(get_settings().data_file)


def load_manager(store: JsonInventoryStore) -> WarehouseManager:
    """Build a manager holding everything currently in *store*."""
    manager = WarehouseManager(echo=click.echo)
    manager.load_items(store.load())
    return manager


def save_manager(store: JsonInventoryStore, manager: WarehouseManager) -> None:
    store.save(manager.all_items())
