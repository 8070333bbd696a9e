"""CLI commands for warehouse inventory.

Each command loads the data file into a fresh manager, operates on it and
writes it back.
"""

from __future__ import annotations

from datetime import datetime

import click

from warehouse.application.warehouse_manager import WarehouseManager
from warehouse.domain.exceptions import DomainException
from warehouse.domain.model.items import ElectronicItem, GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.bootstrap import inventory_store, load_manager, save_manager
from warehouse.infrastructure.persistence.json_inventory_store import (
    JsonInventoryStore,
)

KINDS = (ElectronicItem.kind, GroceryItem.kind)


def _repository_for(manager: WarehouseManager, kind: str) -> InventoryRepository:
    if kind == ElectronicItem.kind:
        return manager.electronics
    return manager.groceries


def _open() -> tuple[JsonInventoryStore, WarehouseManager]:
    store = inventory_store()
    try:
        manager = load_manager(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    return store, manager


@click.command("seed")
def inventory_seed() -> None:
    """Load the sample data set into the data file."""
    store, manager = _open()

    try:
        manager.seed_sample_data()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_manager(store, manager)
    click.echo(f"Sample data written to {store.file_path}")


@click.command("list")
@click.option("--kind", type=click.Choice(KINDS), default=None, help="Only list one kind.")
def inventory_list(kind: str | None) -> None:
    """List stored items."""
    _, manager = _open()

    kinds = [kind] if kind else list(KINDS)
    for i, k in enumerate(kinds):
        if len(kinds) > 1:
            if i:
                click.echo()
            click.echo(f"=== {k.capitalize()} Items ===")
        manager.print_all(_repository_for(manager, k))


@click.command("add-electronic")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--brand", required=True, help="Manufacturer brand.")
@click.option("--warranty", required=True, type=int, help="Warranty in months.")
def inventory_add_electronic(
    item_id: int, name: str, quantity: int, brand: str, warranty: int
) -> None:
    """Add an electronic item."""
    store, manager = _open()

    try:
        item = ElectronicItem(item_id, name.strip(), quantity, brand.strip(), warranty)
        manager.electronics.add(item)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_manager(store, manager)
    click.echo(f"Added {item}")


@click.command("add-grocery")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option(
    "--expires", required=True, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Expiry date (YYYY-MM-DD).",
)
def inventory_add_grocery(item_id: int, name: str, quantity: int, expires: datetime) -> None:
    """Add a grocery item."""
    store, manager = _open()

    try:
        item = GroceryItem(item_id, name.strip(), quantity, expires)
        manager.groceries.add(item)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_manager(store, manager)
    click.echo(f"Added {item}")


@click.command("restock")
@click.option("--kind", required=True, type=click.Choice(KINDS), help="Item kind.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--amount", required=True, type=int, help="Units to add (may be negative).")
def inventory_restock(kind: str, item_id: int, amount: int) -> None:
    """Increase an item's stock by AMOUNT."""
    store, manager = _open()

    if manager.increase_stock(_repository_for(manager, kind), item_id, amount):
        save_manager(store, manager)


@click.command("set-quantity")
@click.option("--kind", required=True, type=click.Choice(KINDS), help="Item kind.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def inventory_set_quantity(kind: str, item_id: int, quantity: int) -> None:
    """Set an item's stock level."""
    store, manager = _open()

    try:
        _repository_for(manager, kind).update_quantity(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_manager(store, manager)
    click.echo(f"Quantity for {kind} #{item_id} set to {quantity}")


@click.command("remove")
@click.option("--kind", required=True, type=click.Choice(KINDS), help="Item kind.")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
def inventory_remove(kind: str, item_id: int) -> None:
    """Remove an item."""
    store, manager = _open()

    if manager.remove_by_id(_repository_for(manager, kind), item_id):
        save_manager(store, manager)


@click.command("demo")
def inventory_demo() -> None:
    """Run the in-memory demonstration (the data file is not touched)."""
    manager = WarehouseManager(echo=click.echo)
    manager.seed_sample_data()
    manager.run_demo()
