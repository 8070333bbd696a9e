"""Application service: Warehouse Manager.

Owns one repository per item variant and offers bulk operations that
work on any repository through the identity capability alone.

The manager is the recovery boundary: bulk operations catch every
DomainException, log it, report it and carry on.  A single bad entry
never aborts a batch.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Iterable, TypeVar

import structlog

from warehouse.domain.exceptions import DomainException
from warehouse.domain.model.items import ElectronicItem, GroceryItem, InventoryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=InventoryItem)


class WarehouseManager:

    def __init__(
        self,
        electronics: InventoryRepository[ElectronicItem] | None = None,
        groceries: InventoryRepository[GroceryItem] | None = None,
        render: Callable[[InventoryItem], str] = str,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._electronics = electronics if electronics is not None else InventoryRepository()
        self._groceries = groceries if groceries is not None else InventoryRepository()
        self._render = render
        self._echo = echo

    @property
    def electronics(self) -> InventoryRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> InventoryRepository[GroceryItem]:
        return self._groceries

    # --- Seeding & loading ----------------------------------------------------

    def seed_sample_data(self, now: datetime | None = None) -> None:
        """Populate both repositories with the demonstration data set.

        *now* anchors the grocery expiry dates; defaults to the current time.
        """
        now = now or datetime.now()

        self._electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        self._electronics.add(ElectronicItem(2, "Smartphone", 25, "Samsung", 12))
        self._electronics.add(ElectronicItem(3, "Headphones", 50, "Sony", 6))

        self._groceries.add(GroceryItem(1, "Milk", 20, now + timedelta(days=10)))
        self._groceries.add(GroceryItem(2, "Bread", 15, now + timedelta(days=3)))
        self._groceries.add(GroceryItem(3, "Apples", 30, now + timedelta(days=7)))

        logger.info(
            "sample_data_seeded",
            electronics=len(self._electronics),
            groceries=len(self._groceries),
        )

    def load_items(self, items: Iterable[InventoryItem]) -> None:
        """Route each item to the repository for its variant.

        Raises DuplicateItemError as ``add`` does; the caller decides
        whether a clash with existing stock is fatal.
        """
        for item in items:
            if isinstance(item, ElectronicItem):
                self._electronics.add(item)
            elif isinstance(item, GroceryItem):
                self._groceries.add(item)
            else:
                raise TypeError(f"Unsupported inventory item: {type(item).__name__}")

    def all_items(self) -> list[InventoryItem]:
        """Every stored item, electronics first."""
        return [*self._electronics.list_all(), *self._groceries.list_all()]

    # --- Bulk operations ------------------------------------------------------

    def print_all(self, repository: InventoryRepository[T]) -> list[str]:
        """Render and echo every item; returns the rendered lines."""
        lines = [self._render(item) for item in repository.list_all()]
        if not lines:
            self._echo("No items found.")
            return lines
        for line in lines:
            self._echo(line)
        return lines

    def increase_stock(
        self, repository: InventoryRepository[T], item_id: int, delta: int
    ) -> bool:
        """Add *delta* to an item's stock.

        A negative *delta* is accepted; it fails only if the resulting
        total would be negative.  Returns False if the update was rejected.
        """
        try:
            item = repository.get_by_id(item_id)
            repository.update_quantity(item_id, item.quantity + delta)
            updated = repository.get_by_id(item_id)
        except DomainException as exc:
            self._report_failure("increase_stock_failed", exc, item_id=item_id, delta=delta)
            return False

        self._echo(
            f"Stock updated for item {updated.name}. New quantity: {updated.quantity}"
        )
        return True

    def remove_by_id(self, repository: InventoryRepository[T], item_id: int) -> bool:
        """Remove an item; returns False if it did not exist."""
        try:
            repository.remove(item_id)
        except DomainException as exc:
            self._report_failure("remove_failed", exc, item_id=item_id)
            return False

        self._echo(f"Item with ID {item_id} removed successfully.")
        return True

    # --- Demonstration --------------------------------------------------------

    def run_demo(self) -> None:
        """Walk through listing and each failure kind on seeded data."""
        self._echo("\n=== Grocery Items ===")
        self.print_all(self._groceries)

        self._echo("\n=== Electronic Items ===")
        self.print_all(self._electronics)

        self._echo("\n=== Testing Exceptions ===")

        try:
            self._electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12))
        except DomainException as exc:
            self._report_failure("add_failed", exc, item_id=1)

        self.remove_by_id(self._groceries, 99)

        try:
            self._electronics.update_quantity(2, -5)
        except DomainException as exc:
            self._report_failure("update_quantity_failed", exc, item_id=2)

        self._echo("\n=== End of Program ===")

    # --- Internal helpers -----------------------------------------------------

    def _report_failure(self, event: str, exc: DomainException, **context: object) -> None:
        logger.warning(event, error=type(exc).__name__, detail=str(exc), **context)
        self._echo(f"[Error] {exc}")
