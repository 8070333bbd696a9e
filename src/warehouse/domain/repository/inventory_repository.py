"""Generic in-memory repository for inventory items.

One implementation serves every item variant; the manager creates one
instance per variant.  The repository never catches its own errors —
every rule violation is raised to the caller.

Not thread-safe.  A multi-threaded host must hold one lock per
repository instance around each call.
"""

from __future__ import annotations

from typing import Generic, TypeVar

import structlog

from warehouse.domain.exceptions import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from warehouse.domain.model.items import InventoryItem

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=InventoryItem)


class InventoryRepository(Generic[T]):
    """Keyed, duplicate-free store for one item variant.

    Invariants:
    - at most one item per ID
    - a stored item's ``quantity`` is never negative
    """

    def __init__(self, items: list[T] | None = None) -> None:
        self._store: dict[int, T] = {}
        for item in items or []:
            self.add(item)

    def add(self, item: T) -> None:
        """Insert a new item.

        Raises DuplicateItemError if the ID is already taken; the stored
        item is left untouched.
        """
        if item.id in self._store:
            raise DuplicateItemError(item.id)
        self._store[item.id] = item
        logger.debug("item_added", kind=item.kind, item_id=item.id, name=item.name)

    def get_by_id(self, item_id: int) -> T:
        try:
            return self._store[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._store:
            raise ItemNotFoundError(item_id)
        del self._store[item_id]
        logger.debug("item_removed", item_id=item_id)

    def list_all(self) -> list[T]:
        """Return a snapshot of every stored item, in insertion order."""
        return list(self._store.values())

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Set the stock level of an existing item.

        The quantity is checked before the ID is resolved, so a negative
        value raises InvalidQuantityError even for an unknown ID.

        The stored item is replaced by ``item.with_quantity(new_quantity)``;
        references obtained from earlier ``get_by_id`` or ``list_all`` calls
        are not updated and keep the old quantity.
        """
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)

        item = self.get_by_id(item_id)
        self._store[item_id] = item.with_quantity(new_quantity)
        logger.debug(
            "quantity_updated",
            item_id=item_id,
            old_quantity=item.quantity,
            new_quantity=new_quantity,
        )

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._store
