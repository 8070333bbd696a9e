"""Inventory items — the entities stored in a repository.

Every storable item satisfies the ``InventoryItem`` protocol: an integer
identity, a display name, a non-negative quantity and a way to produce a
copy of itself with a different quantity.  The concrete variants are
independent frozen dataclasses; they share the capability, not a base
class.

Items are immutable.  Quantity changes go through
``InventoryRepository.update_quantity``, which stores the copy returned
by ``with_quantity``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import ClassVar, Protocol, TypeVar

from warehouse.domain.exceptions import ValidationError

ItemT = TypeVar("ItemT", bound="InventoryItem")


class InventoryItem(Protocol):
    """Identity capability required by ``InventoryRepository``."""

    kind: ClassVar[str]

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...

    def with_quantity(self: ItemT, quantity: int) -> ItemT:
        """Return an equivalent item holding *quantity* units."""
        ...


def _require_int(value: object, label: str) -> None:
    # bool is an int subclass but never a meaningful ID, count or duration
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")


def _require_text(value: object, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")


def _validate_identity(item_id: int, name: str, quantity: int) -> None:
    _require_int(item_id, "Item ID")
    _require_text(name, "Item name")
    _require_int(quantity, "Quantity")
    if quantity < 0:
        raise ValidationError(f"Quantity cannot be negative, got {quantity}")


@dataclass(frozen=True)
class ElectronicItem:
    """A durable good with a brand and a warranty period."""

    kind: ClassVar[str] = "electronic"

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        _validate_identity(self.id, self.name, self.quantity)
        _require_text(self.brand, "Brand")
        _require_int(self.warranty_months, "Warranty")
        if self.warranty_months < 0:
            raise ValidationError(
                f"Warranty must be a non-negative number of months, "
                f"got {self.warranty_months}"
            )

    def with_quantity(self, quantity: int) -> ElectronicItem:
        return replace(self, quantity=quantity)

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Qty: {self.quantity}, Warranty: {self.warranty_months} months"
        )


@dataclass(frozen=True)
class GroceryItem:
    """A perishable good with an expiry timestamp."""

    kind: ClassVar[str] = "grocery"

    id: int
    name: str
    quantity: int
    expiry_date: datetime

    def __post_init__(self) -> None:
        _validate_identity(self.id, self.name, self.quantity)
        if not isinstance(self.expiry_date, datetime):
            raise ValidationError(
                f"Expiry date must be a datetime, got {type(self.expiry_date).__name__}"
            )

    def with_quantity(self, quantity: int) -> GroceryItem:
        return replace(self, quantity=quantity)

    def __str__(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, Name: {self.name}, Qty: {self.quantity}, "
            f"Expires: {self.expiry_date:%Y-%m-%d}"
        )
