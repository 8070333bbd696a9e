"""Domain-level exceptions.

All repository and ingest failures are expressed as subclasses of
DomainException so the manager and CLI layers can catch them uniformly
and display user-friendly messages.  Each concrete error carries the
offending value so callers can discriminate without parsing messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An item was constructed in violation of the ingest contract."""


class DuplicateItemError(DomainException):
    """An item with the same ID already exists in the repository."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(DomainException):
    """No item with the requested ID exists in the repository."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


class InvalidQuantityError(DomainException):
    """A quantity update would make stock negative."""

    def __init__(self, quantity: int) -> None:
        super().__init__(f"Quantity cannot be negative (got {quantity}).")
        self.quantity = quantity


class SerializationError(DomainException):
    """Persisted inventory data could not be encoded or decoded."""
