"""JSON-file-backed storage for a warehouse's item set.

Repositories are monomorphic, so the file holds one flat array with a
``kind`` tag per record; the tag picks the variant on the way back in.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

import structlog

from warehouse.domain.exceptions import SerializationError
from warehouse.domain.model.items import ElectronicItem, GroceryItem, InventoryItem

logger = structlog.get_logger(__name__)


class JsonInventoryStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- File interface -------------------------------------------------------

    def load(self) -> list[InventoryItem]:
        """Read every stored item; a missing file means an empty warehouse."""
        if not self._file_path.exists():
            logger.info("data_file_missing", path=str(self._file_path))
            return []
        items = self.loads(self._file_path.read_bytes())
        logger.debug("items_loaded", path=str(self._file_path), count=len(items))
        return items

    def save(self, items: Iterable[InventoryItem]) -> None:
        data = self.dumps(items)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_bytes(data)
        logger.debug("items_saved", path=str(self._file_path))

    # --- Byte interface -------------------------------------------------------

    @classmethod
    def dumps(cls, items: Iterable[InventoryItem]) -> bytes:
        records = [cls._to_raw(item) for item in items]
        return (json.dumps(records, indent=2) + "\n").encode("utf-8")

    @classmethod
    def loads(cls, data: bytes) -> list[InventoryItem]:
        try:
            records = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(f"Inventory data is not valid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise SerializationError("Inventory data must be a JSON array")
        return [cls._to_domain(raw) for raw in records]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        if isinstance(item, ElectronicItem):
            return {
                "kind": item.kind,
                "id": item.id,
                "name": item.name,
                "quantity": item.quantity,
                "brand": item.brand,
                "warranty_months": item.warranty_months,
            }
        if isinstance(item, GroceryItem):
            return {
                "kind": item.kind,
                "id": item.id,
                "name": item.name,
                "quantity": item.quantity,
                "expiry_date": item.expiry_date.isoformat(),
            }
        raise SerializationError(f"Cannot serialize {type(item).__name__}")

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        try:
            kind = raw["kind"]
            if kind == ElectronicItem.kind:
                return ElectronicItem(
                    id=raw["id"],
                    name=raw["name"],
                    quantity=raw["quantity"],
                    brand=raw["brand"],
                    warranty_months=raw["warranty_months"],
                )
            if kind == GroceryItem.kind:
                return GroceryItem(
                    id=raw["id"],
                    name=raw["name"],
                    quantity=raw["quantity"],
                    expiry_date=datetime.fromisoformat(raw["expiry_date"]),
                )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed inventory record {raw!r}") from exc
        raise SerializationError(f"Unknown item kind {kind!r}")
