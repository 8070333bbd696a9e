"""Integration tests for the WarehouseManager bulk operations."""

from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from warehouse.application.warehouse_manager import WarehouseManager
from warehouse.domain.exceptions import DuplicateItemError
from warehouse.domain.model.items import ElectronicItem, GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from tests.fakes import NOW, RecordingEcho, laptop, milk


def _setup():
    echo = RecordingEcho()
    manager = WarehouseManager(echo=echo)
    manager.seed_sample_data(now=NOW)
    return manager, echo


class TestSeedSampleData:

    def test_seeds_both_repositories(self):
        manager, _ = _setup()
        assert [i.name for i in manager.electronics.list_all()] == [
            "Laptop", "Smartphone", "Headphones",
        ]
        assert [i.name for i in manager.groceries.list_all()] == [
            "Milk", "Bread", "Apples",
        ]

    def test_expiry_dates_relative_to_now(self):
        manager, _ = _setup()
        assert manager.groceries.get_by_id(1).expiry_date == NOW + timedelta(days=10)
        assert manager.groceries.get_by_id(2).expiry_date == NOW + timedelta(days=3)
        assert manager.groceries.get_by_id(3).expiry_date == NOW + timedelta(days=7)

    def test_seeding_twice_rejected(self):
        manager, _ = _setup()
        with pytest.raises(DuplicateItemError):
            manager.seed_sample_data(now=NOW)


class TestPrintAll:

    def test_renders_every_item(self):
        manager, echo = _setup()
        lines = manager.print_all(manager.electronics)
        assert echo.lines == lines
        assert lines[0] == (
            "[Electronic] ID: 1, Name: Laptop, Brand: Dell, Qty: 10, Warranty: 24 months"
        )
        assert len(lines) == 3

    def test_empty_repository(self):
        echo = RecordingEcho()
        manager = WarehouseManager(echo=echo)
        assert manager.print_all(manager.groceries) == []
        assert echo.lines == ["No items found."]

    def test_default_echo_writes_to_stdout(self, capsys):
        manager = WarehouseManager()
        manager.print_all(manager.groceries)
        assert capsys.readouterr().out == "No items found.\n"

    def test_custom_renderer(self):
        echo = RecordingEcho()
        manager = WarehouseManager(render=lambda item: f"{item.id}:{item.name}", echo=echo)
        manager.seed_sample_data(now=NOW)
        manager.print_all(manager.groceries)
        assert echo.lines == ["1:Milk", "2:Bread", "3:Apples"]


class TestIncreaseStock:

    def test_increase(self):
        manager, echo = _setup()
        assert manager.increase_stock(manager.electronics, 1, 5) is True
        assert manager.electronics.get_by_id(1).quantity == 15
        assert echo.lines == ["Stock updated for item Laptop. New quantity: 15"]

    def test_works_on_any_repository(self):
        manager, _ = _setup()
        assert manager.increase_stock(manager.groceries, 2, 10) is True
        assert manager.groceries.get_by_id(2).quantity == 25

    def test_missing_item_reported_not_raised(self):
        manager, echo = _setup()
        with capture_logs() as logs:
            assert manager.increase_stock(manager.groceries, 99, 1) is False
        assert echo.errors == ["[Error] Item with ID 99 not found."]
        assert logs[-1]["event"] == "increase_stock_failed"
        assert logs[-1]["error"] == "ItemNotFoundError"
        assert logs[-1]["log_level"] == "warning"

    def test_negative_delta_allowed_within_stock(self):
        manager, _ = _setup()
        assert manager.increase_stock(manager.electronics, 1, -4) is True
        assert manager.electronics.get_by_id(1).quantity == 6

    def test_negative_delta_below_zero_rejected(self):
        manager, echo = _setup()
        assert manager.increase_stock(manager.electronics, 1, -11) is False
        assert manager.electronics.get_by_id(1).quantity == 10
        assert echo.errors == ["[Error] Quantity cannot be negative (got -1)."]

    def test_batch_continues_after_failure(self):
        manager, _ = _setup()
        results = [
            manager.increase_stock(manager.electronics, item_id, 1)
            for item_id in (1, 42, 3)
        ]
        assert results == [True, False, True]
        assert manager.electronics.get_by_id(3).quantity == 51


class TestRemoveById:

    def test_remove(self):
        manager, echo = _setup()
        assert manager.remove_by_id(manager.groceries, 2) is True
        assert 2 not in manager.groceries
        assert echo.lines == ["Item with ID 2 removed successfully."]

    def test_missing_item_reported_not_raised(self):
        manager, echo = _setup()
        assert manager.remove_by_id(manager.groceries, 99) is False
        assert echo.errors == ["[Error] Item with ID 99 not found."]
        assert len(manager.groceries) == 3


class TestLoadItems:

    def test_routes_by_variant(self):
        manager = WarehouseManager(echo=RecordingEcho())
        manager.load_items([laptop(), milk()])
        assert manager.electronics.list_all() == [laptop()]
        assert manager.groceries.list_all() == [milk()]

    def test_same_id_in_different_variants_allowed(self):
        manager = WarehouseManager(echo=RecordingEcho())
        manager.load_items([laptop(id=7), milk(id=7)])
        assert len(manager.all_items()) == 2

    def test_all_items_electronics_first(self):
        manager, _ = _setup()
        kinds = [type(item) for item in manager.all_items()]
        assert kinds == [ElectronicItem] * 3 + [GroceryItem] * 3

    def test_unsupported_item_rejected(self):
        manager = WarehouseManager(echo=RecordingEcho())
        with pytest.raises(TypeError, match="Unsupported"):
            manager.load_items([object()])

    def test_injected_repositories_are_used(self):
        electronics = InventoryRepository([laptop()])
        manager = WarehouseManager(electronics=electronics, echo=RecordingEcho())
        assert manager.electronics is electronics


class TestRunDemo:

    def test_reports_each_failure_and_finishes(self):
        manager, echo = _setup()
        manager.run_demo()

        assert echo.errors == [
            "[Error] Item with ID 1 already exists.",
            "[Error] Item with ID 99 not found.",
            "[Error] Quantity cannot be negative (got -5).",
        ]
        assert echo.lines[-1] == "\n=== End of Program ==="
        assert manager.electronics.get_by_id(1).name == "Laptop"
        assert manager.electronics.get_by_id(2).quantity == 25
