# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Warehouse inventory app: electronics and groceries kept in separate
repositories, with stock increases and removals by ID.
"""

from __future__ import annotations

from typing import Any, TypeVar

from recordkeep.apps.base import ConsoleApp
from recordkeep.domain import KeyedRepository, KeyedRepositoryProtocol
from recordkeep.domain.entities import ElectronicItem, GroceryItem
from recordkeep.domain.protocols import Stocked

S = TypeVar("S", bound=Stocked)


class WarehouseManager(ConsoleApp):
    name = "warehouse"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.electronics: KeyedRepository[ElectronicItem] = KeyedRepository("Item")
        self.groceries: KeyedRepository[GroceryItem] = KeyedRepository("Item")

    def read_electronic_item(self) -> ElectronicItem:
        return ElectronicItem(
            id=self.console.integer("ID", minimum=0),
            name=self.console.text("Name"),
            quantity=self.console.integer("Quantity", minimum=0),
            brand=self.console.text("Brand"),
            warranty_months=self.console.integer("Warranty (months)", minimum=0),
        )

    def read_grocery_item(self) -> GroceryItem:
        return GroceryItem(
            id=self.console.integer("ID", minimum=0),
            name=self.console.text("Name"),
            quantity=self.console.integer("Quantity", minimum=0),
            expiry_date=self.console.date(
                "Expiry Date (yyyy-mm-dd)", self.settings.date_format
            ),
        )

    def seed_data(self) -> None:
        count = self.read_count("How many electronic items to add?")
        for i in range(count):
            self.out(f"\n--- Electronic Item {i + 1} ---")
            self.store(self.electronics, self.read_record(self.read_electronic_item))

        count = self.read_count("How many grocery items to add?")
        for i in range(count):
            self.out(f"\n--- Grocery Item {i + 1} ---")
            self.store(self.groceries, self.read_record(self.read_grocery_item))

    def increase_stock(
        self, repo: KeyedRepositoryProtocol[S], item_id: int, quantity: int
    ) -> bool:
        """Add ``quantity`` to an item's stock; a negative total is rejected."""
        result = repo.get_by_id(item_id).flat_map(
            lambda item: repo.update_quantity(item_id, item.quantity + quantity)
        )
        if self.announce(result, "Stock updated successfully."):
            self.logger.info(
                "Stock updated", id=item_id, quantity=result.unwrap().quantity
            )
            return True
        return False

    def remove_item(
        self, repo: KeyedRepositoryProtocol[S], item_id: int
    ) -> bool:
        return self.announce(repo.remove(item_id), "Item removed successfully.")

    def show_all(self) -> None:
        self.print_section("Electronics", self.electronics.get_all())
        self.print_section("Groceries", self.groceries.get_all())

    def _read_int(self, label: str) -> int:
        return self.console.until_valid(lambda: self.console.integer(label), self.report)

    def run(self) -> None:
        self.seed_data()
        self.show_all()

        item_id = self._read_int("\nEnter Electronic Item ID to increase stock")
        quantity = self._read_int("Enter quantity to add")
        self.increase_stock(self.electronics, item_id, quantity)

        item_id = self._read_int("\nEnter Grocery Item ID to remove")
        self.remove_item(self.groceries, item_id)

        self.show_all()
