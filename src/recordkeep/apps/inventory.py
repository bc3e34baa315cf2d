# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Inventory log app: records items with the time they were added and
round-trips the collection through a JSON file.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from recordkeep.apps.base import ConsoleApp
from recordkeep.domain import KeyedRepository
from recordkeep.domain.entities import InventoryRecord
from recordkeep.persistence import JsonCollectionStore


class InventoryApp(ConsoleApp):
    name = "inventory"

    def __init__(
        self,
        file_path: Path | str | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        path = self.settings.resolve_path(file_path or self.settings.inventory_file)
        self.items: KeyedRepository[InventoryRecord] = KeyedRepository("Item")
        self.store_file = JsonCollectionStore(path, InventoryRecord, logger=self.logger)
        self._clock = clock

    @property
    def file_path(self) -> Path:
        return self.store_file.path

    def read_item(self) -> InventoryRecord:
        return InventoryRecord(
            id=self.console.integer("ID", minimum=0),
            name=self.console.text("Name"),
            quantity=self.console.integer("Quantity", minimum=0),
            date_added=self._clock(),
        )

    def seed_data(self) -> None:
        count = self.read_count("How many items do you want to add?")
        for i in range(count):
            self.out(f"\n--- Item {i + 1} ---")
            self.store(self.items, self.read_record(self.read_item))

    def save_data(self) -> bool:
        result = self.store_file.save(self.items.get_all())
        return self.announce(result, f"Data saved to {self.file_path}")

    def load_data(self) -> bool:
        """Replace the in-memory items with the file contents."""
        if not self.store_file.exists():
            self.out("No saved file found.")
            return False
        loaded = self.store_file.load().flat_map(self.items.replace_all)
        return self.announce(loaded, "Data loaded successfully.")

    def print_all_items(self) -> None:
        self.print_section("Inventory Items", self.items.get_all())

    def run(self) -> None:
        self.seed_data()
        self.save_data()
        # Start from an empty store, as a fresh session would
        self.out("\nReloading data from file...")
        self.items.clear()
        self.load_data()
        self.print_all_items()
