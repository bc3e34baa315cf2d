# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Interactive console apps built on the keyed repository.
"""

from recordkeep.apps.base import ConsoleApp
from recordkeep.apps.grading import GradingApp
from recordkeep.apps.healthcare import HealthSystemApp
from recordkeep.apps.inventory import InventoryApp
from recordkeep.apps.warehouse import WarehouseManager

__all__ = [
    "ConsoleApp",
    "GradingApp",
    "HealthSystemApp",
    "InventoryApp",
    "WarehouseManager",
]
