# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Configuration for recordkeep.
"""

from recordkeep.config.settings import Environment, RecordkeepSettings, get_settings

__all__ = ["Environment", "RecordkeepSettings", "get_settings"]
