# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
File persistence collaborators.
"""

from recordkeep.persistence.json_store import JsonCollectionStore
from recordkeep.persistence.text_report import write_text_report

__all__ = ["JsonCollectionStore", "write_text_report"]
