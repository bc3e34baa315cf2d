# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
recordkeep: identity-keyed record repositories and the console apps built on them.
"""

__version__ = "0.1.0"
