# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
Console collaborators: prompting for input and rendering entities.
"""

from recordkeep.console.prompts import ConsoleInput, PromptFunc, typer_prompt
from recordkeep.console.rendering import render, render_error

__all__ = ["ConsoleInput", "PromptFunc", "typer_prompt", "render", "render_error"]
