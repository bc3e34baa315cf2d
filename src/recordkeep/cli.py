# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: recordkeep
"""
recordkeep CLI entrypoint.

One command per console app, plus a command to inspect the resolved settings.
"""

from __future__ import annotations

from pathlib import Path

import typer

from recordkeep.apps import GradingApp, HealthSystemApp, InventoryApp, WarehouseManager
from recordkeep.config import get_settings
from recordkeep.logging import LoggingSettings

app = typer.Typer(help="recordkeep: grading, healthcare, inventory and warehouse records.")


@app.command()
def grading(
    report: Path | None = typer.Option(
        None, "--report", "-r", help="Where to write the student report"
    ),
) -> None:
    """Enter students and write a grade report."""
    GradingApp().run(report_path=report)


@app.command()
def healthcare() -> None:
    """Enter patients and prescriptions, then look up a patient's prescriptions."""
    HealthSystemApp().run()


@app.command()
def inventory(
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON file for inventory data (prompted for when omitted)",
    ),
) -> None:
    """Log inventory items, save them to a JSON file and reload them."""
    if file is None:
        answer = typer.prompt(
            "Enter file path for inventory data (e.g., inventory.json)",
            default="",
            show_default=False,
        ).strip()
        file = Path(answer) if answer else None
    InventoryApp(file).run()


@app.command()
def warehouse() -> None:
    """Stock electronics and groceries, adjust stock and remove items."""
    WarehouseManager().run()


@app.command()
def settings() -> None:
    """Show the resolved application and logging settings as JSON."""
    typer.echo(get_settings().model_dump_json(indent=2))
    typer.echo(LoggingSettings.load().model_dump_json(indent=2))


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
