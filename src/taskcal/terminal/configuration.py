# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskcal import configuration
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.terminal.custom_typer import AliasedTyperGroup
from taskcal.terminal.validate import validate_positive, validate_start_of_week_option
from taskcal.view.calendar import DAY_NAMES

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "start_of_week",
        f"{config['start_of_week']} ({DAY_NAMES[config['start_of_week']]})",
    )
    table.add_row(
        "include_completed",
        "✓ Enabled" if config["include_completed"] else "✗ Disabled",
    )
    table.add_row("agenda_days", str(config["agenda_days"]))
    table.add_row(
        "tasks_path",
        config["tasks_path"] if config["tasks_path"] else "None (default data path)",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")
    console.print(f"Task file: {configuration.DATA_TASKS_PATH}")


@app.command("set, s")
def set(
    start_of_week: Annotated[
        Optional[int],
        typer.Option(
            "--start-of-week",
            callback=validate_start_of_week_option,
            help="First day of the week, 0 = Sunday through 6 = Saturday",
        ),
    ] = None,
    include_completed: Annotated[
        Optional[bool],
        typer.Option(
            "--include-completed/--exclude-completed",
            help="Show completed tasks in views by default",
        ),
    ] = None,
    agenda_days: Annotated[
        Optional[int],
        typer.Option(
            "--agenda-days",
            callback=validate_positive,
            help="Number of days the agenda lists by default",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Print the header above views",
        ),
    ] = None,
    tasks_path: Annotated[
        Optional[str],
        typer.Option(
            "--tasks-path",
            help="Task file to read (None = default data path)",
        ),
    ] = None,
    remove_tasks_path: Annotated[
        bool,
        typer.Option(
            "--remove-tasks-path",
            help="Reset the task file to the default data path",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            start_of_week=start_of_week,
            include_completed=include_completed,
            agenda_days=agenda_days,
            tasks_path=tasks_path,
            remove_tasks_path=remove_tasks_path,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
