# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskcal.logger import setup_logging
from taskcal.terminal import calendar, configuration
from taskcal.terminal.custom_typer import OrderedAliasedTyperGroup
from taskcal.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="taskcal - Calendar views of your tasks in the CLI",
    no_args_is_help=True,
)
app.command(name="month, m")(calendar.month)
app.command(name="week, w")(calendar.week)
app.command(name="day, d")(calendar.day)
app.command(name="agenda, a")(calendar.agenda)
app.command(name="free, f")(calendar.free)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output above views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    taskcal - Calendar views of your tasks in the CLI

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
