# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from taskcal.view.state import get_show_header


def header(console: Console, view_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header for a view.

    Args:
        console: Console to print to
        view_name: Name of the view being displayed
        sub_header: Optional period description, e.g. the month shown
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]taskcal[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[sandy_brown]{view_name}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
