# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from arenta.view.state import get_show_header


def header(report_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header above a listing.

    Args:
        report_name: The name of the listing, e.g. "tasks"
        sub_header: Optional text describing the filter in use
    """
    if not get_show_header():
        return

    additional = f"[sandy_brown]{report_name}[/sandy_brown]"
    if sub_header is not None:
        additional += f" [plum1]{sub_header}[/plum1]"

    print(Padding("[dark_orange]arenta[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
