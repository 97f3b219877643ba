# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from workboard.view.state import get_show_header


def header(view_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the view name.

    Args:
        view_name: The name of the view being rendered
        sub_header: Optional sub-header text, such as the visible date range
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[dark_orange]workboard[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{view_name}[/plum1]", (0, 1)))
    print(Padding(additional, (0, 1)))
