"""Global view state using context variables for thread-safe state management."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility in views
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Context variable for disabling colour in rendered views
_no_color_var: ContextVar[bool] = ContextVar("no_color", default=False)


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed in views.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Get whether headers should be displayed in views.

    Returns:
        True if headers should be shown, False otherwise
    """
    return _show_header_var.get()


def set_no_color(value: bool) -> None:
    _no_color_var.set(value)


def get_no_color() -> bool:
    return _no_color_var.get()
