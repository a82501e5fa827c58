# SPDX-License-Identifier: MIT

"""Per-invocation rendering switches shared by the CLI and the renderers."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    """Toggle the title line printed above each calendar view."""
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def reset() -> None:
    """Restore the defaults, e.g. between CLI invocations in one process."""
    _show_header_var.set(True)
