# inkwell/inkwell_io/console.py
# Centralized console management for the entire Inkwell application

# - Console is created as a bare Console() at import time (no theme loading)
# - Theme initialization happens in cli/app.py:main_callback() via auto_initialize_theme()
# - The _ConsoleProxy lets tests reconfigure/reset without breaking module-level references

from __future__ import annotations
from typing import Optional, Any
from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


# single proxy instance used by all modules
console = _ConsoleProxy()


# * Get the underlying Console instance
def get_console() -> Console:
    # handle both proxy & direct Console (e.g., when patched in tests)
    if hasattr(console, "_get_console"):
        return console._get_console()
    return console  # type: ignore[return-value]


# * Configure console w/ specific settings (tests & CLI modes)
def configure_console(
    width: Optional[int] = None,
    height: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    record: bool = False,
    theme: Any = None,
) -> Console:
    kwargs: dict[str, Any] = {}
    if width is not None:
        kwargs["width"] = width
    if height is not None:
        kwargs["height"] = height
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if record:
        kwargs["record"] = True
    if theme is not None:
        kwargs["theme"] = theme

    if kwargs:
        console._set_console(Console(**kwargs))
    return console._get_console()


# * Reset console to default configuration (tests)
def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()


__all__ = [
    "console",
    "get_console",
    "configure_console",
    "reset_console",
]
