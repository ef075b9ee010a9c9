# inkwell/ui/theming/console_theme.py
# Console theme initialization & refresh for Rich styling

from __future__ import annotations

from rich.theme import ThemeStackError

from ...inkwell_io.console import console
from .theme_engine import get_inkwell_theme, reset_color_cache


# * push the current theme onto the shared console
def initialize_theme() -> None:
    console.push_theme(get_inkwell_theme())


# * Refresh console theme w/ current settings (after `config set theme`)
def refresh_theme() -> None:
    reset_color_cache()
    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # no theme pushed yet
    console.push_theme(get_inkwell_theme())
