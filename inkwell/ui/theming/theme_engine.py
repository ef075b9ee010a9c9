# inkwell/ui/theming/theme_engine.py
# Theme engine: lazily resolved accent colors & the Rich theme used by the console

from __future__ import annotations

from typing import Any

from rich.text import Text
from rich.theme import Theme

from .theme_definitions import DEFAULT_THEME, DIFF_COLORS, THEMES


def _get_settings_manager() -> Any:
    from ...config.settings import settings_manager

    return settings_manager


# * get current theme name (unknown names fall back to the default palette)
def get_current_theme_name() -> str:
    theme_name = getattr(_get_settings_manager().load(), "theme", DEFAULT_THEME)
    return theme_name if theme_name in THEMES else DEFAULT_THEME


def get_active_theme() -> list[str]:
    return THEMES[get_current_theme_name()]


# descriptor that fetches a palette color on access & caches it until the theme changes
class _LazyColorDescriptor:
    def __init__(self, index: int) -> None:
        self._index = index
        self._cached_theme: str | None = None
        self._cached_value: str | None = None

    def __get__(self, obj: object, objtype: type | None = None) -> str:
        current = get_current_theme_name()
        if self._cached_theme != current:
            self._cached_value = THEMES[current][self._index]
            self._cached_theme = current
        return self._cached_value  # type: ignore[return-value]

    def reset(self) -> None:
        self._cached_theme = None
        self._cached_value = None


# * Color constants; accents follow the active theme, status & diff colors are fixed
class InkwellColors:
    ACCENT_PRIMARY = _LazyColorDescriptor(0)
    ACCENT_LIGHT = _LazyColorDescriptor(1)
    ACCENT_SECONDARY = _LazyColorDescriptor(2)
    ACCENT_DEEP = _LazyColorDescriptor(4)

    SUCCESS = "#10b981"
    WARNING = "#ffaa00"
    ERROR = "#ff4444"
    INFO = "#4488ff"
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"


def reset_color_cache() -> None:
    for attr in ("ACCENT_PRIMARY", "ACCENT_LIGHT", "ACCENT_SECONDARY", "ACCENT_DEEP"):
        desc = InkwellColors.__dict__.get(attr)
        if isinstance(desc, _LazyColorDescriptor):
            desc.reset()


# * generate Rich theme configuration w/ current colors
def get_inkwell_theme() -> Theme:
    return Theme(
        {
            "success": InkwellColors.SUCCESS,
            "warning": InkwellColors.WARNING,
            "error": InkwellColors.ERROR,
            "info": InkwellColors.INFO,
            "dim": InkwellColors.DIM,
            "debug": InkwellColors.DEBUG,
            "inkwell.accent": InkwellColors.ACCENT_PRIMARY,
            "inkwell.accent2": InkwellColors.ACCENT_SECONDARY,
            "inkwell.accent_light": InkwellColors.ACCENT_LIGHT,
            "inkwell.accent_deep": InkwellColors.ACCENT_DEEP,
            "inkwell.title": f"bold {InkwellColors.ACCENT_PRIMARY}",
            # diff highlighting
            "diff.insert": f"{DIFF_COLORS['insert_fg']} on {DIFF_COLORS['insert_bg']}",
            "diff.delete": f"strike {DIFF_COLORS['delete_fg']} on {DIFF_COLORS['delete_bg']}",
            "diff.insert_pending": f"underline {DIFF_COLORS['pending']}",
            "diff.delete_pending": f"strike {DIFF_COLORS['pending']}",
            "diff.accepted": DIFF_COLORS["accepted"],
            "diff.rejected": DIFF_COLORS["rejected"],
            "diff.pending": DIFF_COLORS["pending"],
            # help styling
            "help.command": InkwellColors.ACCENT_PRIMARY,
            "help.option": InkwellColors.ACCENT_SECONDARY,
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=InkwellColors.SUCCESS)


def styled_bullet() -> Text:
    return Text("•", style=InkwellColors.ACCENT_SECONDARY)
