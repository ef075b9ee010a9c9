# inkwell/ui/theming/__init__.py
# Theming utilities: palettes, colors & console theme

from .theme_definitions import THEMES, DIFF_COLORS
from .theme_engine import (
    InkwellColors,
    get_active_theme,
    get_inkwell_theme,
    reset_color_cache,
    styled_checkmark,
    styled_bullet,
)
from .console_theme import initialize_theme, refresh_theme

__all__ = [
    "THEMES",
    "DIFF_COLORS",
    "InkwellColors",
    "get_active_theme",
    "get_inkwell_theme",
    "reset_color_cache",
    "styled_checkmark",
    "styled_bullet",
    "initialize_theme",
    "refresh_theme",
]
