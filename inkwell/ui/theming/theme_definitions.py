# inkwell/ui/theming/theme_definitions.py
# Accent palettes for the review screen & CLI output

from __future__ import annotations


# palette order: primary, light, secondary, medium, deep
THEMES: dict[str, list[str]] = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#7fb3f0",  # pale blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "ink": [
        "#8b9bb4",  # slate
        "#c3ccda",  # mist
        "#5b6b87",  # steel
        "#3f4c66",  # navy ink
        "#2a3347",  # midnight
    ],
    "sepia": [
        "#c8a27a",  # parchment
        "#e3cba8",  # cream
        "#a57c52",  # umber
        "#8a6240",  # walnut
        "#5e4029",  # dark brown
    ],
    "pink_purple": [
        "#ff69b4",  # hot pink
        "#ffb6d9",  # light pink
        "#da70d6",  # orchid
        "#ba55d3",  # medium orchid
        "#8a2be2",  # blue violet
    ],
}

DEFAULT_THEME = "deep_blue"

# insert/delete highlight colors are fixed so meaning never depends on the palette
DIFF_COLORS: dict[str, str] = {
    "insert_fg": "#d1fae5",
    "insert_bg": "#065f46",
    "delete_fg": "#fee2e2",
    "delete_bg": "#7f1d1d",
    "accepted": "#10b981",
    "rejected": "#9ca3af",
    "pending": "#f59e0b",
}
