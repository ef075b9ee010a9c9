# inkwell/ui/review/__init__.py
# Interactive split-view review screen components

from .review_display import InteractiveReviewScreen, run_review_screen
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer, create_renderer_from_console
from .review_state import (
    ReviewMode,
    ReviewOutcome,
    ReviewStateManager,
    ReviewViewState,
    editable_chunks,
)

__all__ = [
    "InteractiveReviewScreen",
    "run_review_screen",
    "ReviewInputHandler",
    "ReviewRenderer",
    "create_renderer_from_console",
    "ReviewMode",
    "ReviewOutcome",
    "ReviewStateManager",
    "ReviewViewState",
    "editable_chunks",
]
