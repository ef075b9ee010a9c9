# inkwell/ai/__init__.py
# AI prompts, result types & the generation coordinator used by review sessions

from .prompts import ACTION_PROMPTS, build_system_prompt, resolve_action
from .types import GenerateResult, GenerationCoordinator


# * Lazy proxy to avoid importing provider SDKs at package import time
def create_coordinator(*args, **kwargs) -> GenerationCoordinator:
    from .coordinator import StreamingCoordinator

    return StreamingCoordinator(*args, **kwargs)


__all__ = [
    "ACTION_PROMPTS",
    "build_system_prompt",
    "resolve_action",
    "create_coordinator",
    "GenerateResult",
    "GenerationCoordinator",
]
