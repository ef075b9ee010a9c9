# inkwell/ai/types.py
# Shared types for AI generation: results & the coordinator capability consumed by review sessions

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# * In-band marker a streaming backend emits instead of text when generation fails
ERROR_SENTINEL = "__AI_ERROR__:"

# * Message used when a generation completes w/ no usable text
EMPTY_RESPONSE_MESSAGE = "No response from AI"


# * Result object for AI generation operations
@dataclass(slots=True)
class GenerateResult:
    success: bool  # indicates if generation was successful
    text: str = ""  # completed text on success
    error: str = ""  # human-readable error on failure
    provider: str = ""  # provider that served the request (for logging)
    model: str = ""  # resolved model name

    @classmethod
    def failure(cls, error: str, provider: str = "", model: str = "") -> "GenerateResult":
        return cls(success=False, error=error, provider=provider, model=model)


# * Reason a generation result cannot be used, or None when it is usable
def failure_reason(result: GenerateResult) -> str | None:
    if not result.success:
        return result.error or "AI request failed"
    if result.text.startswith(ERROR_SENTINEL):
        return result.text[len(ERROR_SENTINEL) :].strip() or "AI request failed"
    if not result.text.strip():
        return EMPTY_RESPONSE_MESSAGE
    return None


# * Capability a review session needs from its environment
@runtime_checkable
class GenerationCoordinator(Protocol):
    @property
    def is_loading(self) -> bool: ...

    async def generate(self, action: str, text: str) -> GenerateResult: ...

    def cancel(self) -> None: ...
