# inkwell/ai/coordinator.py
# Streaming generation coordinator: prompt assembly, delta tracking & cancellation for review sessions

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from .prompts import build_system_prompt
from .types import GenerateResult, failure_reason
from ..config.settings import InkwellSettings, settings_manager
from ..core.verbose import vlog

CANCELLED_MESSAGE = "Generation cancelled"

# (system_prompt, text, model, on_delta, settings) -> result
GenerateFn = Callable[..., Awaitable[GenerateResult]]


def _default_generate_fn() -> GenerateFn:
    from .clients.factory import run_generate

    return run_generate


class StreamingCoordinator:
    """Runs one streamed completion per ``generate`` call.

    ``completion`` holds the text received so far for the most recent
    request; ``on_delta`` (if given) is called with each new piece.
    ``cancel()`` stops every in-flight stream and makes the pending
    ``generate`` calls return a failed result instead of raising.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        *,
        persona: Optional[str] = None,
        settings: Optional[InkwellSettings] = None,
        on_delta: Optional[Callable[[str], None]] = None,
        generate_fn: Optional[GenerateFn] = None,
    ):
        self.settings = settings if settings is not None else settings_manager.load()
        self.model = model or self.settings.model
        self.persona = persona if persona is not None else self.settings.persona
        self.on_delta = on_delta
        self.completion = ""
        self._generate_fn = generate_fn
        self._tasks: set[asyncio.Task[GenerateResult]] = set()
        self._request_id = 0

    @property
    def is_loading(self) -> bool:
        return any(not t.done() for t in self._tasks)

    # * Generate a suggestion for text under the given action
    async def generate(self, action: str, text: str) -> GenerateResult:
        generate_fn = self._generate_fn or _default_generate_fn()
        system_prompt = build_system_prompt(action, self.persona)

        self._request_id += 1
        self.completion = ""
        task = asyncio.ensure_future(
            generate_fn(
                system_prompt,
                text,
                self.model,
                on_delta=self._delta_handler(self._request_id),
                settings=self.settings,
            )
        )
        self._tasks.add(task)

        try:
            result = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            # our caller was cancelled: propagate
            if current is not None and current.cancelling():
                raise
            vlog("AI", CANCELLED_MESSAGE, f"Action: {action}")
            return GenerateResult.failure(CANCELLED_MESSAGE, model=self.model)
        finally:
            self._tasks.discard(task)

        reason = failure_reason(result)
        if reason is not None:
            return GenerateResult.failure(reason, result.provider, result.model or self.model)
        return result

    # * Cancel every in-flight stream (best-effort, never raises)
    def cancel(self) -> None:
        for task in list(self._tasks):
            if not task.done():
                task.cancel()

    # deltas from superseded requests must not leak into the current completion
    def _delta_handler(self, request_id: int) -> Callable[[str], None]:
        def handle(delta: str) -> None:
            if request_id != self._request_id:
                return
            self.completion += delta
            if self.on_delta is not None:
                self.on_delta(delta)

        return handle
