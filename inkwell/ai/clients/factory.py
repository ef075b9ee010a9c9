# inkwell/ai/clients/factory.py
# AI client factory for routing to the appropriate streaming provider based on model

from __future__ import annotations

from typing import Callable, Optional, Type

from ..models import ModelRegistry, get_model_error_message
from ..types import GenerateResult
from ...config.settings import InkwellSettings
from .base import BaseClient, DeltaCallback


# lazy client factory for OpenAI (tests can monkeypatch this)
def _get_openai_client_class() -> Type[BaseClient]:
    from .openai_client import OpenAIClient

    return OpenAIClient


# lazy client factory for OpenRouter (tests can monkeypatch this)
def _get_openrouter_client_class() -> Type[BaseClient]:
    from .openai_client import OpenRouterClient

    return OpenRouterClient


# lazy client factory for Anthropic (tests can monkeypatch this)
def _get_anthropic_client_class() -> Type[BaseClient]:
    from .claude_client import ClaudeClient

    return ClaudeClient


# * Registry mapping provider IDs to client factory functions
CLIENT_REGISTRY: dict[str, Callable[[], Type[BaseClient]]] = {
    "openrouter": _get_openrouter_client_class,
    "openai": _get_openai_client_class,
    "anthropic": _get_anthropic_client_class,
}


# * Stream a completion using the client that serves the model
async def run_generate(
    system_prompt: str,
    text: str,
    model: str,
    on_delta: Optional[DeltaCallback] = None,
    settings: Optional[InkwellSettings] = None,
) -> GenerateResult:
    valid, provider = ModelRegistry.validate(model)
    if not valid or provider is None:
        return GenerateResult.failure(get_model_error_message(model), model=model)

    resolved_model = ModelRegistry.resolve_alias(model)

    client_factory = CLIENT_REGISTRY.get(provider)
    if client_factory is None:
        return GenerateResult.failure(f"Unknown provider: {provider}", model=model)

    client_class = client_factory()
    client = client_class(settings)
    return await client.run_generate(system_prompt, text, resolved_model, on_delta)
