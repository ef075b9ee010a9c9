# inkwell/ai/models.py
# AI model catalog, aliases & provider routing for OpenRouter, OpenAI & Anthropic

from __future__ import annotations

# * Supported OpenAI models (called directly w/ OPENAI_API_KEY)
OPENAI_MODELS: list[str] = [
    "gpt-5",
    "gpt-5-mini",
    "gpt-5-nano",
    "gpt-4o",
    "gpt-4o-mini",
]

# * Supported Claude models (called directly w/ ANTHROPIC_API_KEY)
CLAUDE_MODELS: list[str] = [
    "claude-opus-4-1-20250805",
    "claude-sonnet-4-20250514",
    "claude-3-7-sonnet-20250219",
    "claude-3-5-haiku-20241022",
]

# * Suggested OpenRouter slugs; any "vendor/model" slug is accepted
OPENROUTER_MODELS: list[str] = [
    "anthropic/claude-3.5-sonnet",
    "anthropic/claude-sonnet-4",
    "openai/gpt-4o",
    "openai/gpt-4o-mini",
    "google/gemini-2.0-flash-001",
    "meta-llama/llama-3.1-70b-instruct",
]

SUPPORTED_MODELS: list[str] = OPENAI_MODELS + CLAUDE_MODELS

# * Model aliases for user-friendly short names
MODEL_ALIASES: dict[str, str] = {
    "claude-opus-4.1": "claude-opus-4-1-20250805",
    "claude-sonnet-4": "claude-sonnet-4-20250514",
    "claude-sonnet-3.7": "claude-3-7-sonnet-20250219",
    "claude-haiku-3.5": "claude-3-5-haiku-20241022",
    "gpt4o": "gpt-4o",
    "gpt5": "gpt-5",
    "gpt-5m": "gpt-5-mini",
    "sonnet": "anthropic/claude-3.5-sonnet",
}

DEFAULT_MODELS_BY_PROVIDER: dict[str, str] = {
    "openrouter": "anthropic/claude-3.5-sonnet",
    "openai": "gpt-5-mini",
    "anthropic": "claude-sonnet-4-20250514",
}

# model name -> (provider, description) for listings
MODEL_METADATA: dict[str, tuple[str, str]] = {
    "gpt-5": ("openai", "GPT-5 (most capable)"),
    "gpt-5-mini": ("openai", "GPT-5 Mini (cost-efficient)"),
    "gpt-5-nano": ("openai", "GPT-5 Nano (fastest)"),
    "gpt-4o": ("openai", "GPT-4o (high capability)"),
    "gpt-4o-mini": ("openai", "GPT-4o Mini (fast, cost-effective)"),
    "claude-opus-4-1-20250805": ("anthropic", "Claude Opus 4.1 (most capable)"),
    "claude-sonnet-4-20250514": ("anthropic", "Claude Sonnet 4 (balanced)"),
    "claude-3-7-sonnet-20250219": ("anthropic", "Claude 3.7 Sonnet (fast, capable)"),
    "claude-3-5-haiku-20241022": ("anthropic", "Claude 3.5 Haiku (fast)"),
    "anthropic/claude-3.5-sonnet": ("openrouter", "Claude 3.5 Sonnet via OpenRouter"),
}


# * Centralized model validation & resolution registry
class ModelRegistry:
    # resolve alias to full model name
    @classmethod
    def resolve_alias(cls, model: str) -> str:
        model = model.strip()
        if model in SUPPORTED_MODELS:
            return model
        return MODEL_ALIASES.get(model, model)

    # provider ID for a (resolved) model; "vendor/model" slugs go through OpenRouter
    @classmethod
    def get_provider(cls, model: str) -> str | None:
        if model in OPENAI_MODELS:
            return "openai"
        if model in CLAUDE_MODELS:
            return "anthropic"
        if cls.is_openrouter_slug(model):
            return "openrouter"
        return None

    @classmethod
    def is_openrouter_slug(cls, model: str) -> bool:
        vendor, sep, name = model.partition("/")
        return bool(sep and vendor and name and " " not in model)

    @classmethod
    def get_default(cls, provider: str | None = None) -> str:
        if provider is None:
            return DEFAULT_MODELS_BY_PROVIDER["openrouter"]
        return DEFAULT_MODELS_BY_PROVIDER.get(
            provider, DEFAULT_MODELS_BY_PROVIDER["openrouter"]
        )

    @classmethod
    def get_description(cls, model: str) -> str:
        if model in MODEL_METADATA:
            return MODEL_METADATA[model][1]
        return model

    # validate model & return (valid, provider)
    @classmethod
    def validate(cls, model: str) -> tuple[bool, str | None]:
        resolved = cls.resolve_alias(model)
        provider = cls.get_provider(resolved)
        return provider is not None, provider

    @classmethod
    def list_models(cls, provider: str | None = None) -> list[str]:
        if provider == "openai":
            return OPENAI_MODELS.copy()
        if provider == "anthropic":
            return CLAUDE_MODELS.copy()
        if provider == "openrouter":
            return OPENROUTER_MODELS.copy()
        if provider is None:
            return OPENROUTER_MODELS + SUPPORTED_MODELS
        return []

    @classmethod
    def list_aliases(cls) -> dict[str, str]:
        return MODEL_ALIASES.copy()


# * Error message for a model no provider can serve
def get_model_error_message(invalid_model: str) -> str:
    aliases = ", ".join(sorted(MODEL_ALIASES))
    return (
        f"Model '{invalid_model}' is not available.\n"
        f"Use an OpenRouter slug (vendor/model, e.g. {DEFAULT_MODELS_BY_PROVIDER['openrouter']}), "
        f"an OpenAI model ({', '.join(OPENAI_MODELS)}) or a Claude model "
        f"({', '.join(CLAUDE_MODELS)}).\n"
        f"Aliases: {aliases}"
    )
