# inkwell/ai/clients/openai_client.py
# OpenAI-compatible streaming client (chat completions) for OpenAI & OpenRouter

from __future__ import annotations

from typing import Any, AsyncIterator

from .base import BaseClient, raise_provider_error


# * OpenAI API client streaming chat completions
class OpenAIClient(BaseClient):

    provider_name = "openai"
    required_env_vars = ["OPENAI_API_KEY"]
    label = "OpenAI"

    def _create_client(self) -> Any:
        from openai import AsyncOpenAI

        return AsyncOpenAI(api_key=self.api_key or None)

    def _request_params(self, model: str) -> dict[str, Any]:
        # GPT-5 models don't support temperature & take max_completion_tokens
        if model.startswith("gpt-5"):
            return {"max_completion_tokens": self.settings.max_tokens}
        return {
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    # * Stream content deltas from the chat completions endpoint
    async def stream(self, system_prompt: str, text: str, model: str) -> AsyncIterator[str]:
        import openai

        client = self._create_client()
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
                stream=True,
                **self._request_params(model),
            )
            async for chunk in response:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    yield delta
        except Exception as e:
            raise_provider_error(openai, e, self.provider_name, self.label)
        finally:
            await client.close()


# * OpenRouter client: OpenAI-compatible API at a different base URL
class OpenRouterClient(OpenAIClient):

    provider_name = "openrouter"
    required_env_vars = ["OPENROUTER_API_KEY"]
    label = "OpenRouter"

    def _create_client(self) -> Any:
        from openai import AsyncOpenAI

        return AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.settings.openrouter_base_url,
            default_headers={"X-Title": "Inkwell"},
        )

    def _request_params(self, model: str) -> dict[str, Any]:
        return {
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }
