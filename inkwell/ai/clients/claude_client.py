# inkwell/ai/clients/claude_client.py
# Claude (Anthropic) streaming client using the messages API

from __future__ import annotations

from typing import Any, AsyncIterator

from .base import BaseClient, raise_provider_error


# * Anthropic Claude API client streaming message text
class ClaudeClient(BaseClient):

    provider_name = "anthropic"
    required_env_vars = ["ANTHROPIC_API_KEY"]

    def _create_client(self) -> Any:
        from anthropic import AsyncAnthropic

        return AsyncAnthropic(api_key=self.api_key or None)

    # * Stream text deltas (text blocks only)
    async def stream(self, system_prompt: str, text: str, model: str) -> AsyncIterator[str]:
        import anthropic

        client = self._create_client()
        try:
            async with client.messages.stream(
                model=model,
                max_tokens=self.settings.max_tokens,
                temperature=min(self.settings.temperature, 1.0),
                system=system_prompt,
                messages=[{"role": "user", "content": text}],
            ) as stream:
                async for delta in stream.text_stream:
                    if delta:
                        yield delta
        except Exception as e:
            raise_provider_error(anthropic, e, self.provider_name, "Anthropic")
        finally:
            await client.close()
