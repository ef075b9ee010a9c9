# inkwell/ai/clients/base.py
# Template-method base client for streaming AI providers w/ credential validation

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from types import ModuleType
from typing import AsyncIterator, Callable, ClassVar, NoReturn, Optional

from ..types import GenerateResult, failure_reason
from ...config.env_validator import require_provider_env
from ...config.settings import InkwellSettings, settings_manager
from ...core.exceptions import AIError, ConfigurationError, ProviderError, RateLimitError
from ...core.verbose import vlog, vlog_ai_request, vlog_ai_response

# receives each text delta as it arrives
DeltaCallback = Callable[[str], None]


# * Abstract base class for streaming AI provider clients using template-method pattern
# Orchestrates: preflight -> validate_model -> stream -> accumulate -> GenerateResult
# Always returns GenerateResult; only task cancellation propagates to callers
class BaseClient(ABC):

    # * Subclasses must set this to their canonical provider ID
    provider_name: str = ""

    # * Required environment variables for this provider
    required_env_vars: ClassVar[list[str]] = []

    def __init__(self, settings: Optional[InkwellSettings] = None):
        self.settings = settings if settings is not None else settings_manager.load()
        self.api_key = ""

    # * Template method - stream a completion & fold it into a GenerateResult
    async def run_generate(
        self,
        system_prompt: str,
        text: str,
        model: str,
        on_delta: Optional[DeltaCallback] = None,
    ) -> GenerateResult:
        try:
            self.preflight()
            validated_model = self.validate_model(model)

            vlog_ai_request(
                provider=self.provider_name,
                model=validated_model,
                prompt_length=len(system_prompt) + len(text),
                temperature=self.settings.temperature,
            )

            start_time = time.time()
            parts: list[str] = []
            async for delta in self.stream(system_prompt, text, validated_model):
                parts.append(delta)
                if on_delta is not None:
                    on_delta(delta)
            duration_ms = (time.time() - start_time) * 1000

            result = self._process_response("".join(parts), validated_model)

            vlog_ai_response(
                provider=self.provider_name,
                model=validated_model,
                response_length=len(result.text),
                success=result.success,
                duration_ms=duration_ms,
                error=result.error if not result.success else None,
            )
            return result
        except ConfigurationError as e:
            vlog("AI", f"Configuration error for {self.provider_name}: {e}")
            return GenerateResult.failure(str(e), self.provider_name, model)
        except AIError as e:
            vlog_ai_response(
                provider=self.provider_name,
                model=model,
                response_length=0,
                success=False,
                error=str(e),
            )
            return GenerateResult.failure(str(e), self.provider_name, model)
        except Exception as e:
            vlog_ai_response(
                provider=self.provider_name,
                model=model,
                response_length=0,
                success=False,
                error=f"Unexpected: {e}",
            )
            return GenerateResult.failure(
                f"Unexpected error in {self.provider_name}: {e}",
                self.provider_name,
                model,
            )

    # pre-call setup hook (default: validate credentials)
    def preflight(self) -> None:
        self.validate_credentials()

    # validate API credentials; raises MissingAPIKeyError w/ the variable name
    def validate_credentials(self) -> None:
        if self.required_env_vars and self.provider_name:
            self.api_key = require_provider_env(self.provider_name)

    # validate & resolve model name (override in subclasses for custom validation)
    def validate_model(self, model: str) -> str:
        return model

    # * Yield text deltas from the provider (subclasses must implement)
    @abstractmethod
    def stream(self, system_prompt: str, text: str, model: str) -> AsyncIterator[str]:
        pass

    # blank output or an in-band error marker is a failure
    def _process_response(self, raw_text: str, model: str) -> GenerateResult:
        result = GenerateResult(
            success=True, text=raw_text, provider=self.provider_name, model=model
        )
        reason = failure_reason(result)
        if reason is not None:
            return GenerateResult.failure(reason, self.provider_name, model)
        return result


# * Translate an SDK exception into the Inkwell AI error hierarchy
def raise_provider_error(sdk: ModuleType, e: Exception, provider: str, label: str) -> NoReturn:
    # provider-specific exception types may not exist in mocks
    rate_limit_error = getattr(sdk, "RateLimitError", None)
    api_status_error = getattr(sdk, "APIStatusError", None)
    api_connection_error = getattr(sdk, "APIConnectionError", None)

    # rate limit (429)
    if rate_limit_error and isinstance(e, rate_limit_error):
        raise RateLimitError(
            f"{label} rate limit exceeded: {e}",
            provider=provider,
            retry_after=getattr(e, "retry_after", None),
        ) from e
    # API errors (4xx/5xx)
    if api_status_error and isinstance(e, api_status_error):
        status_code = getattr(e, "status_code", "unknown")
        message = getattr(e, "message", str(e))
        raise ProviderError(
            f"{label} API error ({status_code}): {message}", provider=provider
        ) from e
    if api_connection_error and isinstance(e, api_connection_error):
        raise ProviderError(f"{label} connection error: {e}", provider=provider) from e
    raise AIError(f"{label} API error: {e}") from e
