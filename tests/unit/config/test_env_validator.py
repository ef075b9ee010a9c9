# tests/unit/config/test_env_validator.py
# Unit tests for provider credential lookup

import pytest

from inkwell.config.env_validator import (
    get_missing_env_message,
    get_required_env_var,
    require_provider_env,
    validate_provider_env,
)
from inkwell.core.exceptions import MissingAPIKeyError


# * Test provider env validation
class TestEnvValidator:

    # * Verify variable names per provider
    def test_required_vars(self):
        assert get_required_env_var("openrouter") == "OPENROUTER_API_KEY"
        assert get_required_env_var("openai") == "OPENAI_API_KEY"
        assert get_required_env_var("anthropic") == "ANTHROPIC_API_KEY"
        assert get_required_env_var("local") is None

    # * Verify set, missing & whitespace-only keys
    def test_validate(self, monkeypatch):
        assert not validate_provider_env("openai")
        monkeypatch.setenv("OPENAI_API_KEY", "   ")
        assert not validate_provider_env("openai")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert validate_provider_env("openai")
        assert validate_provider_env("local")

    # * Verify messages name the variable
    def test_missing_message(self):
        assert get_missing_env_message("anthropic") == "Missing ANTHROPIC_API_KEY in environment or .env"
        assert "does not require" in get_missing_env_message("local")

    # * Verify require returns the key or raises w/ details
    def test_require(self, mock_env_vars):
        assert require_provider_env("openrouter") == mock_env_vars["OPENROUTER_API_KEY"]

    def test_require_missing(self):
        with pytest.raises(MissingAPIKeyError) as exc:
            require_provider_env("openrouter")
        assert exc.value.provider == "openrouter"
        assert exc.value.env_var == "OPENROUTER_API_KEY"
