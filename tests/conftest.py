# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from inkwell.ai.types import GenerateResult


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    inkwell_dir = fake_home / ".inkwell"
    inkwell_dir.mkdir()

    # minimal config.json w/ test defaults
    config_data = {
        "model": "anthropic/claude-3.5-sonnet",
        "temperature": 0.7,
        "max_tokens": 2048,
        "default_action": "rewrite",
        "persona": "",
        "theme": "deep_blue",
        "diff_granularity": "char",
        "confirm_discard": True,
    }
    config_file = inkwell_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from inkwell.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset theme color cache to pick up isolated settings
    from inkwell.ui.theming.theme_engine import reset_color_cache

    reset_color_cache()

    # ! reset output manager to NullOutputManager for test isolation
    from inkwell.core.output import reset_output_manager

    reset_output_manager()

    # provider keys must come from each test, never from the developer's shell
    for var in ("OPENROUTER_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(var, raising=False)

    return fake_home


@pytest.fixture
def mock_env_vars(monkeypatch):
    # Seed test environment w/ provider API keys
    test_env = {
        "OPENROUTER_API_KEY": "test-openrouter-key-12345",
        "OPENAI_API_KEY": "test-openai-key-12345",
        "ANTHROPIC_API_KEY": "test-anthropic-key-12345",
    }
    for key, value in test_env.items():
        monkeypatch.setenv(key, value)
    return test_env


@pytest.fixture
def sample_document():
    return (
        "The quick brown fox jumps over the lazy dog.\n\n"
        "It was a bright cold day in April, and the clocks were striking thirteen.\n\n"
        "Call me Ishmael."
    )


@pytest.fixture
def ok_result():
    def make(text: str) -> GenerateResult:
        return GenerateResult(success=True, text=text, provider="fake", model="fake-model")

    return make
