# tests/unit/config/test_settings.py
# Unit tests for settings validation, persistence & context lookup

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from inkwell.config.settings import (
    DEFAULT_MODEL,
    InkwellSettings,
    SettingsManager,
    get_settings,
    settings_manager,
)
from inkwell.core.constants import DiffGranularity
from inkwell.core.exceptions import SettingsValidationError


# * Test InkwellSettings validation
class TestInkwellSettings:

    # * Verify defaults
    def test_defaults(self):
        settings = InkwellSettings()
        assert settings.model == DEFAULT_MODEL
        assert settings.default_action == "rewrite"
        assert settings.granularity is DiffGranularity.CHAR
        assert settings.confirm_discard is True

    @pytest.mark.parametrize(
        "field,value",
        [
            ("temperature", 2.5),
            ("temperature", -0.1),
            ("temperature", "hot"),
            ("temperature", True),
            ("max_tokens", 0),
            ("max_tokens", 1.5),
            ("model", "  "),
            ("default_action", ""),
            ("persona", 42),
            ("diff_granularity", "sentence"),
            ("confirm_discard", "yes"),
            ("openrouter_base_url", "openrouter.ai"),
        ],
    )
    # * Verify invalid values raise w/ the setting name
    def test_invalid_values(self, field, value):
        with pytest.raises(SettingsValidationError) as exc:
            InkwellSettings(**{field: value})
        assert exc.value.setting_name == field
        assert exc.value.value == value

    # * Verify word granularity maps to the enum
    def test_word_granularity(self):
        assert InkwellSettings(diff_granularity="word").granularity is DiffGranularity.WORD


# * Test SettingsManager persistence
class TestSettingsManager:

    # * Verify missing file falls back to defaults
    def test_load_missing_file(self, tmp_path):
        manager = SettingsManager(tmp_path / "nope" / "config.json")
        assert manager.load() == InkwellSettings()

    # * Verify values from the isolated config are loaded & cached
    def test_load_existing(self, isolate_config):
        settings = settings_manager.load()
        assert settings.model == "anthropic/claude-3.5-sonnet"
        assert settings_manager.load() is settings

    # * Verify invalid JSON warns & falls back to defaults
    def test_load_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        settings = SettingsManager(path).load()
        assert settings == InkwellSettings()
        out = capsys.readouterr().out
        assert "Warning: Invalid config file" in out
        assert "Using default settings" in out

    # * Verify invalid values & unknown keys in the file fall back to defaults
    @pytest.mark.parametrize(
        "data", [{"temperature": 9}, {"unknown_setting": 1}, ["not", "an", "object"]]
    )
    def test_load_invalid_content(self, tmp_path, data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        assert SettingsManager(path).load() == InkwellSettings()

    # * Verify set validates, persists & updates the cache
    def test_set_persists(self, tmp_path):
        path = tmp_path / "config.json"
        manager = SettingsManager(path)
        manager.set("persona", "You are a patient editor.")

        assert manager.get("persona") == "You are a patient editor."
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["persona"] == "You are a patient editor."

    # * Verify invalid or unknown settings are refused & nothing is written
    def test_set_rejects(self, tmp_path):
        path = tmp_path / "config.json"
        manager = SettingsManager(path)
        with pytest.raises(SettingsValidationError):
            manager.set("temperature", 7)
        with pytest.raises(SettingsValidationError):
            manager.set("colour", "red")
        assert not path.exists()
        assert manager.get("temperature") == 0.7

    # * Verify reset restores defaults on disk
    def test_reset(self, tmp_path):
        path = tmp_path / "config.json"
        manager = SettingsManager(path)
        manager.set("max_tokens", 99)
        manager.reset()
        assert manager.list_settings() == InkwellSettings().__dict__
        assert json.loads(path.read_text(encoding="utf-8"))["max_tokens"] == 2048

    # * Verify unknown keys read as None
    def test_get_unknown(self, tmp_path):
        assert SettingsManager(tmp_path / "c.json").get("nope") is None


# * Test settings lookup from typer context
class TestGetSettings:

    # * Verify explicitly provided settings win
    def test_provided(self):
        provided = InkwellSettings(model="gpt-4o")
        assert get_settings(MagicMock(), provided) is provided

    # * Verify settings stored on the parent context are found
    def test_from_parent_context(self):
        stored = InkwellSettings(model="gpt-4o")
        parent = SimpleNamespace(obj=stored)
        ctx = SimpleNamespace(obj=None, parent=parent, find_root=lambda: parent)
        assert get_settings(ctx) is stored

    # * Verify fallback loads from disk
    def test_fallback_to_manager(self):
        ctx = SimpleNamespace(obj=None, parent=None, find_root=lambda: None)
        assert get_settings(ctx) is settings_manager.load()
