# inkwell/config/settings.py
# Configuration management for Inkwell: model, prompt defaults, theme & review behavior

from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict, fields

from ..core.constants import DiffGranularity
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.verbose import vlog_config
from ..inkwell_io.generics import read_json_safe, write_json_safe

DEFAULT_MODEL = "anthropic/claude-3.5-sonnet"
DEFAULT_OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


# * Default settings dataclass for Inkwell
@dataclass
class InkwellSettings:
    # model routed through OpenRouter unless it names a direct provider model
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 2048

    # prompt defaults
    default_action: str = "rewrite"
    persona: str = ""

    # theme setting
    theme: str = "deep_blue"

    # review behavior
    diff_granularity: str = DiffGranularity.CHAR.value
    confirm_discard: bool = True

    openrouter_base_url: str = DEFAULT_OPENROUTER_BASE_URL

    def __post_init__(self) -> None:
        # temperature validation (OpenAI/Anthropic range: 0.0-2.0)
        if isinstance(self.temperature, bool) or not isinstance(
            self.temperature, (int, float)
        ):
            raise SettingsValidationError(
                f"temperature must be a number, got {type(self.temperature).__name__}",
                "temperature",
                self.temperature,
            )
        if not 0.0 <= self.temperature <= 2.0:
            raise SettingsValidationError(
                f"temperature must be 0.0-2.0, got {self.temperature}",
                "temperature",
                self.temperature,
            )

        if (
            isinstance(self.max_tokens, bool)
            or not isinstance(self.max_tokens, int)
            or self.max_tokens < 1
        ):
            raise SettingsValidationError(
                f"max_tokens must be a positive integer, got {self.max_tokens}",
                "max_tokens",
                self.max_tokens,
            )

        if not isinstance(self.model, str) or not self.model.strip():
            raise SettingsValidationError(
                "model must be a non-empty string", "model", self.model
            )

        if not isinstance(self.default_action, str) or not self.default_action.strip():
            raise SettingsValidationError(
                "default_action must be a non-empty string",
                "default_action",
                self.default_action,
            )

        if not isinstance(self.persona, str):
            raise SettingsValidationError(
                f"persona must be a string, got {type(self.persona).__name__}",
                "persona",
                self.persona,
            )

        valid_granularities = {g.value for g in DiffGranularity}
        if self.diff_granularity not in valid_granularities:
            raise SettingsValidationError(
                f"diff_granularity must be one of {sorted(valid_granularities)}, "
                f"got '{self.diff_granularity}'",
                "diff_granularity",
                self.diff_granularity,
            )

        # confirm_discard strict bool validation (no coercion)
        if not isinstance(self.confirm_discard, bool):
            raise SettingsValidationError(
                f"confirm_discard must be a boolean (true/false), "
                f"got {type(self.confirm_discard).__name__}",
                "confirm_discard",
                self.confirm_discard,
            )

        if not isinstance(self.openrouter_base_url, str) or not (
            self.openrouter_base_url.startswith(("http://", "https://"))
        ):
            raise SettingsValidationError(
                f"openrouter_base_url must be an http(s) URL, got {self.openrouter_base_url!r}",
                "openrouter_base_url",
                self.openrouter_base_url,
            )

    @property
    def granularity(self) -> DiffGranularity:
        return DiffGranularity(self.diff_granularity)


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".inkwell" / "config.json"
        self._settings: Optional[InkwellSettings] = None

    # load settings from file or return defaults
    def load(self) -> InkwellSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = InkwellSettings(**data)
            except (JSONParsingError, SettingsValidationError, TypeError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = InkwellSettings()
        else:
            self._settings = InkwellSettings()

        return self._settings

    # save settings to file
    def save(self, settings: InkwellSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings
        self._notify_settings_changed()

    def _notify_settings_changed(self) -> None:
        # theme colors are cached by the theme engine
        from ..ui.theming.theme_engine import reset_color_cache

        reset_color_cache()

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole settings object
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if key not in {f.name for f in fields(InkwellSettings)}:
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        data = asdict(settings)
        data[key] = value
        updated = InkwellSettings(**data)
        vlog_config(key, value)
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(InkwellSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[InkwellSettings] = None
) -> InkwellSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for InkwellSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, InkwellSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
