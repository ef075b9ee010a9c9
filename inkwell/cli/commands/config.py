# inkwell/cli/commands/config.py
# Settings mgmt subcommands (get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer
from rich.text import Text

from ...config.settings import InkwellSettings, settings_manager
from ...core.exceptions import SettingsValidationError
from ...inkwell_io.console import console
from ...ui.theming.theme_definitions import THEMES
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[inkwell.accent2]Manage Inkwell settings[/]"
)
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(InkwellSettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _print_current_settings() -> None:
    data = settings_manager.list_settings()
    console.print()
    console.print("[inkwell.title]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()
    for key, value in data.items():
        line = Text("  ")
        line.append(key, style="inkwell.accent2")
        line.append(f": {json.dumps(value)}")
        console.print(line)


# * show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    typer.echo(json.dumps(settings_manager.get(key)))


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    if key == "theme" and value not in THEMES:
        valid_themes = ", ".join(sorted(THEMES))
        raise typer.BadParameter(f"Invalid theme '{value}'. Valid themes: {valid_themes}")

    # string settings keep the raw text (e.g. persona "42")
    string_keys = {f.name for f in fields(InkwellSettings) if f.type in (str, "str")}
    coerced = value if key in string_keys else _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e))

    if key == "theme":
        from ...ui.theming.console_theme import refresh_theme

        refresh_theme()

    console.print(f"[success]✓[/] {key} = {json.dumps(coerced)}")


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print("[success]✓[/] Settings reset to defaults")


# * Show config file location
@config_app.command()
def path() -> None:
    typer.echo(str(settings_manager.config_path))
