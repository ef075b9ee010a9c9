# inkwell/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup
load_dotenv()

from ..config.settings import settings_manager
from ..inkwell_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
    help="[inkwell.accent2]Review AI rewrites of a selection, edit by edit[/]",
)


# * Load settings & initialize theme/logging for every invocation
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug output (implies --verbose)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    from ..ui.theming.console_theme import initialize_theme

    initialize_theme()

    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..core.verbose import init_verbose

    # log_file & debug imply verbose mode
    verbose_enabled = verbose or debug or log_file is not None
    init_verbose(enabled=verbose_enabled, log_file=log_file, debug=debug)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import rewrite as _rewrite  # noqa: F401, E402
from .commands import diff as _diff  # noqa: F401, E402
from .commands import actions as _actions  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
