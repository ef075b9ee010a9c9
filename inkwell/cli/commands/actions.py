# inkwell/cli/commands/actions.py
# `inkwell actions` - list built-in rewrite actions & their aliases

from __future__ import annotations

from rich.table import Table

from ...ai.prompts import ACTION_ALIASES, ACTION_LABELS, ACTION_PROMPTS
from ...inkwell_io.console import console
from ..app import app


@app.command()
def actions() -> None:
    """List the built-in actions usable with `rewrite --action`."""
    table = Table(border_style="inkwell.accent2", expand=True)
    table.add_column("Action", style="inkwell.accent", no_wrap=True)
    table.add_column("Aliases", style="dim")
    table.add_column("Instruction", ratio=1)

    for name, prompt in ACTION_PROMPTS.items():
        aliases = ", ".join(sorted(a for a, target in ACTION_ALIASES.items() if target == name))
        table.add_row(f"{name}\n[dim]{ACTION_LABELS[name]}[/]", aliases, prompt)

    console.print(table)
    console.print(
        "[dim]Anything else passed to --action (or --instruction) is used as a free-form instruction.[/]"
    )
