# tests/test_support/rich_capture.py
# Rich Console recording utilities for capturing & asserting rendered output

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from rich.console import Console, RenderableType

from inkwell.inkwell_io.console import console as shared_console
from inkwell.ui.theming.theme_engine import get_inkwell_theme


def recording_console(width: int = 100, height: int = 40) -> Console:
    return Console(
        record=True,
        width=width,
        height=height,
        force_terminal=True,
        color_system="truecolor",
        theme=get_inkwell_theme(),
    )


# * Swap the shared console proxy for a recording console
@contextmanager
def capture_rich_output(width: int = 100, height: int = 40) -> Generator[Console, None, None]:
    previous = shared_console._get_console()
    recorder = recording_console(width, height)
    shared_console._set_console(recorder)
    try:
        yield recorder
    finally:
        shared_console._set_console(previous)


# * Render a renderable & return its plain text
def render_plain(renderable: RenderableType, width: int = 100, height: int = 40) -> str:
    recorder = recording_console(width, height)
    recorder.print(renderable)
    return extract_plain_text(recorder)


# * Extract plain text from Rich console recording, stripping ANSI codes
def extract_plain_text(console: Console) -> str:
    exported = console.export_text()
    return "\n".join(line.rstrip() for line in exported.split("\n"))
