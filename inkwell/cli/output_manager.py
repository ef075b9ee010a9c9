# inkwell/cli/output_manager.py
# Output management implementation for debug, verbose & quiet modes

# * Rich console output & optional plain-text log file
# * Registered via set_output_manager() at CLI startup

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from ..core.output import OutputLevel


class OutputManager:
    # Implements the OutputInterface protocol for the core registry

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._allow_debug = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: TextIO | None = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        allow_debug: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._allow_debug = allow_debug
        self._level = self._compute_effective_level(requested_level, allow_debug, quiet)
        self._session_start = time.time()
        self._setup_log_file(log_file)

    # --quiet wins; DEBUG is capped at VERBOSE unless explicitly allowed
    def _compute_effective_level(
        self, requested: OutputLevel, allow_debug: bool, quiet: bool
    ) -> OutputLevel:
        if quiet:
            return OutputLevel.QUIET
        max_allowed = OutputLevel.DEBUG if allow_debug else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if self._level >= OutputLevel.DEBUG:
            from ..inkwell_io.console import console

            console.print(f"[debug]\\[{category}][/] {msg}", **kwargs)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            from ..inkwell_io.console import console

            prefix = f"[dim][{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            console.print(f"{prefix} {msg}", **kwargs)
            if detail:
                for line in detail.split("\n"):
                    console.print(f"  [dim]{line}[/]")
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    self._write_to_file(f"  {line}")

    def info(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..inkwell_io.console import console

            console.print(msg, **kwargs)

    def start_session(self) -> None:
        self._session_start = time.time()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    @property
    def log_file_path(self) -> Path | None:
        return self._log_file_path

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError:
                # logging to file is optional; console output continues
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.write(f"{msg}\n")
                self._log_file_handle.flush()
            except OSError:
                self.cleanup()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.close()
            except OSError:
                pass
            self._log_file_handle = None
