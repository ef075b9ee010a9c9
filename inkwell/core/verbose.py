# inkwell/core/verbose.py
# Verbose logging helpers - structured log lines for AI calls, review sessions & file I/O

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import OutputLevel, get_output_manager, set_output_manager


# * Initialize verbose logging for a CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    debug: bool = False,
) -> None:
    if enabled and debug:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    try:
        from ..cli.output_manager import OutputManager

        manager = OutputManager()
        manager.initialize(
            requested_level=requested_level,
            allow_debug=debug,
            log_file=log_file,
        )
        set_output_manager(manager)
    except ImportError:
        pass


def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log AI request (before streaming starts)
def vlog_ai_request(
    provider: str,
    model: str,
    prompt_length: int,
    temperature: float | None = None,
) -> None:
    temp_str = f", temp={temperature}" if temperature is not None else ""
    detail = f"Model: {model}, Input: {prompt_length:,} chars{temp_str}"
    get_output_manager().verbose(f"Request to {provider}", "AI", detail)


# * Log AI response (after the stream completes or fails)
def vlog_ai_response(
    provider: str,
    model: str,
    response_length: int,
    success: bool,
    duration_ms: float | None = None,
    error: str | None = None,
) -> None:
    duration_str = f" in {duration_ms:.0f}ms" if duration_ms else ""
    if success:
        detail = f"Model: {model}, Response: {response_length:,} chars"
        get_output_manager().verbose(
            f"Response from {provider}{duration_str}", "AI", detail
        )
    else:
        detail = f"Model: {model}, Error: {error}"
        get_output_manager().verbose(
            f"[red]Error from {provider}[/]{duration_str}", "AI", detail
        )


# * Log a review session transition
def vlog_session(event: str, detail: str | None = None) -> None:
    get_output_manager().verbose(event, "SESSION", detail)


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Context manager wrapping a logging session
class VerboseSession:
    def __init__(
        self,
        enabled: bool = False,
        log_file: Path | None = None,
        debug: bool = False,
    ):
        self.enabled = enabled
        self.log_file = log_file
        self.debug = debug

    def __enter__(self) -> "VerboseSession":
        init_verbose(self.enabled, self.log_file, self.debug)
        get_output_manager().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        get_output_manager().end_session()
