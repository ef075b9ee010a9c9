# inkwell/cli/decorators.py
# CLI decorator mapping Inkwell errors to styled messages & exit code 1

import functools
from typing import Callable, TypeVar, Any, cast

import typer

from ..core.exceptions import (
    InkwellError,
    AIError,
    ConfigurationError,
    SessionError,
    JSONParsingError,
    DocumentError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# checked in order; first match wins
_ERROR_LABELS: list[tuple[type[InkwellError], str]] = [
    (JSONParsingError, "JSON Parsing Error"),
    (AIError, "AI Error"),
    (ConfigurationError, "Configuration Error"),
    (SessionError, "Selection Error"),
    (DocumentError, "Document Error"),
    (FileOperationError, "File Error"),
    (InkwellError, "Error"),
]


def _label_for(error: InkwellError) -> str:
    for error_type, label in _ERROR_LABELS:
        if isinstance(error, error_type):
            return label
    return "Error"


# * Decorator for handling Inkwell errors in CLI commands w/ Rich output
def handle_inkwell_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from ..inkwell_io.console import console

        try:
            return func(*args, **kwargs)
        except InkwellError as e:
            console.print(format_error_message(_label_for(e), str(e)))
            raise SystemExit(1)
        except (typer.BadParameter, typer.Exit, typer.Abort):
            # usage errors & explicit exits belong to typer
            raise
        except Exception as e:
            from ..core.debug import debug_error

            debug_error(e, f"Unhandled error in {func.__name__}")
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
