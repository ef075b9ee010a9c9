# inkwell/core/exceptions.py
# Custom exception hierarchy for Inkwell (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Inkwell application
class InkwellError(Exception):
    pass


# * AI-related exceptions
class AIError(InkwellError):
    pass


# * Provider-specific error (API errors, rate limits)
class ProviderError(AIError):
    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, provider={self.provider!r})"
        )


# * API rate limit exceeded
class RateLimitError(ProviderError):
    def __init__(self, message: str, provider: str, retry_after: int | None = None):
        super().__init__(message, provider)
        self.retry_after = retry_after

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"provider={self.provider!r}, retry_after={self.retry_after!r})"
        )


# * Configuration errors
class ConfigurationError(InkwellError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * Required API key not found
class MissingAPIKeyError(ConfigurationError):
    def __init__(self, message: str, provider: str, env_var: str):
        super().__init__(message)
        self.provider = provider
        self.env_var = env_var

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"provider={self.provider!r}, env_var={self.env_var!r})"
        )


# * Review session errors (raised by data-model helpers, never by session operations)
class SessionError(InkwellError):
    pass


# * Selection range does not fit the document it refers to
class SelectionError(SessionError):
    def __init__(self, message: str, start: int | None = None, end: int | None = None):
        super().__init__(message)
        self.start = start
        self.end = end

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"start={self.start!r}, end={self.end!r})"
        )


# * Illegal chunk status transition (e.g. rejected -> accepted)
class ChunkTransitionError(SessionError):
    def __init__(self, message: str, chunk_id: str):
        super().__init__(message)
        self.chunk_id = chunk_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, chunk_id={self.chunk_id!r})"


# * JSON parsing errors
class JSONParsingError(InkwellError):
    pass


# * Base error for document processing
class DocumentError(InkwellError):
    pass


# * Document format not supported
class UnsupportedFormatError(DocumentError):
    def __init__(self, message: str, format: str):
        super().__init__(message)
        self.format = format

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, format={self.format!r})"


# * Base error for file I/O operations
class FileOperationError(InkwellError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
