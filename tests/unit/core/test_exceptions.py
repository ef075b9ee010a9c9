# tests/unit/core/test_exceptions.py
# Unit tests for the exception hierarchy & error message formatting

from pathlib import Path

from inkwell.core.exceptions import (
    AIError,
    ChunkTransitionError,
    ConfigurationError,
    FileReadError,
    InkwellError,
    MissingAPIKeyError,
    ProviderError,
    RateLimitError,
    SelectionError,
    SessionError,
    SettingsValidationError,
    UnsupportedFormatError,
    format_error_message,
)


# * Test exception hierarchy & attributes
class TestExceptions:

    # * Verify hierarchy lets callers catch by family
    def test_hierarchy(self):
        assert issubclass(RateLimitError, ProviderError)
        assert issubclass(ProviderError, AIError)
        assert issubclass(MissingAPIKeyError, ConfigurationError)
        assert issubclass(SettingsValidationError, ConfigurationError)
        assert issubclass(SelectionError, SessionError)
        assert issubclass(ChunkTransitionError, SessionError)
        assert issubclass(SessionError, InkwellError)

    # * Verify extra attributes are kept & shown in repr
    def test_attributes_and_repr(self):
        error = RateLimitError("slow down", "openai", retry_after=30)
        assert error.provider == "openai"
        assert error.retry_after == 30
        assert "retry_after=30" in repr(error)

        key_error = MissingAPIKeyError("no key", "anthropic", "ANTHROPIC_API_KEY")
        assert key_error.env_var == "ANTHROPIC_API_KEY"

        fmt_error = UnsupportedFormatError("nope", ".pdf")
        assert fmt_error.format == ".pdf"

    # * Verify string paths are normalized
    def test_file_error_path(self):
        error = FileReadError("missing", "notes/draft.md")
        assert error.path == Path("notes/draft.md")

    # * Verify formatting adds the rich error prefix
    def test_format_error_message(self):
        assert format_error_message("AI Error", "boom") == "[red]AI Error:[/] boom"
