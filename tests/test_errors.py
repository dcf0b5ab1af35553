"""Tests for error types and their user-facing text."""

from business_planner.errors import (
    ERROR_MARKER,
    FilesystemError,
    InvalidChoiceError,
    MissingRequiredFieldError,
    NumericInputError,
    ToolInputError,
    UnknownToolError,
)


def test_user_message_has_marker_and_hint():
    message = UnknownToolError("nope").user_message()

    assert message.startswith(f"{ERROR_MARKER} Unknown tool: nope")
    assert message.endswith(UnknownToolError.hint)


def test_input_errors_share_base():
    assert issubclass(MissingRequiredFieldError, ToolInputError)
    assert issubclass(NumericInputError, ToolInputError)
    assert issubclass(InvalidChoiceError, ToolInputError)


def test_missing_field_names_tool():
    error = MissingRequiredFieldError("industry", tool_name="perform-pest-analysis")
    assert str(error) == "Missing required field 'industry' for perform-pest-analysis"


def test_numeric_error_keeps_value():
    error = NumericInputError("startupCosts", "abc")

    assert error.value == "abc"
    assert "'abc'" in str(error)


def test_invalid_choice_hint_lists_choices():
    error = InvalidChoiceError("format", "pdf", ("markdown", "html"))
    assert error.hint == "Use one of: markdown, html."


def test_filesystem_error_hint():
    error = FilesystemError("disk full", path="/tmp/x.md")

    assert error.path == "/tmp/x.md"
    assert "write permissions" in error.user_message()
