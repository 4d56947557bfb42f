"""
Tests for graphics extractor exceptions.
"""

import pytest

from graphics_extractor import (
    GraphicsExtractionError,
    RelaxedJSONError,
    LogSourceError,
    LogSourceNotFoundError,
    format_error_chain,
)


class TestGraphicsExtractionError:
    """Tests for base GraphicsExtractionError."""

    def test_create_simple(self):
        """Test creating error with message only."""
        error = GraphicsExtractionError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details is None

    def test_create_with_details(self):
        """Test creating error with details."""
        error = GraphicsExtractionError("Error occurred", details="More info here")
        assert "Error occurred" in str(error)
        assert "More info here" in str(error)
        assert error.details == "More info here"


class TestRelaxedJSONError:
    def test_position_and_snippet(self):
        text = "{points: [1, 2,, 3]}"
        error = RelaxedJSONError("Unexpected character ','", 15, text)
        assert error.position == 15
        assert error.snippet == text
        assert "offset 15" in str(error)

    def test_without_text(self):
        error = RelaxedJSONError("Input is not a string", 0)
        assert error.snippet is None
        assert error.details is None

    def test_is_extraction_error(self):
        assert issubclass(RelaxedJSONError, GraphicsExtractionError)


class TestLogSourceErrors:
    def test_not_found(self):
        error = LogSourceNotFoundError("/var/log/missing.log")
        assert error.path == "/var/log/missing.log"
        assert "missing.log" in str(error)

    def test_hierarchy(self):
        assert issubclass(LogSourceNotFoundError, LogSourceError)
        assert issubclass(LogSourceError, GraphicsExtractionError)

    def test_catch_as_base(self):
        with pytest.raises(GraphicsExtractionError):
            raise LogSourceNotFoundError("x.log")


class TestFormatErrorChain:
    def test_single_error(self):
        error = LogSourceNotFoundError("a.log")
        assert format_error_chain(error).startswith("LogSourceNotFoundError:")

    def test_chained_errors(self):
        try:
            try:
                raise RecursionError("too deep")
            except RecursionError as inner:
                raise RelaxedJSONError("Nesting too deep", 3) from inner
        except RelaxedJSONError as outer:
            formatted = format_error_chain(outer)

        lines = formatted.splitlines()
        assert lines[0].startswith("RelaxedJSONError:")
        assert "RecursionError: too deep" in lines[1]
