"""Tests for custom exceptions."""

from transmute.core.exceptions import (
    ConversionError,
    FormatDetectionError,
    ParseError,
    StructuralError,
    TransmuteError,
    UnsupportedFormatError,
)


class TestExceptions:
    """Tests for Transmute exceptions."""

    def test_transmute_error_base(self):
        """Test TransmuteError base class."""
        error = TransmuteError("Test error")
        assert str(error) == "Test error"
        assert isinstance(error, Exception)

    def test_conversion_error_message(self):
        """Test ConversionError exposes its message."""
        error = ConversionError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"
        assert isinstance(error, TransmuteError)

    def test_parse_error_with_line_and_column(self):
        """Test ParseError message includes line and column."""
        error = ParseError("json", "Expecting value", position=5, line=1, column=6)
        assert error.message == "Invalid JSON: Expecting value (line 1, column 6)"
        assert error.format_name == "json"
        assert error.reason == "Expecting value"
        assert error.position == 5
        assert isinstance(error, ConversionError)

    def test_parse_error_with_position_only(self):
        """Test ParseError falls back to the character offset."""
        error = ParseError("xml", "unclosed token", position=12)
        assert error.message == "Invalid XML: unclosed token (position 12)"

    def test_parse_error_without_location(self):
        """Test ParseError without any location."""
        error = ParseError("yaml", "bad document")
        assert error.message == "Invalid YAML: bad document"
        assert error.line is None

    def test_unsupported_format_error(self):
        """Test UnsupportedFormatError."""
        error = UnsupportedFormatError("toml")
        assert "toml" in str(error)
        assert isinstance(error, ConversionError)

    def test_unsupported_format_error_lists_available(self):
        """Test UnsupportedFormatError lists the formats that exist."""
        error = UnsupportedFormatError("toml", available_formats=["json", "xml"])
        assert error.message == "Unsupported format: 'toml'. Available formats: json, xml"
        assert error.available_formats == ["json", "xml"]

    def test_structural_error(self):
        """Test StructuralError."""
        error = StructuralError("CSV output requires an array of objects")
        assert "array of objects" in error.message
        assert isinstance(error, ConversionError)

    def test_format_detection_error(self):
        """Test FormatDetectionError."""
        error = FormatDetectionError("'hello world'")
        assert "hello world" in str(error)
        assert error.source == "'hello world'"
        assert isinstance(error, TransmuteError)
        assert not isinstance(error, ConversionError)

    def test_catch_all_transmute_errors(self):
        """Test that all errors can be caught with TransmuteError."""
        errors = [
            ParseError("json", "bad"),
            UnsupportedFormatError("toml"),
            StructuralError("shape"),
            FormatDetectionError("input"),
        ]

        for error in errors:
            try:
                raise error
            except TransmuteError as e:
                assert e is error
