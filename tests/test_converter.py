"""Tests for the conversion service."""

from concurrent.futures import ThreadPoolExecutor

import pytest

import transmute
from transmute.config.models import ConversionConfig
from transmute.convert.converter import Converter, ValidationResult
from transmute.core.exceptions import (
    ConversionError,
    ParseError,
    StructuralError,
    UnsupportedFormatError,
)
from transmute.core.models import Number, Object
from transmute.formats.registry import DataFormat


class TestConverter:
    """Tests for Converter.convert."""

    def test_json_to_xml(self, converter):
        """Test a JSON object becomes a wrapped XML document."""
        result = converter.convert('{"item": ["a", "b"]}', "json", "xml", pretty_print=False)
        assert result == (
            '<?xml version="1.0" encoding="UTF-8"?><root><item>a</item><item>b</item></root>'
        )

    def test_json_to_xml_preserves_attributes(self, converter):
        """Test the reserved attributes key becomes XML attributes."""
        result = converter.convert(
            '{"user": {"@attributes": {"id": "7"}, "name": "Ada"}}',
            "json",
            "xml",
            pretty_print=False,
        )
        assert result.endswith('<root><user id="7"><name>Ada</name></user></root>')

    def test_xml_to_json(self, converter):
        """Test repeated tags arrive in JSON as arrays."""
        result = converter.convert(
            "<root><item>a</item><item>b</item></root>", "xml", "json", pretty_print=False
        )
        assert result == '{"item":["a","b"]}'

    def test_xml_to_json_sample(self, converter, sample_xml):
        """Test a realistic XML document converts to JSON."""
        result = converter.convert(sample_xml, DataFormat.XML, DataFormat.JSON, pretty_print=False)
        assert result == (
            '{"@attributes":{"version":"2"},'
            '"book":[{"@attributes":{"id":"b1"},"title":"Dune","year":"1965"},'
            '{"@attributes":{"id":"b2"},"title":"Emma","year":"1815"}],'
            '"owner":"Lee"}'
        )

    def test_csv_to_json(self, converter):
        """Test CSV rows become an array of objects."""
        result = converter.convert("a,b\n1,2", "csv", "json", pretty_print=False)
        assert result == '[{"a":"1","b":"2"}]'

    def test_json_to_csv(self, converter):
        """Test an array of objects becomes a quoted table."""
        result = converter.convert('[{"a": 1, "b": 2}, {"a": 3}]', "json", "csv")
        assert result == '"a","b"\n"1","2"\n"3",""'

    def test_yaml_to_json(self, converter, sample_yaml):
        """Test flat YAML converts to JSON with coerced numbers."""
        result = converter.convert(sample_yaml, "yaml", "json", pretty_print=False)
        assert result == '{"host":"localhost","port":8080,"ratio":0.5,"debug":"true"}'

    def test_json_to_yaml(self, converter):
        """Test nested JSON converts to block YAML."""
        result = converter.convert('{"a": {"b": 1}, "c": [true, null]}', "json", "yaml")
        assert result == "a:\n  b: 1\nc:\n  - true\n  - null\n"

    def test_same_format_normalizes(self, converter):
        """Test converting a format to itself re-renders it."""
        result = converter.convert('{ "a" :  1.0 ,"b":[ ] }', "json", "json", pretty_print=False)
        assert result == '{"a":1,"b":[]}'

    def test_format_names_are_case_insensitive(self, converter):
        """Test format selectors ignore case."""
        assert converter.convert("[1]", "JSON", "Json", pretty_print=False) == "[1]"

    def test_pretty_print_from_config(self):
        """Test the configured pretty printing applies when not overridden."""
        converter = Converter(ConversionConfig(pretty_print=False))
        assert converter.convert('{"a": [1]}', "json", "json") == '{"a":[1]}'
        assert converter.convert('{"a": 1}', "json", "json", pretty_print=True) == '{\n  "a": 1\n}'

    def test_repeated_calls_give_identical_output(self, converter, sample_json):
        """Test converting the same input several times gives the same text."""
        outputs = {converter.convert(sample_json, "json", target) for target in ["xml"] * 3}
        assert len(outputs) == 1

    @pytest.mark.parametrize(
        "text",
        [
            '{"a": [1, {"b": null}], "c": "x"}',
            '{"empty": {}, "list": [], "nested": [[[]], {"k": {}}]}',
            r'["café", "Zürich", "line\nbreak", "quote \"q\"", "tab\there"]',
            "[1.0, -0, 0.1, -2.5e-3, 1e300, 12345678901234567890]",
            '{"@attributes": {"id": "7"}, "#text": "hi", "flag": true}',
            "null",
        ],
    )
    def test_json_normalization_is_idempotent(self, converter, text):
        """Test normalizing already normalized JSON leaves it unchanged."""
        for pretty in (True, False):
            once = converter.convert(text, "json", "json", pretty_print=pretty)
            twice = converter.convert(once, "json", "json", pretty_print=pretty)
            assert twice == once

    def test_unsupported_source_format(self, converter):
        """Test an unknown source format is reported."""
        with pytest.raises(UnsupportedFormatError, match="toml"):
            converter.convert("a = 1", "toml", "json")

    def test_unsupported_target_checked_before_decoding(self, converter):
        """Test a bad target is reported even when the input is also malformed."""
        with pytest.raises(UnsupportedFormatError):
            converter.convert("{not json", "json", "toml")

    def test_parse_error_propagates(self, converter):
        """Test decode failures surface unchanged."""
        with pytest.raises(ParseError) as exc_info:
            converter.convert('{"a":}', "json", "yaml")

        assert exc_info.value.position == 5

    def test_errors_are_deterministic(self, converter):
        """Test the same bad input always gives the same error."""
        messages = set()
        for _ in range(3):
            with pytest.raises(ParseError) as exc_info:
                converter.convert("<a><b></a>", "xml", "json")
            messages.add((exc_info.value.message, exc_info.value.position))

        assert len(messages) == 1

    @pytest.mark.parametrize(
        "text,source,target",
        [
            ("[1, 2]", "json", "xml"),
            ('"x"', "json", "csv"),
            ("[[1]]", "json", "csv"),
            ("<root>text</root>", "xml", "xml"),
            ("a,b\n1,2", "csv", "xml"),
        ],
    )
    def test_structural_errors(self, converter, text, source, target):
        """Test values the target cannot represent raise StructuralError."""
        with pytest.raises(StructuralError):
            converter.convert(text, source, target)

    def test_nested_yaml_round_trip_fails(self, converter):
        """Test YAML produced from nested data cannot be decoded back."""
        yaml_text = converter.convert('{"a": {"b": 1}}', "json", "yaml")
        with pytest.raises(ParseError):
            converter.convert(yaml_text, "yaml", "json")

    def test_max_depth(self):
        """Test the configured depth limit applies to decoding."""
        text = "[" * 50 + "]" * 50
        assert transmute.convert(text, "json", "json", pretty_print=False) == text
        with pytest.raises(StructuralError, match="max depth 10"):
            transmute.convert(text, "json", "json", max_depth=10)

    @pytest.mark.parametrize(
        "text,source,target",
        [
            ("<a>" * 3000 + "x" + "</a>" * 3000, "xml", "json"),
            ('{"a":' * 3000 + "1" + "}" * 3000, "json", "xml"),
            ("[" * 3000 + "]" * 3000, "json", "yaml"),
        ],
    )
    def test_raised_max_depth_fails_cleanly(self, text, source, target):
        """Test documents deeper than the stack allows raise StructuralError."""
        converter = Converter(ConversionConfig(max_depth=100_000))

        with pytest.raises(StructuralError, match="too deeply nested"):
            converter.convert(text, source, target)

        result = converter.validate(text, source)
        assert result.valid is False
        assert isinstance(result.error, StructuralError)

    def test_deep_value_fails_cleanly_when_encoding(self):
        """Test encoders report stack exhaustion as StructuralError."""
        value = Object({"leaf": Number(1)})
        for _ in range(3000):
            value = Object({"a": value})

        converter = Converter(ConversionConfig(max_depth=100_000))
        for target in ("json", "xml", "yaml"):
            with pytest.raises(StructuralError, match="too deeply nested"):
                converter.encode(value, target)

    def test_all_errors_are_conversion_errors(self, converter):
        """Test every stage failure can be caught as ConversionError."""
        for args in [("x", "bogus", "json"), ("{", "json", "xml"), ("1", "json", "xml")]:
            with pytest.raises(ConversionError):
                converter.convert(*args)

    def test_concurrent_calls(self, converter, sample_json, sample_xml, sample_csv, sample_yaml):
        """Test parallel conversions match sequential results."""
        jobs = [
            (sample_json, "json", "xml"),
            (sample_json, "json", "yaml"),
            (sample_xml, "xml", "json"),
            (sample_csv, "csv", "json"),
            (sample_csv, "csv", "yaml"),
            (sample_yaml, "yaml", "xml"),
        ] * 10

        sequential = [converter.convert(*job) for job in jobs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda job: converter.convert(*job), jobs))

        assert parallel == sequential

    def test_decode_and_encode(self, converter):
        """Test the individual stages are exposed."""
        value = converter.decode("a: 1", "yaml")
        assert value == Object({"a": Number(1)})
        assert converter.encode(value, "json", pretty_print=False) == '{"a":1}'


class TestValidate:
    """Tests for Converter.validate."""

    def test_valid(self, converter, sample_csv):
        """Test well-formed input is reported valid."""
        result = converter.validate(sample_csv, "csv")
        assert result == ValidationResult(valid=True, format="csv")
        assert result.message == "Valid CSV"

    def test_invalid(self, converter):
        """Test malformed input carries its parse error."""
        result = converter.validate('{"a": 1,}', "json")
        assert result.valid is False
        assert isinstance(result.error, ParseError)
        assert result.message.startswith("Invalid JSON: ")

    def test_unsupported_format(self, converter):
        """Test an unknown format is reported as invalid."""
        result = converter.validate("x", "toml")
        assert result.valid is False
        assert isinstance(result.error, UnsupportedFormatError)
        assert result.format == "toml"

    def test_nested_yaml_is_invalid(self, converter):
        """Test YAML outside the flat subset fails validation."""
        assert converter.validate("a:\n  b: 1\n", "yaml").valid is False

    def test_empty_yaml_is_valid(self, converter):
        """Test an empty YAML document is valid."""
        assert converter.validate("", DataFormat.YAML).valid is True

    def test_module_level_validate(self):
        """Test the convenience function."""
        assert transmute.validate("<a/>", "xml").valid is True
        assert transmute.validate("<a>", "xml").valid is False
