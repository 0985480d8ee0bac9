"""Pytest configuration and fixtures for Transmute tests."""

from pathlib import Path

import pytest

from transmute.config.models import ConversionConfig
from transmute.convert.converter import Converter
from transmute.core.models import Array, Bool, Null, Number, Object, String


@pytest.fixture
def converter() -> Converter:
    """Converter with default settings."""
    return Converter()


@pytest.fixture
def compact_config() -> ConversionConfig:
    """Config with pretty printing disabled."""
    return ConversionConfig(pretty_print=False)


@pytest.fixture
def sample_value() -> Object:
    """A document touching every Canonical Value case."""
    return Object(
        {
            "name": String("Ada"),
            "age": Number(36),
            "ratio": Number(0.25),
            "active": Bool(True),
            "manager": Null(),
            "tags": Array([String("math"), String("engines")]),
            "address": Object({"city": String("London"), "zip": String("N1")}),
        }
    )


@pytest.fixture
def sample_json() -> str:
    """JSON document matching sample_value."""
    return (
        '{"name": "Ada", "age": 36, "ratio": 0.25, "active": true, "manager": null, '
        '"tags": ["math", "engines"], "address": {"city": "London", "zip": "N1"}}'
    )


@pytest.fixture
def sample_xml() -> str:
    """XML catalog with attributes and repeated tags."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<catalog version="2">\n'
        '  <book id="b1">\n'
        "    <title>Dune</title>\n"
        "    <year>1965</year>\n"
        "  </book>\n"
        '  <book id="b2">\n'
        "    <title>Emma</title>\n"
        "    <year>1815</year>\n"
        "  </book>\n"
        "  <owner>Lee</owner>\n"
        "</catalog>\n"
    )


@pytest.fixture
def sample_csv() -> str:
    """CSV table with a header row."""
    return "id,name,score\n1,Alice,90\n2,Bob,85\n"


@pytest.fixture
def sample_yaml() -> str:
    """Flat YAML mapping."""
    return "host: localhost\nport: 8080\nratio: 0.5\ndebug: true\n"


@pytest.fixture
def write_file(tmp_path: Path):
    """Factory writing text into a file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
