"""Format decoders and encoders for Transmute.

This module provides the format registry and imports every codec so that
its registration decorators run.
"""

from transmute.formats.registry import DataFormat, FormatRegistry

__all__ = ["DataFormat", "FormatRegistry"]


def _register_formats() -> None:
    """Import format modules to trigger registration decorators."""
    from transmute.formats import csv, json, xml, yaml  # noqa: F401


# Register formats on module import
_register_formats()
