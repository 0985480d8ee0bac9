"""YAML format support for Transmute.

Decoding covers flat ``key: value`` mappings only; encoding supports
arbitrary nesting.
"""

from transmute.formats.yaml.decoder import YAMLDecoder
from transmute.formats.yaml.encoder import YAMLEncoder

__all__ = ["YAMLDecoder", "YAMLEncoder"]
