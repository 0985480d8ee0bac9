"""JSON format support for Transmute.

JSON is the reference codec: it is lossless in both directions and serves as
the oracle for the structural correctness of the other codecs.
"""

from transmute.formats.json.decoder import JSONDecoder
from transmute.formats.json.encoder import JSONEncoder

__all__ = ["JSONDecoder", "JSONEncoder"]
