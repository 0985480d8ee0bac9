"""XML format support for Transmute.

Elements map to Objects; repeated sibling tags collapse into Arrays and
attributes live under the reserved "@attributes" key.
"""

from transmute.formats.xml.decoder import XMLDecoder
from transmute.formats.xml.encoder import XMLEncoder

__all__ = ["XMLDecoder", "XMLEncoder"]
