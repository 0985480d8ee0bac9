"""CSV format support for Transmute.

Tables decode to an Array of row Objects keyed by the header row. Quoted
fields do not protect embedded commas.
"""

from transmute.formats.csv.decoder import CSVDecoder
from transmute.formats.csv.encoder import CSVEncoder

__all__ = ["CSVDecoder", "CSVEncoder"]
