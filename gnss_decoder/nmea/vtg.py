"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information.

VTG Sentence Format:
    $GPVTG,240.3,T,,M,000.0,N,000.0,K,A*08
           |     | | | |     | |     |
           |     | | | |     | +-----+-- Speed in km/h (gskph)
           |     | | | +-----+-- Speed in knots (gsk)
           |     | +-+-- Track, magnetic north (mtmg)
           +-----+-- Track, true north (ttmg)

Note: When stationary, the track angles may be empty; they decode as 0.0.
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import extract_fields
from gnss_decoder.nmea.types import FieldDescriptor, ParsedFields, ValueKind

VTG_FIELDS = (
    FieldDescriptor("ttmg", 1, ValueKind.FLOAT),
    FieldDescriptor("mtmg", 3, ValueKind.FLOAT),
    FieldDescriptor("gsk", 5, ValueKind.FLOAT),
    FieldDescriptor("gskph", 7, ValueKind.FLOAT),
)


def decode_vtg(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized VTG sentence."""
    return extract_fields(tokens, VTG_FIELDS)
