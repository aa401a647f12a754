"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) combines time, date, position,
speed and track in a single sentence.

RMC Sentence Format:
    $GPRMC,085120.307,A,3541.1493,N,13945.3994,E,000.0,240.3,181211,,,A*6A
           |          | |         | |          | |     |     |
           |          | |         | |          | |     |     +-- Date, ddmmyy as a number (date)
           |          | |         | |          | |     +-- Track, true north (ttmg)
           |          | |         | |          | +-- Speed in knots (gsk)
           |          | |         | +----------+-- Longitude (lng_raw) + E/W (ew)
           |          | +---------+-- Latitude (lat_raw) + N/S (ns)
           |          +-- Status, A=active V=void (status)
           +-- UTC time (utc)
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import extract_fields
from gnss_decoder.nmea.types import FieldDescriptor, ParsedFields, ValueKind

RMC_FIELDS = (
    FieldDescriptor("utc", 1, ValueKind.FLOAT),
    FieldDescriptor("status", 2, ValueKind.RAW),
    FieldDescriptor("lat_raw", 3, ValueKind.FLOAT),
    FieldDescriptor("ns", 4, ValueKind.RAW),
    FieldDescriptor("lng_raw", 5, ValueKind.FLOAT),
    FieldDescriptor("ew", 6, ValueKind.RAW),
    FieldDescriptor("gsk", 7, ValueKind.FLOAT),
    FieldDescriptor("ttmg", 8, ValueKind.FLOAT),
    FieldDescriptor("date", 9, ValueKind.INTEGER),
)


def decode_rmc(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized RMC sentence."""
    return extract_fields(tokens, RMC_FIELDS)
