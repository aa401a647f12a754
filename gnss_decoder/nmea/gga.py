"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) provides the position fix: time,
coordinates, satellite count and horizontal dilution of precision.

GGA Sentence Format:
    $GPGGA,085120.307,3541.1493,N,13945.3994,E,1,08,1.0,6.9,M,35.9,M,,0000*5E
           |          |         | |          | | |  |
           |          |         | |          | | |  +-- HDOP (hdr)
           |          |         | |          | | +-- Number of satellites (sat_cnt)
           |          |         | |          | +-- Fix quality (not decoded)
           |          |         | +----------+-- Longitude (lng_raw) + E/W (ew)
           |          +---------+-- Latitude (lat_raw) + N/S (ns)
           +-- UTC time, hhmmss.sss as a number (utc)

Coordinates are kept in their raw ddmm.mmmm form; conversion to decimal
degrees happens when a record is built from the session state.
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import extract_fields
from gnss_decoder.nmea.types import FieldDescriptor, ParsedFields, ValueKind

GGA_FIELDS = (
    FieldDescriptor("utc", 1, ValueKind.FLOAT),
    FieldDescriptor("lat_raw", 2, ValueKind.FLOAT),
    FieldDescriptor("ns", 3, ValueKind.RAW),
    FieldDescriptor("lng_raw", 4, ValueKind.FLOAT),
    FieldDescriptor("ew", 5, ValueKind.RAW),
    FieldDescriptor("sat_cnt", 7, ValueKind.INTEGER),
    FieldDescriptor("hdr", 8, ValueKind.FLOAT),
)


def decode_gga(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized GGA sentence.

    Example:
        >>> decode_gga("$GPGGA,085120.307,3541.1493,N,13945.3994,E,1,08,1.0".split(","))["hdr"]
        1.0
    """
    return extract_fields(tokens, GGA_FIELDS)
