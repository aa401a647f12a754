"""ZDA sentence decoder.

ZDA (Time and Date) reports UTC time, calendar date and the local time zone.

ZDA Sentence Format:
    $GPZDA,085120.307,13,06,2019,09,00*10
           |          |  |  |    |  |
           |          |  |  |    |  +-- Local zone minutes (tzone_m)
           |          |  |  |    +-- Local zone hours (tzone_h)
           |          |  |  +-- Year (year)
           |          |  +-- Month (month)
           |          +-- Day (day)
           +-- UTC time (utc)

Unlike the table-driven decoders, an empty field is left out of the result
rather than decoded as zero, so a partially filled ZDA does not overwrite
previously received values with zeros.
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import convert_field, token_at
from gnss_decoder.nmea.types import FieldDescriptor, ParsedFields, ValueKind

ZDA_FIELDS = (
    FieldDescriptor("utc", 1, ValueKind.FLOAT),
    FieldDescriptor("day", 2, ValueKind.INTEGER),
    FieldDescriptor("month", 3, ValueKind.INTEGER),
    FieldDescriptor("year", 4, ValueKind.INTEGER),
    FieldDescriptor("tzone_h", 5, ValueKind.INTEGER),
    FieldDescriptor("tzone_m", 6, ValueKind.INTEGER),
)


def decode_zda(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized ZDA sentence, omitting empty fields."""
    fields: ParsedFields = {}
    for descriptor in ZDA_FIELDS:
        value = token_at(tokens, descriptor.index)
        if value:
            fields[descriptor.key] = convert_field(value, descriptor.kind)
    return fields
