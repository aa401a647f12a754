"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix.

GSA Sentence Format:
    $GPGSA,A,3,29,26,05,10,02,27,08,15,,,,,1.8,1.0,1.5*3E
           | | |                       |   |   |   |
           | | +-----------------------+   +---+---+-- PDOP, HDOP, VDOP (not decoded)
           | |   12 satellite ID slots, empty when unused
           | +-- Fix type (not decoded)
           +-- Selection mode, M=manual A=automatic (mode)
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import parse_int_field, token_at
from gnss_decoder.nmea.types import ParsedFields

_MODE_INDEX = 1
_FIRST_SLOT_INDEX = 3
_SLOT_COUNT = 12


def decode_gsa(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized GSA sentence.

    Empty slots parse as 0 and are dropped; the order of the remaining IDs
    is preserved.

    Example:
        >>> decode_gsa("$GPGSA,A,3,29,26,05,,,,,,,,,,1.8".split(","))
        {'mode': 'A', 'sat_ids': [29, 26, 5]}
    """
    slots = range(_FIRST_SLOT_INDEX, _FIRST_SLOT_INDEX + _SLOT_COUNT)
    sat_ids = [parse_int_field(token_at(tokens, i)) for i in slots]
    return {
        "mode": token_at(tokens, _MODE_INDEX),
        "sat_ids": [sat_id for sat_id in sat_ids if sat_id != 0],
    }
