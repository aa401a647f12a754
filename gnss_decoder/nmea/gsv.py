"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports elevation, azimuth and SNR for every
visible satellite. A receiver usually sees more satellites than fit in one
sentence, so the report is split into a multi-part message of up to four
satellites per line.

GSV Sentence Format:
    $GPGSV,3,1,12,26,72,352,28,05,65,066,37,15,50,268,35,27,33,189,37*7F
           | | |  |  |  |   |
           | | |  +--+--+---+-- Satellite: ID, elevation, azimuth, SNR
           | | |                (repeated up to 4 times)
           | | +-- Total satellites in view
           | +-- Message index (1-based)
           +-- Total number of messages

Only the satellites carried by the current line are returned. Lines of the
same multi-part message are not accumulated.
"""

from collections.abc import Sequence

from gnss_decoder.nmea.fields import parse_int_field, token_at
from gnss_decoder.nmea.types import ParsedFields, Satellite

_FIRST_SATELLITE_INDEX = 4
_SATELLITES_PER_SENTENCE = 4
_TOKENS_PER_SATELLITE = 4


def _satellite_count(tokens: Sequence[str]) -> int:
    """Number of satellite groups carried by this line.

    Every line but the last carries four satellites; the last carries the
    remainder. The result is clamped to 0..4 so that a garbled total cannot
    produce more groups than a sentence can hold.
    """
    message_count = parse_int_field(token_at(tokens, 1))
    message_index = parse_int_field(token_at(tokens, 2))
    satellites = parse_int_field(token_at(tokens, 3))

    if message_index < message_count:
        count = _SATELLITES_PER_SENTENCE
    else:
        count = satellites - (message_index - 1) * _SATELLITES_PER_SENTENCE

    return max(0, min(count, _SATELLITES_PER_SENTENCE))


def _read_satellite(tokens: Sequence[str], start: int) -> Satellite:
    elevation, azimuth, snr = (
        parse_int_field(token_at(tokens, start + offset)) for offset in (1, 2, 3)
    )
    return Satellite(
        id=parse_int_field(token_at(tokens, start)),
        elevation=elevation,
        azimuth=azimuth,
        snr=snr,
    )


def decode_gsv(tokens: Sequence[str]) -> ParsedFields:
    """Decode a tokenized GSV sentence into ``{"sat": [Satellite, ...]}``."""
    satellites = [
        _read_satellite(tokens, _FIRST_SATELLITE_INDEX + i * _TOKENS_PER_SATELLITE)
        for i in range(_satellite_count(tokens))
    ]
    return {"sat": satellites}
