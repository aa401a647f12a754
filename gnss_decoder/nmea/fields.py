"""NMEA field parsing utilities.

This module provides utilities for reading individual fields from tokenized
NMEA sentences. NMEA fields are comma-separated and may be empty (consecutive
commas indicate missing data), and short or truncated sentences may end
before a field a decoder expects.

Unlike a strict parser, these helpers never fail: a missing token reads as an
empty string, and an empty or garbled numeric token converts to zero. This
keeps field-table decoding total over any line that starts with ``$``.
"""

import math
import re
from collections.abc import Iterable, Sequence

from gnss_decoder.nmea.types import FieldDescriptor, ParsedFields, ValueKind


def token_at(tokens: Sequence[str], index: int) -> str:
    """Return the token at ``index``, or an empty string if out of range.

    Example:
        >>> token_at(["GPVTG", "240.3", "T"], 1)
        '240.3'
        >>> token_at(["GPVTG", "240.3", "T"], 7)
        ''
    """
    if 0 <= index < len(tokens):
        return tokens[index]
    return ""


_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_float_field(value: str) -> float:
    """Parse a string field to float, returning 0.0 if empty or invalid.

    Only plain ASCII decimal notation is accepted. ``nan``, ``inf`` and
    literals that overflow to infinity also read as 0.0.

    Example:
        >>> parse_float_field("085120.307")
        85120.307
        >>> parse_float_field("")
        0.0
        >>> parse_float_field("nan")
        0.0
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        return 0.0
    result = float(value)
    if not math.isfinite(result):
        return 0.0
    return result


def parse_int_field(value: str) -> int:
    """Parse a string field to int, returning 0 if empty or invalid.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        0
    """
    if not _INT_PATTERN.fullmatch(value):
        return 0
    return int(value)


_CONVERTERS = {
    ValueKind.FLOAT: parse_float_field,
    ValueKind.INTEGER: parse_int_field,
    ValueKind.RAW: str,
}


def convert_field(value: str, kind: ValueKind) -> float | int | str:
    """Convert a raw token according to its ValueKind."""
    return _CONVERTERS[kind](value)


def extract_fields(
    tokens: Sequence[str],
    descriptors: Iterable[FieldDescriptor],
) -> ParsedFields:
    """Apply a field table to a tokenized sentence.

    Every descriptor produces exactly one key, even when the sentence is too
    short to contain the field.

    Args:
        tokens: Comma-split sentence, index 0 being the address field
        descriptors: Field table of the sentence type

    Returns:
        Mapping from descriptor key to converted value
    """
    return {
        descriptor.key: convert_field(
            token_at(tokens, descriptor.index), descriptor.kind
        )
        for descriptor in descriptors
    }


def to_decimal_degrees(raw: float) -> float:
    """Convert an NMEA ddmm.mmmm (or dddmm.mmmm) value to decimal degrees.

    The hundreds and above are whole degrees; the remainder is minutes:
        decimal_degrees = degrees + minutes / 60

    Example:
        >>> to_decimal_degrees(3545.0)  # 35° 45'
        35.75
    """
    degrees = math.floor(raw / 100.0)
    return degrees + (raw - degrees * 100.0) / 60.0


def signed_degrees(
    raw: float | None,
    hemisphere: object,
    negative: str,
) -> float | None:
    """Convert a raw coordinate and apply the hemisphere sign.

    Args:
        raw: Coordinate in ddmm.mmmm format, or None if never received
        hemisphere: Hemisphere letter ("N", "S", "E" or "W")
        negative: The hemisphere letter that makes the result negative
            ("S" for latitude, "W" for longitude)

    Returns:
        Signed decimal degrees, or None if ``raw`` is None

    Example:
        >>> signed_degrees(4220.0, "S", negative="S")
        -42.333333333333336
    """
    if raw is None:
        return None

    decimal_degrees = to_decimal_degrees(raw)
    if hemisphere == negative:
        return -decimal_degrees

    return decimal_degrees
