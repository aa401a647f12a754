"""NMEA data types for decoded sentences.

This module defines the static vocabulary shared by all sentence decoders.

Design Decisions:
    1. SentenceType is a ``str`` enum: members compare equal to their
       3-letter codes (``SentenceType.GGA == "GGA"``), so callers can match on
       either. Codes outside the supported set are reported as plain ``str``.

    2. Field tables are tuples of frozen FieldDescriptor instances. They are
       defined once per sentence type at import time and never mutated.

    3. Decoded values are plain Python scalars tagged by the descriptor's
       ValueKind. A decoder result is a ``dict`` keyed by the descriptor key,
       so results from different sentences merge with ``dict.update``
       semantics.
"""

from dataclasses import dataclass
from enum import Enum


class SentenceType(str, Enum):
    """Sentence types this package can decode."""

    GGA = "GGA"
    GSA = "GSA"
    GSV = "GSV"
    RMC = "RMC"
    VTG = "VTG"
    ZDA = "ZDA"

    def __str__(self) -> str:
        return self.value


class ValueKind(Enum):
    """How a raw comma-separated token is converted."""

    FLOAT = "float"
    INTEGER = "int"
    RAW = "raw"


@dataclass(frozen=True)
class FieldDescriptor:
    """Maps one token position of a sentence to a semantic key.

    Attributes:
        key: Symbolic name of the value in the decoded mapping
            (e.g. ``"lat_raw"``).
        index: Position within the comma-split tokens, where index 0 is the
            ``$GPxxx`` address field.
        kind: Conversion applied to the token.
    """

    key: str
    index: int
    kind: ValueKind


@dataclass(frozen=True)
class Satellite:
    """One satellite entry of a GSV sentence.

    Attributes:
        id: Satellite PRN number.
        elevation: Elevation above the horizon in degrees (0-90).
        azimuth: Azimuth from true north in degrees (0-359).
        snr: Signal-to-noise ratio in dB-Hz, 0 when not tracking.
    """

    id: int
    elevation: int
    azimuth: int
    snr: int


FieldValue = float | int | str | list[int] | list[Satellite]
ParsedFields = dict[str, FieldValue]
