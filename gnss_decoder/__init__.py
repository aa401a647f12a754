"""gnss_decoder package for decoding NMEA 0183 GNSS sentences."""

from gnss_decoder.errors import InvalidConfigurationError
from gnss_decoder.geodesy import EARTH_RADIUS_METERS, deg2rad, great_circle_distance
from gnss_decoder.gnss import (
    GGAData,
    GNSSSession,
    RMCData,
    StateStore,
    VTGData,
    ZDAData,
)
from gnss_decoder.nmea import (
    SUPPORTED_TYPES,
    Satellite,
    SentenceDispatcher,
    SentenceFilter,
    SentenceType,
    signed_degrees,
    to_decimal_degrees,
)

__all__ = [
    "EARTH_RADIUS_METERS",
    "SUPPORTED_TYPES",
    "GGAData",
    "GNSSSession",
    "InvalidConfigurationError",
    "RMCData",
    "Satellite",
    "SentenceDispatcher",
    "SentenceFilter",
    "SentenceType",
    "StateStore",
    "VTGData",
    "ZDAData",
    "deg2rad",
    "great_circle_distance",
    "signed_degrees",
    "to_decimal_degrees",
]
