"""Record types assembled from a session's accumulated state.

Records are read-only views: a session builds a fresh instance on every
access from whatever its StateStore holds at that moment. A field is None
when the sentence that provides it has not been decoded yet.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GGAData:
    """Position fix assembled from GGA fields.

    Attributes:
        utc_time: UTC time as the numeric hhmmss.sss value (e.g. 85120.307).

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Converted from NMEA's ddmm.mmmm format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Converted from NMEA's dddmm.mmmm format.

        horizontal_dilution_of_precision: HDOP value. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).

        num_satellites: Number of satellites used in the fix.
    """

    utc_time: float | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    horizontal_dilution_of_precision: float | None
    num_satellites: int | None


@dataclass(frozen=True)
class VTGData:
    """Velocity assembled from VTG fields.

    Attributes:
        track_true_degrees: Track relative to true north in degrees.
        track_magnetic_degrees: Track relative to magnetic north in degrees.
        speed_knots: Ground speed in knots (1 knot = 1.852 km/h).
        speed_kilometers_per_hour: Ground speed in km/h.

    Note:
        Empty VTG fields decode as 0.0, so a stationary receiver reports a
        track of 0.0 rather than None.
    """

    track_true_degrees: float | None
    track_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None


@dataclass(frozen=True)
class RMCData:
    """Recommended minimum data assembled from RMC fields.

    Attributes:
        utc_time: UTC time as the numeric hhmmss.sss value.
        status: 'A' (active/valid) or 'V' (void/warning).
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        speed_knots: Ground speed in knots.
        track_true_degrees: Track relative to true north in degrees.
        date: Date as the numeric ddmmyy value (e.g. 181211).
    """

    utc_time: float | None
    status: str | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    speed_knots: float | None
    track_true_degrees: float | None
    date: int | None


@dataclass(frozen=True)
class ZDAData:
    """Time and date assembled from ZDA fields."""

    utc_time: float | None
    day: int | None
    month: int | None
    year: int | None
    zone_hours: int | None
    zone_minutes: int | None
