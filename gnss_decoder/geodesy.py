"""Great-circle distance between two geographic points.

Uses the haversine formula on a sphere with the WGS84 equatorial radius:

    a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    d = 2R · asin(√a)

Accuracy is within about 0.5% of the ellipsoidal distance, which is enough
for waypoint and geofence checks.
"""

import math

__all__ = ["EARTH_RADIUS_METERS", "deg2rad", "great_circle_distance"]

EARTH_RADIUS_METERS = 6378137.0


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return float(degrees) * math.pi / 180.0


def great_circle_distance(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
) -> float:
    """Distance in meters between two points given in decimal degrees.

    Example:
        >>> great_circle_distance(35.0, 139.0, 35.0, 139.0)
        0.0
        >>> round(great_circle_distance(0.0, 0.0, 0.0, 1.0))  # 1° of equator
        111319
    """
    phi1 = deg2rad(lat1)
    phi2 = deg2rad(lat2)
    half_dphi = (phi1 - phi2) / 2.0
    half_dlambda = (deg2rad(lng1) - deg2rad(lng2)) / 2.0

    a = (
        math.sin(half_dphi) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
    )
    return EARTH_RADIUS_METERS * 2.0 * math.asin(math.sqrt(a))
