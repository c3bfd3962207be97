"""Horizontal transform — equatorial coordinates to local azimuth/altitude."""

import math

from nightdome.angles import clamp, wrap_deg
from nightdome.models import Horizontal

# Below this cos(alt) the body sits at the zenith/nadir and azimuth is
# undefined; it is reported as 0. Below this cos(lat) the observer stands on a
# pole and azimuth follows the hour angle.
ZENITH_EPSILON = 1e-12


def hour_angle_deg(ra_hours: float, lst_hours: float) -> float:
    return (lst_hours - ra_hours) * 15.0


def equatorial_to_horizontal(
    ra_hours: float, dec_deg: float, lst_hours: float, lat: float
) -> Horizontal:
    """Convert equatorial coordinates to horizon coordinates.

    Altitude comes from the spherical-triangle relation
    ``sin(alt) = sin(dec) sin(lat) + cos(dec) cos(lat) cos(HA)``. Azimuth is
    recovered from its cosine, so the half of the circle is decided by the
    sign of sin(HA): positive means the body is west of the meridian and the
    azimuth is ``360 - acos``.

    Args:
        ra_hours: Right ascension (hours).
        dec_deg: Declination (degrees).
        lst_hours: Local sidereal time (hours).
        lat: Observer latitude (degrees).

    Returns:
        Horizontal with azimuth in [0, 360) measured from north through east.
    """
    lat_rad = math.radians(lat)
    dec_rad = math.radians(dec_deg)
    ha = math.radians(hour_angle_deg(ra_hours, lst_hours))

    sin_alt = clamp(
        math.sin(dec_rad) * math.sin(lat_rad)
        + math.cos(dec_rad) * math.cos(lat_rad) * math.cos(ha),
        -1.0,
        1.0,
    )
    alt_rad = math.asin(sin_alt)

    alt_deg = math.degrees(alt_rad)
    if abs(math.cos(alt_rad)) < ZENITH_EPSILON:
        return Horizontal(az_deg=0.0, alt_deg=alt_deg)
    if abs(math.cos(lat_rad)) < ZENITH_EPSILON:
        # every direction is south from the north pole, north from the south pole
        ha_deg = math.degrees(ha)
        az = 180.0 + ha_deg if lat > 0 else -ha_deg
        return Horizontal(az_deg=wrap_deg(az), alt_deg=alt_deg)

    denom = math.cos(lat_rad) * math.cos(alt_rad)
    cos_az = clamp((math.sin(dec_rad) - math.sin(lat_rad) * sin_alt) / denom, -1.0, 1.0)
    az = math.degrees(math.acos(cos_az))
    if math.sin(ha) > 0:
        az = 360.0 - az
    return Horizontal(az_deg=wrap_deg(az), alt_deg=alt_deg)
