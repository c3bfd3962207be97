"""Sidereal clock — local sidereal time from epoch days and longitude."""

from datetime import datetime

from nightdome.angles import wrap_hours
from nightdome.timebase import epoch_days

GMST_AT_J2000_HOURS = 18.697374558
SIDEREAL_HOURS_PER_DAY = 24.06570982441908


def gmst_hours(days: float) -> float:
    """Greenwich Mean Sidereal Time in hours [0, 24) for days since J2000.0."""
    return wrap_hours(GMST_AT_J2000_HOURS + SIDEREAL_HOURS_PER_DAY * days)


def lst_from_days(days: float, lng: float) -> float:
    """Local sidereal time in hours [0, 24). Longitude is east positive."""
    return wrap_hours(gmst_hours(days) + lng / 15.0)


def local_sidereal_time_hours(
    timestamp: datetime, lng: float, utc_offset_minutes: float = 0.0
) -> float:
    """Local sidereal time for an instant and observer longitude.

    Args:
        timestamp: Instant of observation.
        lng: Observer longitude in degrees (east positive).
        utc_offset_minutes: Host clock offset, see timebase.julian_day.

    Returns:
        LST in hours, folded into [0, 24).
    """
    return lst_from_days(epoch_days(timestamp, utc_offset_minutes), lng)
