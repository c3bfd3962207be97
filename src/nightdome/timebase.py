"""Time base — timestamps to Julian Day and days since J2000.0."""

import logging
import math
from datetime import datetime

from pytz import timezone, utc
from timezonefinder import TimezoneFinder

from nightdome.errors import InvalidTimestampError, TimezoneLookupError

logger = logging.getLogger(__name__)

J2000_JD = 2451545.0  # Julian Day of 2000-01-01T12:00:00 UTC
UNIX_EPOCH_JD = 2440587.5  # Julian Day of 1970-01-01T00:00:00 UTC
MS_PER_DAY = 86400000.0
MINUTES_PER_DAY = 1440.0

_tf = TimezoneFinder()


def _unix_ms(timestamp: datetime) -> float:
    """Milliseconds since the Unix epoch. Naive datetimes are taken as UTC."""
    if not isinstance(timestamp, datetime):
        raise InvalidTimestampError(f"expected datetime, got {type(timestamp).__name__}")
    if timestamp.tzinfo is None:
        timestamp = utc.localize(timestamp)
    return timestamp.timestamp() * 1000.0


def julian_day(timestamp: datetime, utc_offset_minutes: float = 0.0) -> float:
    """Convert a timestamp to a Julian Day number.

    ``JD = ms / 86400000 - utc_offset_minutes / 1440 + 2440587.5``

    Args:
        timestamp: Instant to convert. Naive values are interpreted as UTC.
        utc_offset_minutes: Host clock offset in minutes, positive west of
            Greenwich. Subtracted as-is; 0 gives plain UTC arithmetic.

    Returns:
        Julian Day including the fractional time of day.

    Raises:
        InvalidTimestampError: If timestamp is not a datetime or the offset
            is not finite.
    """
    if not math.isfinite(utc_offset_minutes):
        raise InvalidTimestampError(f"UTC offset must be finite: {utc_offset_minutes}")
    return (
        _unix_ms(timestamp) / MS_PER_DAY
        - utc_offset_minutes / MINUTES_PER_DAY
        + UNIX_EPOCH_JD
    )


def epoch_days(timestamp: datetime, utc_offset_minutes: float = 0.0) -> float:
    """Days (with fraction) since J2000.0 for a timestamp. See julian_day."""
    return julian_day(timestamp, utc_offset_minutes) - J2000_JD


def to_utc(local: datetime, lat: float, lng: float) -> datetime:
    """Localize a naive wall-clock time at a location and convert it to UTC.

    Args:
        local: Naive local datetime as read off a clock at the location.
        lat: Latitude (decimal degrees).
        lng: Longitude (decimal degrees).

    Returns:
        Aware UTC datetime.

    Raises:
        TimezoneLookupError: If no timezone is known for the coordinates.
    """
    tz_str = _tf.timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise TimezoneLookupError(f"Timezone not found: lat={lat}, lng={lng}")
    local_tz = timezone(tz_str)
    utc_dt = local_tz.localize(local, is_dst=None).astimezone(utc)
    logger.debug("localized %s in %s -> %s", local, tz_str, utc_dt)
    return utc_dt
