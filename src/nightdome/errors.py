"""Exception types raised by the sky-position pipeline."""


class NightDomeError(Exception):
    """Base class for every error raised by nightdome."""


class InvalidObserverError(NightDomeError, ValueError):
    """Observer latitude/longitude outside the valid range."""


class InvalidViewportError(NightDomeError, ValueError):
    """Viewport with a non-positive or non-finite dimension."""


class InvalidTimestampError(NightDomeError, ValueError):
    """Timestamp that is not a datetime, or a non-finite UTC offset."""


class UnsupportedBodyKindError(NightDomeError, TypeError):
    """Body descriptor that matches none of the known body kinds."""


class TimezoneLookupError(NightDomeError):
    """No IANA timezone could be resolved for an observer location."""


class CatalogError(NightDomeError):
    """Malformed row in a reference catalog file."""


class ConfigError(NightDomeError):
    """Invalid value in an environment setting."""


class InvalidElementsError(NightDomeError, ValueError):
    """Orbital elements that do not describe a closed orbit (e outside [0, 1))."""
