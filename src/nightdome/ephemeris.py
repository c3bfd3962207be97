"""Body ephemeris — low-precision Sun, Moon and planet equatorial positions.

Every function takes days since J2000.0 (see timebase.epoch_days) and returns
an Equatorial with right ascension in [0, 24) hours and declination in
[-90, 90] degrees.
"""

import math

from nightdome.angles import clamp, wrap, wrap_hours
from nightdome.errors import InvalidElementsError
from nightdome.models import Equatorial, OrbitalElements

# Fixed iteration counts; changing them changes the numerical output.
PLANET_KEPLER_ITERATIONS = 6
EARTH_KEPLER_ITERATIONS = 5

MOON_OBLIQUITY_DEG = 23.4397
PLANET_OBLIQUITY_DEG = 23.4392911
DAYS_PER_JULIAN_CENTURY = 36525.0

_TWO_PI = 2 * math.pi

Vector = tuple[float, float, float]


def _ra_hours(ra_rad: float) -> float:
    return wrap_hours(math.degrees(ra_rad) / 15.0)


def sun_position(days: float) -> Equatorial:
    """Apparent Sun position from the standard low-precision solar formula.

    Mean longitude and anomaly are linear in time; two equation-of-center
    terms give the ecliptic longitude, which is rotated by a slowly drifting
    obliquity.
    """
    mean_lon = (280.460 + 0.9856474 * days) % 360
    g = math.radians((357.528 + 0.9856003 * days) % 360)
    lam = math.radians(mean_lon + 1.915 * math.sin(g) + 0.020 * math.sin(2 * g))
    eps = math.radians(23.439 - 0.0000004 * days)

    ra = math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))
    dec = math.asin(clamp(math.sin(eps) * math.sin(lam), -1.0, 1.0))
    return Equatorial(ra_hours=_ra_hours(ra), dec_deg=math.degrees(dec))


def moon_position(days: float) -> Equatorial:
    """Moon position from a truncated lunar theory.

    One periodic term each for longitude and latitude. The ecliptic latitude
    is too large to ignore, so the conversion uses the full spherical
    triangle rather than a plain rotation.
    """
    mean_lon = math.radians((218.316 + 13.176396 * days) % 360)
    mean_anomaly = math.radians((134.963 + 13.064993 * days) % 360)
    mean_distance = math.radians((93.272 + 13.229350 * days) % 360)

    lon = mean_lon + math.radians(6.289 * math.sin(mean_anomaly))
    lat = math.radians(5.128 * math.sin(mean_distance))
    eps = math.radians(MOON_OBLIQUITY_DEG)

    ra = math.atan2(
        math.sin(lon) * math.cos(eps) - math.tan(lat) * math.sin(eps), math.cos(lon)
    )
    sin_dec = math.sin(lat) * math.cos(eps) + math.cos(lat) * math.sin(eps) * math.sin(lon)
    dec = math.asin(clamp(sin_dec, -1.0, 1.0))
    return Equatorial(ra_hours=_ra_hours(ra), dec_deg=math.degrees(dec))


def solve_kepler(mean_anomaly: float, eccentricity: float, iterations: int) -> float:
    """Solve ``E = M + e sin E`` by fixed-point iteration starting at E = M.

    Runs exactly ``iterations`` steps with no convergence check.

    Args:
        mean_anomaly: M in radians.
        eccentricity: e, expected in [0, 1).
        iterations: Number of fixed-point steps.

    Returns:
        Eccentric anomaly E in radians.
    """
    ecc_anomaly = mean_anomaly
    for _ in range(iterations):
        ecc_anomaly = mean_anomaly + eccentricity * math.sin(ecc_anomaly)
    return ecc_anomaly


def earth_heliocentric(days: float) -> Vector:
    """Earth's heliocentric ecliptic position in AU from its own fixed elements.

    Earth is taken on a 1 AU orbit in the ecliptic plane. The eccentricity
    and perihelion rates are per Julian century.
    """
    centuries = days / DAYS_PER_JULIAN_CENTURY
    mean_anomaly = math.radians((357.52911 + 0.98560028 * days) % 360)
    ecc = 0.016708634 - 0.000042037 * centuries
    perihelion = math.radians(102.93735 + 1.71946 * centuries)
    # Seeded at M + e sin M (one step from M), then the fixed count.
    ecc_anomaly = solve_kepler(mean_anomaly, ecc, 1 + EARTH_KEPLER_ITERATIONS)

    x_orb = math.cos(ecc_anomaly) - ecc
    y_orb = math.sqrt(1 - ecc * ecc) * math.sin(ecc_anomaly)
    return (
        x_orb * math.cos(perihelion) - y_orb * math.sin(perihelion),
        x_orb * math.sin(perihelion) + y_orb * math.cos(perihelion),
        0.0,
    )


def planet_heliocentric(elements: OrbitalElements, days: float) -> Vector:
    """Heliocentric ecliptic position of a planet in AU.

    Elements are evaluated at ``days`` through their linear rates, Kepler's
    equation is solved with PLANET_KEPLER_ITERATIONS steps, and the in-plane
    position is rotated by the argument of perihelion (longitude of perihelion
    minus node), inclination and node.

    Raises:
        InvalidElementsError: If the eccentricity at ``days`` is outside [0, 1).
    """
    a = elements.semimajor_axis.at(days)
    e = elements.eccentricity.at(days)
    if not 0.0 <= e < 1.0:
        raise InvalidElementsError(f"eccentricity {e} at day {days} is outside [0, 1)")
    i = math.radians(elements.inclination.at(days))
    mean_lon = math.radians(elements.mean_longitude.at(days) % 360)
    w = math.radians(elements.perihelion_longitude.at(days))
    node = math.radians(elements.ascending_node.at(days))

    mean_anomaly = wrap(mean_lon - w, _TWO_PI)
    ecc_anomaly = solve_kepler(mean_anomaly, e, PLANET_KEPLER_ITERATIONS)
    arg_perihelion = w - node

    x_orb = a * (math.cos(ecc_anomaly) - e)
    y_orb = a * math.sqrt(1 - e * e) * math.sin(ecc_anomaly)

    cos_w, sin_w = math.cos(arg_perihelion), math.sin(arg_perihelion)
    cos_n, sin_n = math.cos(node), math.sin(node)
    cos_i, sin_i = math.cos(i), math.sin(i)

    x = x_orb * (cos_w * cos_n - sin_w * sin_n * cos_i) - y_orb * (
        sin_w * cos_n + cos_w * sin_n * cos_i
    )
    y = x_orb * (cos_w * sin_n + sin_w * cos_n * cos_i) + y_orb * (
        cos_w * cos_n * cos_i - sin_w * sin_n
    )
    z = x_orb * (sin_w * sin_i) + y_orb * (cos_w * sin_i)
    return x, y, z


def planet_position(elements: OrbitalElements, days: float) -> Equatorial:
    """Geocentric equatorial position of a planet from its orbital elements."""
    px, py, pz = planet_heliocentric(elements, days)
    ex, ey, ez = earth_heliocentric(days)
    x_ecl, y_ecl, z_ecl = px - ex, py - ey, pz - ez

    eps = math.radians(PLANET_OBLIQUITY_DEG)
    x_eq = x_ecl
    y_eq = y_ecl * math.cos(eps) - z_ecl * math.sin(eps)
    z_eq = y_ecl * math.sin(eps) + z_ecl * math.cos(eps)

    ra = math.atan2(y_eq, x_eq)
    # atan2 over the equatorial-plane radius stays well-conditioned near the poles
    dec = math.atan2(z_eq, math.hypot(x_eq, y_eq))
    return Equatorial(ra_hours=_ra_hours(ra), dec_deg=math.degrees(dec))
