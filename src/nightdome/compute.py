"""Position orchestration — body dispatch and the full sky-position chain."""

import logging
from datetime import datetime

from nightdome.catalog import Catalog, default_catalog
from nightdome.ephemeris import moon_position, planet_position, sun_position
from nightdome.errors import UnsupportedBodyKindError
from nightdome.horizontal import equatorial_to_horizontal
from nightdome.models import (
    Body,
    ConstellationLine,
    Equatorial,
    FixedStar,
    Moon,
    Observer,
    Planet,
    ScreenPoint,
    SkySnapshot,
    Sun,
    TwilightPhase,
    Viewport,
)
from nightdome.projection import project
from nightdome.sidereal import lst_from_days
from nightdome.timebase import epoch_days

logger = logging.getLogger(__name__)

# Sun altitude thresholds (degrees), brightest phase first
_TWILIGHT_LIMITS: tuple[tuple[float, TwilightPhase], ...] = (
    (0.0, TwilightPhase.DAY),
    (-6.0, TwilightPhase.CIVIL),
    (-12.0, TwilightPhase.NAUTICAL),
    (-18.0, TwilightPhase.ASTRONOMICAL),
)


def resolve_equatorial(body: Body, days: float) -> Equatorial:
    """Equatorial coordinates of a body at ``days`` since J2000.0.

    Raises:
        UnsupportedBodyKindError: If body is not one of FixedStar, Sun, Moon, Planet.
    """
    if isinstance(body, FixedStar):
        return Equatorial(ra_hours=body.ra_hours, dec_deg=body.dec_deg)
    if isinstance(body, Sun):
        return sun_position(days)
    if isinstance(body, Moon):
        return moon_position(days)
    if isinstance(body, Planet):
        return planet_position(body.elements, days)
    raise UnsupportedBodyKindError(f"Unsupported body kind: {type(body).__name__}")


def _screen_point(
    eq: Equatorial, lst: float, observer: Observer, viewport: Viewport, rotation: float
) -> ScreenPoint:
    hz = equatorial_to_horizontal(eq.ra_hours, eq.dec_deg, lst, observer.lat)
    x, y = project(hz.az_deg, hz.alt_deg, viewport, rotation)
    return ScreenPoint(
        x=x, y=y, az_deg=hz.az_deg, alt_deg=hz.alt_deg, visible=hz.alt_deg >= 0
    )


def resolve_position(
    body: Body,
    timestamp: datetime,
    observer: Observer,
    viewport: Viewport,
    rotation: float = 0.0,
    utc_offset_minutes: float = 0.0,
) -> ScreenPoint:
    """Resolve one body to its point on the sky disc.

    Chains ephemeris → sidereal clock → horizontal transform → projector.

    Args:
        body: Body descriptor.
        timestamp: Instant of observation.
        observer: Observer location.
        viewport: Target surface size.
        rotation: Disc rotation offset (degrees).
        utc_offset_minutes: Host clock offset, see timebase.julian_day.

    Returns:
        ScreenPoint with visible set when the body is at or above the horizon.

    Raises:
        UnsupportedBodyKindError: For an unknown body kind.
        InvalidTimestampError: If timestamp is not a datetime.
    """
    days = epoch_days(timestamp, utc_offset_minutes)
    eq = resolve_equatorial(body, days)
    lst = lst_from_days(days, observer.lng)
    return _screen_point(eq, lst, observer, viewport, rotation)


def twilight_phase(sun_alt_deg: float) -> TwilightPhase:
    """Classify sky brightness from the Sun's altitude."""
    for limit, phase in _TWILIGHT_LIMITS:
        if sun_alt_deg > limit:
            return phase
    return TwilightPhase.NIGHT


def _visible_lines(
    lines: tuple[ConstellationLine, ...], positions: dict[str, ScreenPoint]
) -> tuple[ConstellationLine, ...]:
    def shown(star_id: str) -> bool:
        pos = positions.get(star_id)
        return pos is not None and pos.visible

    return tuple(line for line in lines if shown(line.star_from) and shown(line.star_to))


def compute_sky(
    observer: Observer,
    when: datetime,
    viewport: Viewport,
    rotation: float = 0.0,
    catalog: Catalog | None = None,
    utc_offset_minutes: float = 0.0,
) -> SkySnapshot:
    """Resolve every catalog body for one instant and return a SkySnapshot.

    Epoch days and sidereal time are computed once and shared by all bodies.

    Args:
        observer: Observer location.
        when: Instant of observation.
        viewport: Target surface size.
        rotation: Disc rotation offset (degrees).
        catalog: Bodies and constellation lines. Packaged catalog if None.
        utc_offset_minutes: Host clock offset, see timebase.julian_day.

    Returns:
        SkySnapshot with positions keyed by body id, constellation segments
        whose two stars are both above the horizon, and the twilight phase.
    """
    if catalog is None:
        catalog = default_catalog()
    days = epoch_days(when, utc_offset_minutes)
    lst = lst_from_days(days, observer.lng)
    logger.debug("epoch days %.6f, LST %.4fh at %s", days, lst, observer)

    bodies = catalog.bodies
    positions = {
        body.id: _screen_point(resolve_equatorial(body, days), lst, observer, viewport, rotation)
        for body in bodies
    }
    lines = _visible_lines(catalog.constellation_lines, positions)
    twilight = twilight_phase(positions[Sun().id].alt_deg)
    logger.debug(
        "%d/%d bodies visible, %d constellation lines, %s",
        sum(p.visible for p in positions.values()),
        len(positions),
        len(lines),
        twilight.value,
    )

    return SkySnapshot(
        observer=observer,
        when=when,
        viewport=viewport,
        rotation=rotation,
        bodies=bodies,
        positions=positions,
        constellation_lines=lines,
        twilight=twilight,
    )
