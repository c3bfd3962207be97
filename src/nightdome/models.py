"""Data model definitions — explicit boundaries between catalog, compute, and render layers."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from nightdome.errors import InvalidObserverError, InvalidViewportError


@dataclass(frozen=True)
class Observer:
    """Geographic position of the observer. Validated on construction."""

    lat: float  # Latitude (decimal degrees, -90..90)
    lng: float  # Longitude (decimal degrees, -180..180, east positive)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and -90.0 <= self.lat <= 90.0):
            raise InvalidObserverError(f"latitude out of range: {self.lat}")
        if not (math.isfinite(self.lng) and -180.0 <= self.lng <= 180.0):
            raise InvalidObserverError(f"longitude out of range: {self.lng}")


@dataclass(frozen=True)
class Viewport:
    """Pixel size of the target sky-map surface."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not (math.isfinite(value) and value > 0):
                raise InvalidViewportError(f"viewport {name} must be positive: {value}")

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def radius(self) -> float:
        """Radius of the horizon ring: 95% of the half short side."""
        return min(self.width, self.height) / 2 * 0.95


@dataclass(frozen=True)
class Equatorial:
    """Equatorial sky coordinates."""

    ra_hours: float  # Right ascension (hours, 0..24)
    dec_deg: float  # Declination (degrees, -90..90)


@dataclass(frozen=True)
class Horizontal:
    """Local horizon coordinates."""

    az_deg: float  # Azimuth (0=N, 90=E, 180=S, 270=W)
    alt_deg: float  # Altitude above the horizon (degrees)


@dataclass(frozen=True)
class ElementRate:
    """A single orbital element: value at J2000.0 plus a linear rate per day."""

    base: float
    rate: float = 0.0

    def at(self, days: float) -> float:
        return self.base + self.rate * days


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian elements of a planet, each evolving linearly with time."""

    semimajor_axis: ElementRate  # a (AU)
    eccentricity: ElementRate  # e
    inclination: ElementRate  # i (degrees)
    mean_longitude: ElementRate  # L (degrees)
    perihelion_longitude: ElementRate  # w (degrees)
    ascending_node: ElementRate  # N (degrees)


@dataclass(frozen=True)
class FixedStar:
    """Catalog star with static equatorial coordinates."""

    id: str
    name: str
    ra_hours: float
    dec_deg: float
    magnitude: float  # Apparent magnitude (smaller is brighter)


@dataclass(frozen=True)
class Sun:
    id: str = "sun"
    name: str = "Sun"


@dataclass(frozen=True)
class Moon:
    id: str = "moon"
    name: str = "Moon"


@dataclass(frozen=True)
class Planet:
    """Major planet whose position comes from its orbital elements."""

    id: str
    name: str
    elements: OrbitalElements


Body = FixedStar | Sun | Moon | Planet


@dataclass(frozen=True)
class ScreenPoint:
    """Position of one body on the sky disc. Recomputed on every query."""

    x: float  # Pixel x within the viewport
    y: float  # Pixel y within the viewport
    az_deg: float
    alt_deg: float
    visible: bool  # alt_deg >= 0


@dataclass(frozen=True)
class ConstellationLine:
    """A single constellation line segment. A pair of star ids."""

    star_from: str
    star_to: str
    name: str  # Constellation name ("Orion", "Crux", etc.)


@dataclass(frozen=True)
class CardinalPoint:
    """Compass label position near the horizon ring."""

    label: str  # "N", "E", "S", "W"
    x: float
    y: float


class TwilightPhase(str, Enum):
    """Sky brightness phase derived from the Sun's altitude."""

    DAY = "day"
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"
    NIGHT = "night"


@dataclass(frozen=True)
class SkySnapshot:
    """The sole input to renderers. Fully computed state for one instant."""

    observer: Observer
    when: datetime  # Instant the snapshot was computed for
    viewport: Viewport
    rotation: float  # Rotation offset applied to the disc (degrees)
    bodies: tuple[Body, ...]  # Every body that was resolved, in catalog order
    positions: dict[str, ScreenPoint] = field(hash=False)  # Keyed by body id
    constellation_lines: tuple[ConstellationLine, ...]  # Both ends visible
    twilight: TwilightPhase

    def visible_bodies(self) -> tuple[Body, ...]:
        return tuple(b for b in self.bodies if self.positions[b.id].visible)
