"""Screen projector — horizon coordinates onto a circular sky disc.

Altitude maps linearly to radius: the zenith is the disc center and the
horizon is the ring at ``Viewport.radius``. Bodies below the horizon land
outside the ring; callers hide them through ScreenPoint.visible.
"""

import math

from nightdome.angles import wrap_deg
from nightdome.models import CardinalPoint, Viewport

DRAG_SENSITIVITY = 0.4  # Degrees of rotation per pixel dragged

_CARDINALS: tuple[tuple[str, float], ...] = (
    ("N", 0.0),
    ("E", 90.0),
    ("S", 180.0),
    ("W", 270.0),
)


def project(
    az_deg: float, alt_deg: float, viewport: Viewport, rotation: float = 0.0
) -> tuple[float, float]:
    """Map azimuth/altitude to pixel coordinates on the sky disc.

    The -90 degree term turns the east-at-zero trigonometric angle into
    north-at-top, so with rotation 0 north is up and east is to the right.

    Args:
        az_deg: Azimuth (degrees, 0=N).
        alt_deg: Altitude (degrees).
        viewport: Target surface.
        rotation: Extra rotation of the disc (degrees).

    Returns:
        (x, y) in viewport pixels. Not clipped.
    """
    cx, cy = viewport.center
    r = (1 - alt_deg / 90) * viewport.radius
    theta = math.radians(az_deg - 90 + rotation)
    return cx + r * math.cos(theta), cy + r * math.sin(theta)


def drag_rotation(rotation: float, dx: float, sensitivity: float = DRAG_SENSITIVITY) -> float:
    """New disc rotation after a horizontal drag of ``dx`` pixels, in [0, 360)."""
    return wrap_deg(rotation + dx * sensitivity)


def cardinal_points(
    viewport: Viewport, rotation: float = 0.0, alt_deg: float = 2.0
) -> tuple[CardinalPoint, ...]:
    """Compass label positions just inside the horizon ring."""
    points: list[CardinalPoint] = []
    for label, az in _CARDINALS:
        x, y = project(az, alt_deg, viewport, rotation)
        points.append(CardinalPoint(label=label, x=x, y=y))
    return tuple(points)
