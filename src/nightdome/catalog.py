"""Reference catalogs — stars, planetary elements and constellation lines.

The data files live under ``nightdome/data``. Loaded catalogs are plain
tuples of frozen records and are passed into the compute layer explicitly.
"""

import csv
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from nightdome.ephemeris import DAYS_PER_JULIAN_CENTURY
from nightdome.errors import CatalogError
from nightdome.models import (
    Body,
    ConstellationLine,
    ElementRate,
    FixedStar,
    Moon,
    OrbitalElements,
    Planet,
    Sun,
)

logger = logging.getLogger(__name__)

_DATA = Path(__file__).parent / "data"

_PLANET_COLUMNS = 14


@dataclass(frozen=True)
class Catalog:
    """Every body a sky snapshot resolves, plus the lines joining stars."""

    stars: tuple[FixedStar, ...]
    planets: tuple[Planet, ...]
    constellation_lines: tuple[ConstellationLine, ...]

    @property
    def bodies(self) -> tuple[Body, ...]:
        return (Sun(), Moon(), *self.planets, *self.stars)


def _data_lines(path: Path):
    """Yield (line number, fields) for non-blank, non-comment lines."""
    with path.open(encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.split("#", 1)[0].strip()
            if line:
                yield lineno, line.split()


def load_stars(path: Path | None = None) -> tuple[FixedStar, ...]:
    """Parse a star CSV with columns ``id,name,ra_hours,dec_deg,magnitude``.

    Raises:
        CatalogError: On a missing column or non-numeric coordinate.
    """
    path = path or _DATA / "stars.csv"
    stars: list[FixedStar] = []
    with path.open(encoding="utf-8", newline="") as f:
        for lineno, row in enumerate(csv.DictReader(f), start=2):
            try:
                stars.append(
                    FixedStar(
                        id=row["id"],
                        name=row["name"],
                        ra_hours=float(row["ra_hours"]),
                        dec_deg=float(row["dec_deg"]),
                        magnitude=float(row["magnitude"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise CatalogError(f"{path.name}:{lineno}: {exc}") from exc
    logger.debug("loaded %d stars from %s", len(stars), path)
    return tuple(stars)


def load_planets(path: Path | None = None) -> tuple[Planet, ...]:
    """Parse the planetary element table.

    File format: ``id name a a_rate e e_rate i i_rate L L_rate w w_rate N N_rate``.
    The mean-longitude rate is given per Julian century and is converted to
    per day here; every other rate is already per day.

    Returns:
        Tuple of Planet descriptors in file order.
    """
    path = path or _DATA / "planets.dat"
    planets: list[Planet] = []
    for lineno, parts in _data_lines(path):
        if len(parts) != _PLANET_COLUMNS:
            raise CatalogError(
                f"{path.name}:{lineno}: expected {_PLANET_COLUMNS} columns, got {len(parts)}"
            )
        try:
            v = [float(p) for p in parts[2:]]
        except ValueError as exc:
            raise CatalogError(f"{path.name}:{lineno}: {exc}") from exc
        if not 0.0 <= v[2] < 1.0:
            raise CatalogError(f"{path.name}:{lineno}: eccentricity {v[2]} is outside [0, 1)")
        elements = OrbitalElements(
            semimajor_axis=ElementRate(v[0], v[1]),
            eccentricity=ElementRate(v[2], v[3]),
            inclination=ElementRate(v[4], v[5]),
            mean_longitude=ElementRate(v[6], v[7] / DAYS_PER_JULIAN_CENTURY),
            perihelion_longitude=ElementRate(v[8], v[9]),
            ascending_node=ElementRate(v[10], v[11]),
        )
        planets.append(Planet(id=parts[0], name=parts[1], elements=elements))
    logger.debug("loaded %d planets from %s", len(planets), path)
    return tuple(planets)


def load_constellation_lines(path: Path | None = None) -> tuple[ConstellationLine, ...]:
    """Parse constellation line segments.

    File format: ``name line_pair_count STAR1 STAR2 STAR3 STAR4 ...``
    Consecutive star id pairs form individual line segments.

    Returns:
        Tuple of ConstellationLine objects. Each is a star_from → star_to segment.
    """
    path = path or _DATA / "constellations.fab"
    lines: list[ConstellationLine] = []
    for lineno, parts in _data_lines(path):
        if len(parts) < 4 or len(parts[2:]) % 2:
            raise CatalogError(f"{path.name}:{lineno}: unpaired star ids")
        name = parts[0]
        ids = parts[2:]
        for i in range(0, len(ids) - 1, 2):
            lines.append(ConstellationLine(star_from=ids[i], star_to=ids[i + 1], name=name))
    return tuple(lines)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The packaged catalogs, loaded once per process."""
    return Catalog(
        stars=load_stars(),
        planets=load_planets(),
        constellation_lines=load_constellation_lines(),
    )
