import math

import pytest

from nightdome.errors import InvalidViewportError
from nightdome.models import Viewport
from nightdome.projection import cardinal_points, drag_rotation, project


class TestProject:
    @pytest.mark.parametrize("az", [0.0, 45.0, 190.0, 359.9])
    @pytest.mark.parametrize("rotation", [0.0, 33.0, 270.0])
    def test_zenith_is_center(self, viewport, az, rotation):
        assert project(az, 90.0, viewport, rotation) == (400.0, 300.0)

    @pytest.mark.parametrize("az", [0.0, 72.0, 180.0, 300.0])
    def test_horizon_on_ring(self, viewport, az):
        x, y = project(az, 0.0, viewport, rotation=15.0)
        assert math.hypot(x - 400.0, y - 300.0) == pytest.approx(0.95 * 600 / 2)

    def test_radius_linear_in_altitude(self, viewport):
        x, y = project(0.0, 45.0, viewport)
        assert math.hypot(x - 400.0, y - 300.0) == pytest.approx(viewport.radius / 2)

    def test_below_horizon_projects_outside(self, viewport):
        x, y = project(120.0, -30.0, viewport)
        assert math.hypot(x - 400.0, y - 300.0) > viewport.radius

    def test_north_up_east_right(self, viewport):
        r = viewport.radius
        assert project(0.0, 0.0, viewport) == pytest.approx((400.0, 300.0 - r))
        assert project(90.0, 0.0, viewport) == pytest.approx((400.0 + r, 300.0))
        assert project(180.0, 0.0, viewport) == pytest.approx((400.0, 300.0 + r))

    def test_rotation_turns_disc(self, viewport):
        assert project(0.0, 0.0, viewport, rotation=90.0) == pytest.approx(
            project(90.0, 0.0, viewport)
        )


class TestViewport:
    def test_radius_uses_short_side(self):
        assert Viewport(width=1000, height=400).radius == pytest.approx(190.0)

    @pytest.mark.parametrize("width, height", [(0, 100), (100, -1), (float("inf"), 10)])
    def test_rejects_bad_size(self, width, height):
        with pytest.raises(InvalidViewportError):
            Viewport(width=width, height=height)


class TestDragRotation:
    @pytest.mark.parametrize(
        "rotation, dx, expected",
        [
            (0.0, 10.0, 4.0),
            (350.0, 50.0, 10.0),
            (10.0, -50.0, 350.0),
            (180.0, 0.0, 180.0),
        ],
    )
    def test_wraps_into_full_circle(self, rotation, dx, expected):
        assert drag_rotation(rotation, dx) == pytest.approx(expected)


def test_cardinal_points_near_horizon(viewport):
    points = {p.label: p for p in cardinal_points(viewport)}
    assert list(points) == ["N", "E", "S", "W"]
    assert points["N"].y < 300.0 < points["S"].y
    assert points["W"].x < 400.0 < points["E"].x
    for p in points.values():
        assert math.hypot(p.x - 400.0, p.y - 300.0) == pytest.approx(viewport.radius * 88 / 90)
