from datetime import datetime, timedelta

import pytest
from pytz import timezone, utc

from nightdome.errors import InvalidTimestampError
from nightdome.sidereal import (
    GMST_AT_J2000_HOURS,
    SIDEREAL_HOURS_PER_DAY,
    gmst_hours,
    local_sidereal_time_hours,
    lst_from_days,
)
from nightdome.timebase import epoch_days, julian_day, to_utc


class TestJulianDay:
    def test_j2000_instant(self, j2000):
        assert julian_day(j2000) == pytest.approx(2451545.0, abs=1e-9)
        assert epoch_days(j2000) == pytest.approx(0.0, abs=1e-9)

    def test_unix_epoch(self):
        assert julian_day(datetime(1970, 1, 1, tzinfo=utc)) == pytest.approx(2440587.5)

    def test_naive_is_utc(self, j2000):
        assert epoch_days(j2000.replace(tzinfo=None)) == pytest.approx(epoch_days(j2000))

    def test_fractional_day(self, j2000):
        assert epoch_days(j2000 + timedelta(hours=6)) == pytest.approx(0.25)

    def test_aware_non_utc_is_same_instant(self, j2000):
        seoul = j2000.astimezone(timezone("Asia/Seoul"))
        assert epoch_days(seoul) == pytest.approx(0.0, abs=1e-9)

    def test_offset_subtracted_in_days(self, j2000):
        assert epoch_days(j2000, utc_offset_minutes=-540) == pytest.approx(540 / 1440)
        assert epoch_days(j2000, utc_offset_minutes=60) == pytest.approx(-1 / 24)

    def test_rejects_non_datetime(self):
        with pytest.raises(InvalidTimestampError):
            epoch_days("2000-01-01 12:00")

    def test_rejects_non_finite_offset(self, j2000):
        with pytest.raises(InvalidTimestampError):
            epoch_days(j2000, utc_offset_minutes=float("nan"))


class TestToUtc:
    def test_seoul_wall_clock(self):
        utc_dt = to_utc(datetime(1995, 1, 15, 0, 0), 37.5665, 126.978)
        assert utc_dt == datetime(1995, 1, 14, 15, 0, tzinfo=utc)


class TestSiderealClock:
    def test_gmst_at_j2000(self):
        assert gmst_hours(0.0) == pytest.approx(GMST_AT_J2000_HOURS)

    def test_longitude_offset(self):
        assert lst_from_days(0.0, 15.0) == pytest.approx(GMST_AT_J2000_HOURS + 1)
        assert lst_from_days(0.0, -90.0) == pytest.approx(GMST_AT_J2000_HOURS - 6)

    def test_folds_past_24(self):
        # 18.697 + 90/15 = 24.697
        assert lst_from_days(0.0, 90.0) == pytest.approx(GMST_AT_J2000_HOURS + 6 - 24)

    def test_periodic_over_one_sidereal_day(self):
        sidereal_day = 24.0 / SIDEREAL_HOURS_PER_DAY
        for days in (-1234.5, 0.0, 0.3, 8765.25):
            assert lst_from_days(days + sidereal_day, 10.0) == pytest.approx(
                lst_from_days(days, 10.0), abs=1e-6
            )

    def test_wrap_boundary(self):
        # GMST reaches 24h at this epoch day
        wrap_day = (24.0 - GMST_AT_J2000_HOURS) / SIDEREAL_HOURS_PER_DAY
        eps = 1e-6
        before = gmst_hours(wrap_day - eps)
        after = gmst_hours(wrap_day + eps)
        assert 23.99 < before < 24.0
        assert 0.0 <= after < 0.01

    @pytest.mark.parametrize("lng", [-180.0, -45.5, 0.0, 100.0, 180.0])
    def test_always_in_range(self, j2000, lng):
        for hours in range(0, 24 * 40, 7):
            lst = local_sidereal_time_hours(j2000 + timedelta(hours=hours), lng)
            assert 0.0 <= lst < 24.0
