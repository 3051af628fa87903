"""Tests for the subsolar point and region classification."""

from datetime import datetime

import pytest
from pytz import utc

from solarscope.constants import AXIAL_TILT_DEG
from solarscope.illumination import (
    REGIONS,
    angular_distance,
    classify_regions,
    daylight_band,
    normalize_longitude,
    subsolar_point,
)
from solarscope.models import CalendarDate, Region, SubsolarPoint
from solarscope.timescale import add_days


def test_june_solstice_noon():
    sub = subsolar_point(datetime(2000, 6, 21, 12, tzinfo=utc))
    assert sub.longitude == pytest.approx(0.0, abs=1e-9)
    assert sub.latitude == pytest.approx(23.4, abs=1.0)


def test_march_equinox_crossing():
    # Day 81 of a common year
    assert subsolar_point(CalendarDate(2001, 3, 22, 12)).latitude == pytest.approx(0.0, abs=1e-9)


def test_december_is_southern():
    assert subsolar_point(CalendarDate(2010, 12, 21)).latitude < -23.0


@pytest.mark.parametrize(
    "hour, expected",
    [(12, 0.0), (18, -90.0), (6, 90.0), (0, 180.0), (23, -165.0)],
)
def test_longitude_follows_utc_hour(hour, expected):
    assert subsolar_point(CalendarDate(2005, 4, 1, hour)).longitude == pytest.approx(expected)


def test_longitude_range_over_a_day():
    for minute in range(0, 24 * 60, 7):
        lon = subsolar_point(CalendarDate(2020, 2, 2, minute // 60, minute % 60)).longitude
        assert -180.0 < lon <= 180.0


def test_normalize_longitude():
    assert normalize_longitude(-180.0) == 180.0
    assert normalize_longitude(190.0) == -170.0
    assert normalize_longitude(540.0) == 180.0
    assert normalize_longitude(-45.5) == -45.5


def test_latitude_bounded_all_year():
    start = CalendarDate(2024, 1, 1, 6)
    for day in range(366):
        lat = subsolar_point(add_days(start, day)).latitude
        assert abs(lat) <= AXIAL_TILT_DEG + 1e-9


def test_latitude_bounded_for_ancient_dates():
    assert abs(subsolar_point(CalendarDate(-40000, 6, 21)).latitude) <= AXIAL_TILT_DEG + 1e-9


def test_angular_distance():
    assert angular_distance(10.0, 20.0, 10.0, 20.0) == 0.0
    assert angular_distance(0.0, 0.0, 0.0, 90.0) == pytest.approx(90.0)
    assert angular_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(180.0)
    assert angular_distance(90.0, 0.0, -90.0, 0.0) == pytest.approx(180.0)
    assert angular_distance(0.0, 170.0, 0.0, -170.0) == pytest.approx(20.0)


def test_bands_by_threshold():
    regions = (
        Region("Noon", 0.0, 0.0),
        Region("Dusk", 0.0, 89.9),
        Region("Civil", 0.0, 93.0),
        Region("Dark", 0.0, 96.5),
        Region("Antipode", 0.0, 180.0),
    )
    # Equinox noon: subsolar point at (0, 0)
    sunlit = classify_regions(CalendarDate(2001, 3, 22, 12), regions)
    assert sunlit.daylight == ("Noon", "Dusk")
    assert sunlit.twilight == ("Civil",)
    assert sunlit.night == ("Dark", "Antipode")


def test_solstice_catalog_examples():
    sunlit = classify_regions(datetime(2000, 6, 21, 12, tzinfo=utc))
    assert "UK" in sunlit.daylight
    assert "Egypt" in sunlit.daylight
    assert "Hawaii" in sunlit.night
    assert "New Zealand" in sunlit.night


@pytest.mark.parametrize(
    "when",
    [
        CalendarDate(2000, 1, 1, 0),
        CalendarDate(1969, 7, 20, 20, 17),
        CalendarDate(2031, 9, 30, 7, 45),
        CalendarDate(-3000, 12, 25, 15),
    ],
)
def test_every_region_in_exactly_one_band(when):
    sunlit = classify_regions(when)
    combined = sunlit.daylight + sunlit.twilight + sunlit.night
    assert sorted(combined) == sorted(r.name for r in REGIONS)
    assert len(combined) == len(set(combined))


def test_bands_keep_catalog_order():
    order = {r.name: i for i, r in enumerate(REGIONS)}
    sunlit = classify_regions(CalendarDate(2015, 10, 3, 9, 30))
    for band in (sunlit.daylight, sunlit.twilight, sunlit.night):
        indices = [order[name] for name in band]
        assert indices == sorted(indices)


def test_daylight_band_without_wrap():
    assert daylight_band(SubsolarPoint(0.0, 0.0)) == ((-90.0, 90.0),)


def test_daylight_band_wraps_east():
    assert daylight_band(SubsolarPoint(10.0, 150.0)) == ((60.0, 180.0), (-180.0, -120.0))


def test_daylight_band_wraps_west():
    assert daylight_band(SubsolarPoint(-10.0, -150.0)) == ((-180.0, -60.0), (120.0, 180.0))
