"""Tests for display formatting."""

import pytest

from solarscope.formatting import (
    format_coordinate,
    format_distance,
    format_orbital_period,
    format_rotation_period,
    format_scientific,
    format_temperature,
)
from solarscope.models import Temperature


def test_format_distance():
    assert format_distance(1.0) == "1.000 AU"
    assert format_distance(30.06912) == "30.069 AU"
    assert format_distance(0.00257) == "384,467 km"


@pytest.mark.parametrize(
    "num, expected",
    [(1.989e30, "1.99e+30"), (1.0659e16, "1.07e+16"), (5000, "5,000"), (1234.5, "1,234.5"), (0.25, "0.25")],
)
def test_format_scientific(num, expected):
    assert format_scientific(num) == expected


def test_format_coordinate():
    assert format_coordinate(23.44, "lat") == "23.4°N"
    assert format_coordinate(-23.44, "lat") == "23.4°S"
    assert format_coordinate(-12.04, "lon") == "12.0°W"
    assert format_coordinate(0.0, "lon") == "0.0°E"


def test_format_temperature():
    assert format_temperature(Temperature(462, 462)) == "462°C"
    assert format_temperature(Temperature(-180, 430)) == "-180 to 430°C"


def test_format_orbital_period():
    assert format_orbital_period(87.97) == "88.0 days"
    assert format_orbital_period(4333) == "11.9 years"
    assert format_orbital_period(-5.877) == "5.9 days"
    assert format_orbital_period(87.97, "ko") == "88.0 일"


def test_format_rotation_period():
    assert format_rotation_period(23.93) == "23.9 hours"
    assert format_rotation_period(-5832.5) == "243.0 Earth days"
