"""Shared fixtures for engine tests."""

import pytest

from solarscope.constants import EPOCH
from solarscope.models import CelestialBody, Temperature


@pytest.fixture
def epoch():
    """J2000.0 as a CalendarDate."""
    return EPOCH


@pytest.fixture
def make_body():
    """Factory for synthetic catalog entries with sane defaults."""

    def _make(**overrides) -> CelestialBody:
        fields = dict(
            id="testbody",
            name="Test Body",
            type="planet",
            color="#FFFFFF",
            radius=1000.0,
            mass=1.0e22,
            distance_from_sun=1.0,
            orbital_period=365.25,
            rotation_period=24.0,
            axial_tilt=0.0,
            temperature=Temperature(0.0, 0.0),
            eccentricity=0.0,
            inclination=0.0,
        )
        fields.update(overrides)
        return CelestialBody(**fields)

    return _make


@pytest.fixture
def earth_like(make_body):
    """Earth's orbital elements, detached from the catalog."""
    return make_body(
        id="earth",
        name="Earth",
        distance_from_sun=1.0,
        orbital_period=365.25,
        eccentricity=0.0167,
        inclination=0.0,
        radius=6371.0,
    )
