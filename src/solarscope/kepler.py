"""Kepler solver: mean, eccentric and true anomaly for two-body orbits."""

import math

from solarscope.constants import EPOCH, KEPLER_ITERATIONS
from solarscope.models import CelestialBody
from solarscope.timescale import Instant, days_since_epoch


def mean_anomaly(orbital_period: float, when: Instant, epoch: Instant = EPOCH) -> float:
    """Mean anomaly in degrees, normalized to [0, 360).

    The rate uses abs(orbital_period); retrograde direction is applied later,
    when the anomaly is turned into a position. A zero period (the star) has
    no orbit and always returns 0.

    Args:
        orbital_period: Signed period in days.
        when: Instant to evaluate.
        epoch: Instant at which the mean anomaly is zero.

    Returns:
        Mean anomaly in degrees.
    """
    if orbital_period == 0:
        return 0.0
    anomaly = 360.0 * days_since_epoch(when, epoch) / abs(orbital_period)
    anomaly %= 360.0
    # Tiny negative inputs round up to exactly 360.0
    return 0.0 if anomaly >= 360.0 else anomaly


def solve_eccentric_anomaly(mean_anomaly_deg: float, eccentricity: float) -> float:
    """Solve Kepler's equation M = E - e*sin(E) for E, in radians.

    Fixed-point iteration E <- M + e*sin(E) seeded at E = M, run for a fixed
    number of steps with no convergence test.
    """
    m = math.radians(mean_anomaly_deg)
    e_anom = m
    for _ in range(KEPLER_ITERATIONS):
        e_anom = m + eccentricity * math.sin(e_anom)
    return e_anom


def true_anomaly(eccentric_anomaly: float, eccentricity: float) -> float:
    """True anomaly (radians) from eccentric anomaly via the half-angle identity."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + eccentricity) * math.sin(eccentric_anomaly / 2.0),
        math.sqrt(1.0 - eccentricity) * math.cos(eccentric_anomaly / 2.0),
    )


def anomalies(body: CelestialBody, when: Instant) -> tuple[float, float, float]:
    """(mean deg, eccentric rad, true rad) for a body at an instant."""
    m = mean_anomaly(body.orbital_period, when)
    e_anom = solve_eccentric_anomaly(m, body.eccentricity)
    return m, e_anom, true_anomaly(e_anom, body.eccentricity)


def mean_anomaly_degrees(body: CelestialBody, when: Instant) -> float:
    if body.is_star:
        return 0.0
    return mean_anomaly(body.orbital_period, when)


def true_anomaly_degrees(body: CelestialBody, when: Instant) -> float:
    """True anomaly for display, degrees in [0, 360). Zero for the star."""
    if body.is_star:
        return 0.0
    _, _, nu = anomalies(body, when)
    degrees = math.degrees(nu) % 360.0
    return 0.0 if degrees >= 360.0 else degrees
