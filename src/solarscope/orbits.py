"""Position transform — orbital elements and a date to scene coordinates.

Scene frame: x/z span the reference (ecliptic) plane, y is "up". Orbits are
tilted about the x axis by their inclination only; argument of perihelion and
longitude of ascending node are kept as display values and are not applied.
"""

import math

import numpy as np

from solarscope.constants import DISTANCE_SCALE
from solarscope.kepler import anomalies, true_anomaly_degrees
from solarscope.models import ORIGIN, CelestialBody, OrbitalState, Position
from solarscope.scale import semi_major_axis
from solarscope.timescale import Instant

# Degrees, J2000. Unknown ids fall back to 0.
ARGUMENT_OF_PERIHELION: dict[str, float] = {
    "mercury": 29.12,
    "venus": 54.85,
    "earth": 114.21,
    "mars": 286.50,
    "jupiter": 273.87,
    "saturn": 339.39,
    "uranus": 96.99,
    "neptune": 273.19,
    "pluto": 113.76,
    "ceres": 73.60,
    "eris": 151.43,
    "makemake": 297.24,
    "haumea": 239.18,
}

LONGITUDE_OF_ASCENDING_NODE: dict[str, float] = {
    "mercury": 48.33,
    "venus": 76.68,
    "earth": 348.74,
    "mars": 49.56,
    "jupiter": 100.46,
    "saturn": 113.64,
    "uranus": 74.01,
    "neptune": 131.78,
    "pluto": 110.30,
    "ceres": 80.33,
    "eris": 35.87,
    "makemake": 79.38,
    "haumea": 121.90,
}


def _direction(body: CelestialBody) -> int:
    return -1 if body.orbital_period < 0 else 1


def _tilt(x: float, z: float, inclination_deg: float, parent: Position) -> Position:
    incl = math.radians(inclination_deg)
    return (
        x + parent[0],
        z * math.sin(incl) + parent[1],
        z * math.cos(incl) + parent[2],
    )


def orbital_state(
    body: CelestialBody,
    when: Instant,
    parent_position: Position = ORIGIN,
    *,
    use_safe_distance: bool = True,
) -> OrbitalState:
    """Anomalies and scene position of a body at an instant.

    Args:
        body: Catalog entry.
        when: Instant to evaluate.
        parent_position: Already-resolved position of the body's parent.
            Moons are placed relative to it; callers resolve parents first.
        use_safe_distance: Apply the moon collision floor to the orbit size.

    Returns:
        OrbitalState. The star is pinned to the origin.
    """
    if body.is_star:
        return OrbitalState(0.0, 0.0, 0.0, ORIGIN)

    m, e_anom, nu = anomalies(body, when)
    a = semi_major_axis(body, use_safe_distance)
    r = a * (1.0 - body.eccentricity * math.cos(e_anom))

    angle = nu * _direction(body)
    x = r * math.cos(angle)
    z = r * math.sin(angle)
    position = _tilt(x, z, body.inclination, parent_position)
    return OrbitalState(m, e_anom, nu, position)


def orbital_position(
    body: CelestialBody,
    when: Instant,
    parent_position: Position = ORIGIN,
    *,
    use_safe_distance: bool = True,
) -> Position:
    """Scene (x, y, z) of a body at an instant. See orbital_state."""
    return orbital_state(
        body, when, parent_position, use_safe_distance=use_safe_distance
    ).position


def distance_between(pos1: Position, pos2: Position) -> float:
    """Distance between two scene positions, in AU."""
    return math.dist(pos1, pos2) / DISTANCE_SCALE


def argument_of_perihelion(body_id: str) -> float:
    return ARGUMENT_OF_PERIHELION.get(body_id, 0.0)


def longitude_of_ascending_node(body_id: str) -> float:
    return LONGITUDE_OF_ASCENDING_NODE.get(body_id, 0.0)


def ecliptic_longitude(body: CelestialBody, when: Instant) -> float:
    """Approximate heliocentric longitude in degrees: true anomaly + perihelion argument."""
    if body.is_star:
        return 0.0
    return (true_anomaly_degrees(body, when) + argument_of_perihelion(body.id)) % 360.0


def orbit_path(
    body: CelestialBody,
    parent_position: Position = ORIGIN,
    segments: int = 128,
    *,
    use_safe_distance: bool = True,
) -> np.ndarray:
    """Sample the full orbit ellipse for drawing.

    Uses the same semi-major axis, traversal direction and tilt as
    orbital_position, so the body always sits on its drawn path.

    Returns:
        Array of shape (segments + 1, 3); the last point repeats the first.
    """
    if body.is_star:
        return np.zeros((segments + 1, 3))

    a = semi_major_axis(body, use_safe_distance)
    e = body.eccentricity
    incl = math.radians(body.inclination)

    theta = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    r = a * (1.0 - e * e) / (1.0 + e * np.cos(theta))
    angle = theta * _direction(body)
    x = r * np.cos(angle)
    z = r * np.sin(angle)

    points = np.column_stack((x, z * np.sin(incl), z * np.cos(incl)))
    return points + np.asarray(parent_position, dtype=float)
