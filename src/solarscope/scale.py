"""Visual scale model — render sizes and collision-safe moon distances.

True radii and satellite distances make most bodies invisible at
interplanetary scale. Sizes are inflated by a curated per-body multiplier,
and moon orbits are pushed out far enough that an inflated moon never
intersects its inflated parent.
"""

import logging

from solarscope.constants import (
    COLLISION_MARGIN,
    DEFAULT_VISIBILITY,
    DISTANCE_SCALE,
    MOON_DISTANCE_SCALE,
    REALISTIC_VISIBILITY,
    SIZE_SCALE,
)
from solarscope.models import CelestialBody

logger = logging.getLogger(__name__)

# Hand-tuned so every planet still renders larger than each of its moons.
VISIBILITY_SCALE: dict[str, float] = {
    "sun": 0.3,
    "mercury": 120,
    "venus": 80,
    "earth": 80,
    "mars": 100,
    "jupiter": 15,
    "saturn": 18,
    "uranus": 30,
    "neptune": 30,
    "pluto": 250,
    "ceres": 350,
    "eris": 250,
    "makemake": 300,
    "haumea": 300,
    "moon": 120,
    "phobos": 500,
    "deimos": 600,
    "io": 120,
    "europa": 120,
    "ganymede": 100,
    "callisto": 100,
    "titan": 100,
    "enceladus": 250,
    "mimas": 350,
    "rhea": 180,
    "dione": 220,
    "iapetus": 180,
    "miranda": 300,
    "ariel": 220,
    "umbriel": 220,
    "titania": 180,
    "oberon": 180,
    "triton": 150,
}


def visibility_multiplier(body_id: str | None) -> float:
    """Curated size multiplier for a body id; DEFAULT_VISIBILITY if unknown."""
    if body_id is None:
        return DEFAULT_VISIBILITY
    return VISIBILITY_SCALE.get(body_id, DEFAULT_VISIBILITY)


def visual_size(body: CelestialBody, use_realistic_scale: bool) -> float:
    """Render radius in scene units.

    Args:
        body: Catalog entry.
        use_realistic_scale: If True, every body gets the same lift so true
            size ratios are kept. Otherwise the curated multiplier is used.

    Returns:
        Sphere radius in scene units.
    """
    base = body.radius * SIZE_SCALE
    if use_realistic_scale:
        return base * REALISTIC_VISIBILITY
    return base * visibility_multiplier(body.id)


def min_safe_distance(moon: CelestialBody, parent: CelestialBody | None = None) -> float:
    """Smallest orbit radius that keeps an inflated moon clear of its parent."""
    parent_id = parent.id if parent is not None else moon.parent_id
    combined = visibility_multiplier(moon.id) + visibility_multiplier(parent_id)
    return combined * moon.radius * SIZE_SCALE * COLLISION_MARGIN


def safe_orbital_distance(moon: CelestialBody, parent: CelestialBody | None = None) -> float:
    """Satellite semi-major axis in scene units, raised to the collision floor.

    One-sided clamp: the physical distance is only ever increased.
    """
    physical = moon.distance_from_sun * MOON_DISTANCE_SCALE
    floor = min_safe_distance(moon, parent)
    if physical < floor:
        logger.debug(
            "%s: orbit %.4f below collision floor %.4f, clamped", moon.id, physical, floor
        )
        return floor
    return physical


def semi_major_axis(body: CelestialBody, use_safe_distance: bool = True) -> float:
    """Scene-unit semi-major axis, picking the distance scale by body type."""
    if body.is_moon:
        if use_safe_distance:
            return safe_orbital_distance(body)
        return body.distance_from_sun * MOON_DISTANCE_SCALE
    return body.distance_from_sun * DISTANCE_SCALE
