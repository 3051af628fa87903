"""Snapshot layer — parse the requested instant and evaluate the engine for every body."""

import logging
import re
import time

from solarscope.catalog import ALL_BODIES, DWARF_PLANETS, PLANETS, SUN
from solarscope.illumination import classify_regions, subsolar_point
from solarscope.kepler import true_anomaly_degrees
from solarscope.models import (
    ORIGIN,
    BodySnapshot,
    CalendarDate,
    CelestialBody,
    Position,
    SnapshotQuery,
    SystemSnapshot,
)
from solarscope.orbits import distance_between, ecliptic_longitude, orbital_position
from solarscope.scale import visual_size
from solarscope.timescale import Instant, days_from_civil, to_calendar

logger = logging.getLogger(__name__)

_WHEN_RE = re.compile(
    r"^\s*(?P<year>-?\d{1,6})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{2}))?\s*$"
)


class DateParseError(ValueError):
    """User-supplied date string could not be turned into an instant."""


def parse_when(when: str) -> CalendarDate:
    """Parse "YYYY-MM-DD HH:MM" (or "YYYY-MM-DD") as a UTC instant.

    Years may be negative (astronomical numbering), which datetime cannot
    represent.

    Raises:
        DateParseError: On malformed input or out-of-range fields.
    """
    match = _WHEN_RE.match(when)
    if match is None:
        raise DateParseError(f"Unrecognized date: {when!r}")
    year = int(match["year"])
    month = int(match["month"])
    day = int(match["day"])
    hour = int(match["hour"] or 0)
    minute = int(match["minute"] or 0)

    if not 1 <= month <= 12:
        raise DateParseError(f"Month out of range: {month}")
    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    month_length = days_from_civil(next_year, next_month, 1) - days_from_civil(year, month, 1)
    if not 1 <= day <= month_length:
        raise DateParseError(f"Day out of range: {year}-{month:02d}-{day}")
    if hour > 23 or minute > 59:
        raise DateParseError(f"Time out of range: {hour:02d}:{minute:02d}")

    return CalendarDate(year=year, month=month, day=day, hour=hour, minute=minute)


def _body_snapshot(
    body: CelestialBody,
    when: Instant,
    parent_position: Position,
    use_realistic_scale: bool,
) -> BodySnapshot:
    position = orbital_position(body, when, parent_position)
    return BodySnapshot(
        body=body,
        position=position,
        visual_size=visual_size(body, use_realistic_scale),
        true_anomaly_deg=true_anomaly_degrees(body, when),
        ecliptic_longitude_deg=ecliptic_longitude(body, when),
        distance_from_sun_au=distance_between(position, ORIGIN),
    )


def compute_snapshot(
    when: Instant,
    *,
    use_realistic_scale: bool = False,
    include_moons: bool = True,
    include_dwarf_planets: bool = True,
) -> SystemSnapshot:
    """Evaluate positions, sizes and illumination for one instant.

    Planets and dwarf planets are resolved first; each moon is then placed
    relative to its parent's resolved position.

    Args:
        when: Instant to evaluate.
        use_realistic_scale: Passed to visual_size for every body.
        include_moons: Include satellites.
        include_dwarf_planets: Include dwarf planets.

    Returns:
        SystemSnapshot with bodies in catalog order.
    """
    started = time.perf_counter()
    date = to_calendar(when)

    primaries = [SUN, *PLANETS, *(DWARF_PLANETS if include_dwarf_planets else ())]
    resolved: dict[str, BodySnapshot] = {
        body.id: _body_snapshot(body, date, ORIGIN, use_realistic_scale)
        for body in primaries
    }

    if include_moons:
        for body in ALL_BODIES:
            if not body.is_moon:
                continue
            parent = resolved.get(body.parent_id or "")
            if parent is None:
                logger.warning("%s: parent %r not resolved, skipped", body.id, body.parent_id)
                continue
            resolved[body.id] = _body_snapshot(
                body, date, parent.position, use_realistic_scale
            )

    bodies = tuple(resolved[b.id] for b in ALL_BODIES if b.id in resolved)
    snapshot = SystemSnapshot(
        when=date,
        bodies=bodies,
        subsolar=subsolar_point(date),
        sunlit=classify_regions(date),
    )
    logger.debug(
        "Snapshot for %s: %d bodies in %.2f ms",
        date,
        len(bodies),
        (time.perf_counter() - started) * 1000,
    )
    return snapshot


def distance_from_earth(snapshot: SystemSnapshot, body_id: str) -> float | None:
    """AU between a body and Earth in a snapshot; None if either is absent."""
    target = snapshot.get(body_id)
    earth = snapshot.get("earth")
    if target is None or earth is None:
        return None
    return distance_between(target.position, earth.position)


def run(query: SnapshotQuery) -> SystemSnapshot:
    """Top-level entry point: takes a SnapshotQuery and returns a SystemSnapshot.

    Raises:
        DateParseError: When query.when cannot be parsed.
    """
    return compute_snapshot(parse_when(query.when), use_realistic_scale=query.realistic)
