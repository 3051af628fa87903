"""Static body catalog — loaded once from resources/bodies.csv and resources/facts.csv."""

import csv
import logging
from collections import defaultdict
from datetime import datetime
from pathlib import Path

from pytz import utc

from solarscope.models import CelestialBody, Temperature

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent

BODY_TYPES = ("star", "planet", "dwarf-planet", "moon")


def _load_facts(path: Path) -> dict[str, tuple[str, ...]]:
    facts: dict[str, list[str]] = defaultdict(list)
    with path.open(encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            facts[row["body_id"]].append(row["fact"])
    return {body_id: tuple(items) for body_id, items in facts.items()}


def load_bodies(resources: Path = _ROOT / "resources") -> tuple[CelestialBody, ...]:
    """Parse the catalog CSVs into CelestialBody records, in file order.

    Args:
        resources: Directory holding bodies.csv and facts.csv.

    Returns:
        Tuple of CelestialBody, star first, moons last.
    """
    facts = _load_facts(resources / "facts.csv")
    bodies: list[CelestialBody] = []
    with (resources / "bodies.csv").open(encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            bodies.append(
                CelestialBody(
                    id=row["id"],
                    name=row["name"],
                    type=row["type"],
                    parent_id=row["parent_id"] or None,
                    color=row["color"],
                    radius=float(row["radius"]),
                    mass=float(row["mass"]),
                    distance_from_sun=float(row["distance_from_sun"]),
                    orbital_period=float(row["orbital_period"]),
                    rotation_period=float(row["rotation_period"]),
                    axial_tilt=float(row["axial_tilt"]),
                    temperature=Temperature(
                        min=float(row["temperature_min"]),
                        max=float(row["temperature_max"]),
                    ),
                    eccentricity=float(row["eccentricity"]),
                    inclination=float(row["inclination"]),
                    has_rings=row["has_rings"] == "true",
                    description=row["description"],
                    facts=facts.get(row["id"], ()),
                )
            )
    logger.debug("Loaded %d bodies from %s", len(bodies), resources)
    return tuple(bodies)


ALL_BODIES = load_bodies()
SUN = next(b for b in ALL_BODIES if b.is_star)
PLANETS = tuple(b for b in ALL_BODIES if b.type == "planet")
DWARF_PLANETS = tuple(b for b in ALL_BODIES if b.type == "dwarf-planet")
MOONS = tuple(b for b in ALL_BODIES if b.is_moon)

_BY_ID = {b.id: b for b in ALL_BODIES}


def get_body_by_id(body_id: str) -> CelestialBody | None:
    return _BY_ID.get(body_id)


def moons_for_parent(parent_id: str) -> tuple[CelestialBody, ...]:
    return tuple(m for m in MOONS if m.parent_id == parent_id)


def search_bodies(query: str) -> dict[str, tuple[CelestialBody, ...]]:
    """Case-insensitive name/id match, grouped by body type.

    Groups are keyed in BODY_TYPES order and keep catalog order inside;
    empty groups are omitted. An empty query matches everything.
    """
    needle = query.strip().lower()
    groups: dict[str, tuple[CelestialBody, ...]] = {}
    for body_type in BODY_TYPES:
        matches = tuple(
            b
            for b in ALL_BODIES
            if b.type == body_type and (needle in b.name.lower() or needle in b.id)
        )
        if matches:
            groups[body_type] = matches
    return groups


# Quick navigation targets (UTC midnight)
PRESET_DATES: dict[str, datetime] = {
    "Moon Landing (1969)": datetime(1969, 7, 20, tzinfo=utc),
    "Voyager 1 Launch (1977)": datetime(1977, 9, 5, tzinfo=utc),
    "Pluto Flyby (2015)": datetime(2015, 7, 14, tzinfo=utc),
    "Mars 2020": datetime(2020, 7, 30, tzinfo=utc),
    "Year 2050": datetime(2050, 1, 1, tzinfo=utc),
    "Year 2100": datetime(2100, 1, 1, tzinfo=utc),
}


def preset_dates() -> dict[str, datetime]:
    """PRESET_DATES with "Today" resolved to the current instant, listed first."""
    return {"Today": datetime.now(utc), **PRESET_DATES}
