"""Data model definitions — explicit boundaries between catalog, engine, and display layers."""

from dataclasses import dataclass, field

Position = tuple[float, float, float]

ORIGIN: Position = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SnapshotQuery:
    """Raw user input. Not yet validated."""

    when: str  # "YYYY-MM-DD HH:MM" or "YYYY-MM-DD", UTC
    realistic: bool = False  # Realistic relative sizes instead of visibility multipliers
    lang: str = "en"  # Label language ("en" or "ko")


@dataclass(frozen=True)
class CalendarDate:
    """A UTC instant on the proleptic Gregorian calendar.

    Unlike datetime, year may be zero or negative (astronomical numbering:
    year 0 is 1 BC, year -1 is 2 BC).
    """

    year: int
    month: int  # 1..12
    day: int  # 1..31
    hour: int = 0
    minute: int = 0
    second: float = 0.0


@dataclass(frozen=True)
class Temperature:
    """Surface temperature range (Celsius). Display only."""

    min: float
    max: float


@dataclass(frozen=True)
class CelestialBody:
    """One catalog entry: orbital elements plus display metadata."""

    id: str  # Stable lowercase key ("earth", "io")
    name: str
    type: str  # "star", "planet", "dwarf-planet" or "moon"
    color: str  # Hex color for display
    radius: float  # Mean radius (km)
    mass: float  # kg
    distance_from_sun: float  # Semi-major axis: AU around the star, km around a planet
    orbital_period: float  # Earth days, negative = retrograde
    rotation_period: float  # Earth hours, negative = retrograde spin
    axial_tilt: float  # Degrees
    temperature: Temperature
    eccentricity: float
    inclination: float  # Degrees
    parent_id: str | None = None  # Set for moons only
    has_rings: bool = False
    description: str = ""
    facts: tuple[str, ...] = field(default=())

    @property
    def is_star(self) -> bool:
        return self.type == "star"

    @property
    def is_moon(self) -> bool:
        return self.type == "moon"


@dataclass(frozen=True)
class OrbitalState:
    """Anomalies and position of one body at one instant. Never cached."""

    mean_anomaly: float  # Degrees, [0, 360)
    eccentric_anomaly: float  # Radians
    true_anomaly: float  # Radians
    position: Position  # Scene units


@dataclass(frozen=True)
class SubsolarPoint:
    """Geographic point where the Sun is directly overhead."""

    latitude: float  # Degrees, bounded by the axial tilt
    longitude: float  # Degrees, (-180, 180]


@dataclass(frozen=True)
class Region:
    """A named geographic location, represented by its center point."""

    name: str
    lat: float  # Latitude (decimal degrees)
    lon: float  # Longitude (decimal degrees, east positive)


@dataclass(frozen=True)
class SunlitRegions:
    """Region names split by illumination band, in catalog order."""

    daylight: tuple[str, ...]
    twilight: tuple[str, ...]
    night: tuple[str, ...]


@dataclass(frozen=True)
class BodySnapshot:
    """Fully computed render inputs for a single body."""

    body: CelestialBody
    position: Position  # Scene units
    visual_size: float  # Scene units
    true_anomaly_deg: float
    ecliptic_longitude_deg: float
    distance_from_sun_au: float  # Distance from the scene origin


@dataclass(frozen=True)
class SystemSnapshot:
    """The sole input to display code. Fully computed state."""

    when: CalendarDate
    bodies: tuple[BodySnapshot, ...]  # Catalog order, parents before moons
    subsolar: SubsolarPoint
    sunlit: SunlitRegions

    def get(self, body_id: str) -> BodySnapshot | None:
        return next((b for b in self.bodies if b.body.id == body_id), None)
