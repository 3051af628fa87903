"""Illumination model — subsolar point and day/twilight/night region bands.

Great-circle geometry throughout: a region's band is decided by the haversine
angle between its center and the subsolar point.
"""

import math

from solarscope.constants import AXIAL_TILT_DEG, DAYS_PER_YEAR, VERNAL_EQUINOX_DAY
from solarscope.models import Region, SubsolarPoint, SunlitRegions
from solarscope.timescale import Instant, day_of_year, utc_decimal_hour

DAYLIGHT_LIMIT_DEG = 90.0  # Terminator
TWILIGHT_LIMIT_DEG = 96.0  # Civil twilight: Sun up to 6° below the horizon

# Representative center points. Order is the display order of the bands.
REGIONS: tuple[Region, ...] = (
    # Asia
    Region("Japan", 36, 138),
    Region("China", 35, 104),
    Region("India", 21, 79),
    Region("Indonesia", -2, 118),
    Region("Bhutan", 27.5, 90.4),
    Region("Nepal", 28, 84),
    Region("Bangladesh", 24, 90),
    Region("Thailand", 13, 101),
    Region("Vietnam", 16, 106),
    Region("Philippines", 13, 122),
    Region("South Korea", 36, 128),
    # Oceania
    Region("Australia", -25, 134),
    Region("New Zealand", -41, 172),
    # Europe
    Region("UK", 54, -2),
    Region("France", 46, 2),
    Region("Germany", 51, 10),
    Region("Spain", 40, -4),
    Region("Italy", 42, 12),
    Region("Poland", 52, 19),
    Region("Russia", 60, 100),
    # Middle East
    Region("Middle East", 29, 45),
    # Africa
    Region("West Africa", 10, -5),
    Region("East Africa", 1, 37),
    Region("South Africa", -29, 25),
    Region("Egypt", 27, 30),
    # Americas
    Region("Eastern US", 39, -77),
    Region("Central US", 39, -95),
    Region("Western US", 37, -118),
    Region("Canada", 56, -106),
    Region("Mexico", 23, -102),
    Region("Brazil", -14, -52),
    Region("Argentina", -34, -64),
    Region("Hawaii", 20, -157),
    Region("Alaska", 64, -153),
)


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into (-180, 180]."""
    return 180.0 - ((180.0 - lon) % 360.0)


def subsolar_point(when: Instant) -> SubsolarPoint:
    """Point on Earth where the Sun is overhead.

    Longitude follows UTC: solar noon is at 0° at 12:00 UTC and moves 15° west
    per hour. Latitude is a single-harmonic seasonal approximation crossing
    zero northward on day 81 and peaking near the June solstice.
    """
    longitude = normalize_longitude((12.0 - utc_decimal_hour(when)) * 15.0)
    latitude = AXIAL_TILT_DEG * math.sin(
        (2.0 * math.pi / DAYS_PER_YEAR) * (day_of_year(when) - VERNAL_EQUINOX_DAY)
    )
    return SubsolarPoint(latitude=latitude, longitude=longitude)


def angular_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle angle between two points, in degrees (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    a = min(1.0, max(0.0, a))  # rounding near antipodes
    return math.degrees(2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a)))


def classify_regions(
    when: Instant, regions: tuple[Region, ...] = REGIONS
) -> SunlitRegions:
    """Split regions into daylight, twilight and night bands for an instant.

    Args:
        when: Instant to evaluate.
        regions: Region catalog; output keeps its order.

    Returns:
        SunlitRegions where every region appears in exactly one band.
    """
    sub = subsolar_point(when)
    daylight: list[str] = []
    twilight: list[str] = []
    night: list[str] = []
    for region in regions:
        dist = angular_distance(sub.latitude, sub.longitude, region.lat, region.lon)
        if dist < DAYLIGHT_LIMIT_DEG:
            daylight.append(region.name)
        elif dist < TWILIGHT_LIMIT_DEG:
            twilight.append(region.name)
        else:
            night.append(region.name)
    return SunlitRegions(tuple(daylight), tuple(twilight), tuple(night))


def daylight_band(sub: SubsolarPoint) -> tuple[tuple[float, float], ...]:
    """Sunlit longitude span (±90° around the subsolar longitude) on a flat map.

    Returns one (west, east) interval, or two when the span crosses the
    antimeridian.
    """
    west = sub.longitude - DAYLIGHT_LIMIT_DEG
    east = sub.longitude + DAYLIGHT_LIMIT_DEG
    if west < -180.0:
        return ((-180.0, east), (west + 360.0, 180.0))
    if east > 180.0:
        return ((west, 180.0), (-180.0, east - 360.0))
    return ((west, east),)
