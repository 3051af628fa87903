"""Scene scale factors, astronomical constants, and the time epoch."""

from solarscope.models import CalendarDate

# Scene scale
DISTANCE_SCALE = 30.0  # AU to scene units
SIZE_SCALE = 0.00001  # km to scene units
MOON_DISTANCE_SCALE = 0.00002  # km to scene units, satellites around their parent

# Visibility multipliers
DEFAULT_VISIBILITY = 100.0  # Bodies missing from the curated table
REALISTIC_VISIBILITY = 100.0  # Shared by every body in realistic mode
COLLISION_MARGIN = 3.0  # Moon clearance, in inflated moon radii

# Astronomy
KM_PER_AU = 149597870.7
AXIAL_TILT_DEG = 23.44  # Earth obliquity, bounds the subsolar latitude
VERNAL_EQUINOX_DAY = 81  # Day of year where the subsolar latitude crosses zero northward
DAYS_PER_YEAR = 365

# Time
EPOCH = CalendarDate(2000, 1, 1, 12)  # J2000.0, UTC
J2000_JD = 2451545.0
UNIX_EPOCH_JD = 2440587.5
SECONDS_PER_DAY = 86400.0

KEPLER_ITERATIONS = 10
