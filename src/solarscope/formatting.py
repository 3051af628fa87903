"""Display formatting for distances, masses, coordinates and periods."""

from solarscope.constants import KM_PER_AU
from solarscope.i18n import t
from solarscope.models import Temperature


def format_distance(distance_au: float) -> str:
    """Short distances in km, everything else in AU."""
    if distance_au < 0.01:
        return f"{distance_au * KM_PER_AU:,.0f} km"
    return f"{distance_au:.3f} AU"


def format_scientific(num: float) -> str:
    """Exponent notation from 1e10 upward, grouped digits below."""
    if num >= 1e10:
        return f"{num:.2e}"
    if float(num).is_integer():
        return f"{int(num):,}"
    return f"{num:,.3f}".rstrip("0").rstrip(".")


def format_coordinate(value: float, kind: str, lang: str = "en") -> str:
    """Format a latitude ('lat') or longitude ('lon') as e.g. '23.4°N'."""
    if kind == "lat":
        direction = "N" if value >= 0 else "S"
    else:
        direction = "E" if value >= 0 else "W"
    return f"{abs(value):.1f}°{t(f'compass_{direction}', lang)}"


def format_temperature(temperature: Temperature) -> str:
    if temperature.min == temperature.max:
        return f"{temperature.min:g}°C"
    return f"{temperature.min:g} to {temperature.max:g}°C"


def format_orbital_period(days: float, lang: str = "en") -> str:
    """Days below one year, Julian years above. Sign (direction) is dropped."""
    days = abs(days)
    if days < 365:
        return f"{days:.1f} {t('unit_days', lang)}"
    return f"{days / 365.25:.1f} {t('unit_years', lang)}"


def format_rotation_period(hours: float, lang: str = "en") -> str:
    hours = abs(hours)
    if hours < 48:
        return f"{hours:.1f} {t('unit_hours', lang)}"
    return f"{hours / 24:.1f} {t('unit_earth_days', lang)}"
