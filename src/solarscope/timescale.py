"""Time model: calendar instants to continuous day counts.

Works on the proleptic Gregorian calendar with astronomical year numbering,
so dates far outside datetime's 1..9999 range (including negative years)
map to a finite day offset from the epoch.
"""

import math
from datetime import datetime

from pytz import utc

from solarscope.constants import EPOCH, J2000_JD, SECONDS_PER_DAY
from solarscope.models import CalendarDate

Instant = datetime | CalendarDate


def to_calendar(when: Instant) -> CalendarDate:
    """Normalize a datetime or CalendarDate to a UTC CalendarDate.

    Naive datetimes are taken to be UTC already.
    """
    if isinstance(when, CalendarDate):
        return when
    if when.tzinfo is not None:
        when = when.astimezone(utc)
    return CalendarDate(
        year=when.year,
        month=when.month,
        day=when.day,
        hour=when.hour,
        minute=when.minute,
        second=when.second + when.microsecond / 1e6,
    )


def days_from_civil(year: int, month: int, day: int) -> int:
    """Day number of a civil date, counted from 1970-01-01.

    Exact integer arithmetic for any integer year (400-year era decomposition).
    """
    y = year - (1 if month <= 2 else 0)
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12  # March = 0
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of days_from_civil: (year, month, day)."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _seconds_of_day(date: CalendarDate) -> float:
    return date.hour * 3600 + date.minute * 60 + date.second


def days_since_epoch(when: Instant, epoch: Instant = EPOCH) -> float:
    """Fractional days from epoch to when. Negative before the epoch."""
    date = to_calendar(when)
    ref = to_calendar(epoch)
    whole = days_from_civil(date.year, date.month, date.day) - days_from_civil(
        ref.year, ref.month, ref.day
    )
    return whole + (_seconds_of_day(date) - _seconds_of_day(ref)) / SECONDS_PER_DAY


def julian_date(when: Instant) -> float:
    """UTC-based Julian date (no TT/UT1 correction)."""
    return days_since_epoch(when, EPOCH) + J2000_JD


def day_of_year(when: Instant) -> int:
    """1-based ordinal day within the UTC calendar year (Jan 1 = 1)."""
    date = to_calendar(when)
    return (
        days_from_civil(date.year, date.month, date.day)
        - days_from_civil(date.year, 1, 1)
        + 1
    )


def utc_decimal_hour(when: Instant) -> float:
    """UTC time of day as fractional hours in [0, 24)."""
    return _seconds_of_day(to_calendar(when)) / 3600.0


def add_days(when: Instant, days: float) -> CalendarDate:
    """Shift an instant by a (possibly fractional or negative) number of days."""
    date = to_calendar(when)
    total = _seconds_of_day(date) + days * SECONDS_PER_DAY
    shift = math.floor(total / SECONDS_PER_DAY)
    remainder = total - shift * SECONDS_PER_DAY
    year, month, day = civil_from_days(
        days_from_civil(date.year, date.month, date.day) + shift
    )
    hour, rest = divmod(remainder, 3600.0)
    minute, second = divmod(rest, 60.0)
    return CalendarDate(
        year=year, month=month, day=day, hour=int(hour), minute=int(minute), second=second
    )
