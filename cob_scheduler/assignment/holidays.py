"""
Holiday calendar and business-day classification.

Holidays are compared as exact ``YYYY-MM-DD`` strings of naive calendar
dates; no timezone conversion is applied anywhere.
"""

from typing import FrozenSet, Iterable, List, Optional, Union
from datetime import date

HolidayLike = Union[str, date]

# US federal-style holidays observed by the COB rota
STATIC_HOLIDAYS = (
    '2025-01-01',  # New Year's Day
    '2025-02-17',  # Presidents' Day
    '2025-05-26',  # Memorial Day
    '2025-07-04',  # Independence Day
    '2025-09-01',  # Labor Day
    '2025-11-27',  # Thanksgiving
    '2025-11-28',  # Day after Thanksgiving
    '2025-12-25',  # Christmas Day
)

SUNDAY = 6


def iso_date(day: date) -> str:
    """Format a calendar date as YYYY-MM-DD."""
    return day.isoformat()


def build_holiday_set(extra: Optional[Iterable[HolidayLike]] = None) -> FrozenSet[str]:
    """
    Build the effective holiday set.

    Args:
        extra: Caller-supplied holidays, ISO strings or date objects

    Returns:
        Union of STATIC_HOLIDAYS and the extra dates
    """
    holidays = set(STATIC_HOLIDAYS)
    for item in extra or ():
        holidays.add(iso_date(item) if isinstance(item, date) else item)
    return frozenset(holidays)


def is_business_day(day: date, holidays: FrozenSet[str]) -> bool:
    """A day is a business day unless it is a Sunday or a holiday."""
    return day.weekday() != SUNDAY and iso_date(day) not in holidays


def parse_holiday_list(text: Optional[str]) -> List[str]:
    """Split a comma-separated holiday field, dropping blank entries."""
    if not text:
        return []
    return [h.strip() for h in text.split(',') if h.strip()]
