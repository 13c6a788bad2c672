"""
Assignment engine for monthly COB runner coverage.

Implements the rota rules:
1. Business days only (no Sundays, no holidays)
2. Sort the roster by fewest slots assigned so far (workload balancing),
   ties keep roster order
3. Take the first ``num_assignees`` and bump their counts
"""

from typing import Dict, Iterable, List, Optional, Sequence
from datetime import date
import calendar
import logging
import random

from .holidays import HolidayLike, build_holiday_set, is_business_day, iso_date
from .models import InternalError, InvalidInputError, Schedule

logger = logging.getLogger(__name__)

DEFAULT_NUM_ASSIGNEES = 2


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ScheduleEngine:
    """
    Generates load-balanced monthly schedules.

    The engine keeps no state between runs: every call to ``generate`` builds
    its own assignment counts. The only randomness is the shuffle used when
    the roster is smaller than the daily headcount, drawn from ``rng``.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize engine.

        Args:
            rng: Random source for the undersized-roster shuffle
        """
        self.rng = rng if rng is not None else random.Random()

    def validate(self,
                 month,
                 year,
                 roster,
                 num_assignees) -> None:
        """Reject malformed requests before any date math runs."""
        if month is None or year is None:
            raise InvalidInputError("Invalid input: month and year are required.")
        if not _is_int(month) or not _is_int(year):
            raise InvalidInputError("Invalid input: month and year must be integers.")
        if not 1 <= month <= 12:
            raise InvalidInputError(f"Invalid input: month must be between 1 and 12, got {month}.")
        if not _is_int(num_assignees) or num_assignees < 1:
            raise InvalidInputError("Invalid input: numAssignees must be a positive integer.")
        if not isinstance(roster, (list, tuple)):
            raise InvalidInputError("Invalid input: employees must be a list of names.")
        if not all(isinstance(name, str) for name in roster):
            raise InvalidInputError("Invalid input: employee names must be strings.")
        if len(roster) < num_assignees:
            raise InvalidInputError(
                f"Invalid input: month, year, and at least {num_assignees} employees are required."
            )

    def select_assignees(self,
                         roster: Sequence[str],
                         counts: Dict[str, int],
                         num_assignees: int) -> List[str]:
        """
        Pick today's assignees, least-loaded first.

        Args:
            roster: Eligible employees in roster order
            counts: Slots assigned so far in this run
            num_assignees: Required headcount

        Returns:
            Selected employees in selection order
        """
        if len(roster) < num_assignees:
            logger.warning("Roster of %d cannot cover %d slots, using a random permutation",
                           len(roster), num_assignees)
            shuffled = list(roster)
            self.rng.shuffle(shuffled)
            return shuffled

        # sorted() is stable, equal counts keep roster order
        candidates = sorted(roster, key=lambda name: counts[name])
        return candidates[:num_assignees]

    def _business_days(self, month: int, year: int, holidays) -> List[date]:
        try:
            num_days = calendar.monthrange(year, month)[1]
            days = [date(year, month, day) for day in range(1, num_days + 1)]
        except (ValueError, OverflowError) as exc:
            raise InternalError(f"Cannot build calendar for {year}-{month}: {exc}") from exc
        return [day for day in days if is_business_day(day, holidays)]

    def generate(self,
                 month: int,
                 year: int,
                 roster: Sequence[str],
                 extra_holidays: Optional[Iterable[HolidayLike]] = None,
                 num_assignees: int = DEFAULT_NUM_ASSIGNEES) -> Schedule:
        """
        Generate the schedule for one month.

        Args:
            month: Month number, 1-12
            year: Calendar year
            roster: Employee names
            extra_holidays: Holidays on top of the built-in list
            num_assignees: Employees required per business day

        Returns:
            Schedule covering every business day of the month

        Raises:
            InvalidInputError: If the request is malformed
            InternalError: If the calendar for month/year cannot be built
        """
        self.validate(month, year, roster, num_assignees)

        holidays = build_holiday_set(extra_holidays)
        counts = {name: 0 for name in roster}
        assignments: Dict[str, List[str]] = {}

        for day in self._business_days(month, year, holidays):
            assigned = self.select_assignees(roster, counts, num_assignees)
            for name in assigned:
                counts[name] += 1
            assignments[iso_date(day)] = assigned
            logger.debug("%s (%s): %s", iso_date(day), day.strftime('%A'), assigned)

        logger.info("Generated COB schedule for %d-%02d: %d business days, %d employees",
                    year, month, len(assignments), len(counts))

        return Schedule(
            month=month,
            year=year,
            assignments=assignments,
            assignment_counts=counts.copy(),
        )


def generate_schedule(month: int,
                      year: int,
                      roster: Sequence[str],
                      extra_holidays: Optional[Iterable[HolidayLike]] = None,
                      num_assignees: int = DEFAULT_NUM_ASSIGNEES,
                      rng: Optional[random.Random] = None) -> Schedule:
    """Generate a monthly schedule with a fresh engine."""
    return ScheduleEngine(rng=rng).generate(
        month, year, roster, extra_holidays=extra_holidays, num_assignees=num_assignees
    )
