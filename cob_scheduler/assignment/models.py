"""
Data models for the COB runner assignment engine.
"""

from typing import Dict, Iterator, List, Tuple
from dataclasses import dataclass, field
from datetime import date
import pandas as pd


class SchedulerError(Exception):
    """Base class for scheduling failures."""


class InvalidInputError(SchedulerError, ValueError):
    """Raised when a scheduling request is rejected before computation."""


class InternalError(SchedulerError):
    """Raised when date computation fails for an otherwise valid request."""


@dataclass
class Schedule:
    """
    Monthly COB runner schedule.

    ``assignments`` maps ISO business-day dates to the employees assigned on
    that day, in calendar order. ``assignment_counts`` holds the final
    per-employee tally of the run that produced it.
    """

    month: int
    year: int
    assignments: Dict[str, List[str]] = field(default_factory=dict)
    assignment_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, List[str]], month: int, year: int) -> 'Schedule':
        """Create Schedule from a date -> assignees mapping (JSON form)."""
        assignments = {day: list(persons) for day, persons in data.items()}
        counts: Dict[str, int] = {}
        for persons in assignments.values():
            for name in persons:
                counts[name] = counts.get(name, 0) + 1
        return cls(month=month, year=year, assignments=assignments, assignment_counts=counts)

    def __len__(self) -> int:
        return len(self.assignments)

    def __iter__(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self.assignments.items())

    @property
    def dates(self) -> List[str]:
        """Business days covered, in calendar order."""
        return list(self.assignments)

    @property
    def workload_balance(self) -> Dict[str, int]:
        """Number of days each employee appears in the schedule."""
        balance = {name: 0 for name in self.assignment_counts}
        for persons in self.assignments.values():
            for name in persons:
                balance[name] = balance.get(name, 0) + 1
        return balance

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to the date -> assignees mapping."""
        return {day: list(persons) for day, persons in self.assignments.items()}

    def to_dataframe(self) -> pd.DataFrame:
        """Convert assignments to pandas DataFrame, one row per assignee."""
        rows = []
        for day, persons in self.assignments.items():
            day_name = date.fromisoformat(day).strftime('%A')
            for slot, name in enumerate(persons, start=1):
                rows.append({'date': day, 'day_name': day_name, 'slot': slot, 'employee': name})
        return pd.DataFrame(rows, columns=['date', 'day_name', 'slot', 'employee'])

    def get_summary_report(self) -> str:
        """Generate a text summary report."""
        report = []
        report.append(f"=== COB SCHEDULE {self.year}-{self.month:02d} ===")
        report.append(f"Business days: {len(self.assignments)}")
        report.append("")
        report.append("WORKLOAD BALANCE:")
        for name, days in self.workload_balance.items():
            report.append(f"  {name}: {days} days")
        report.append("")
        report.append("DAILY BREAKDOWN:")
        for day, persons in self.assignments.items():
            day_name = date.fromisoformat(day).strftime('%A')
            report.append(f"  {day} ({day_name}): {', '.join(persons)}")

        return "\n".join(report)
