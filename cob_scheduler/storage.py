"""
File store for generated schedules.

Each schedule is kept as the JSON date -> assignees mapping in
``<directory>/schedule-<year>-<month>.json``.
"""

from pathlib import Path
from typing import Union
import json
import logging

from .assignment.models import Schedule

logger = logging.getLogger(__name__)


class ScheduleNotFoundError(LookupError):
    """Raised when a schedule has not been generated for a month."""

    def __init__(self, year: int, month: int):
        super().__init__(f"No schedule stored for {year}-{month}")
        self.year = year
        self.month = month


class ScheduleStore:
    """Persists schedules as one JSON file per month."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    @staticmethod
    def filename(year: int, month: int) -> str:
        return f"schedule-{year}-{month}.json"

    def path_for(self, year: int, month: int) -> Path:
        return self.directory / self.filename(year, month)

    def exists(self, year: int, month: int) -> bool:
        return self.path_for(year, month).is_file()

    def save(self, schedule: Schedule) -> Path:
        """
        Write a schedule, replacing any earlier one for the same month.

        Returns:
            Path of the written file
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(schedule.year, schedule.month)
        path.write_text(json.dumps(schedule.to_dict(), indent=2), encoding='utf-8')
        logger.info("Saved schedule %d-%d to %s", schedule.year, schedule.month, path)
        return path

    def load(self, year: int, month: int) -> Schedule:
        """
        Read a stored schedule.

        Raises:
            ScheduleNotFoundError: If nothing was saved for year/month
        """
        path = self.path_for(year, month)
        if not path.is_file():
            raise ScheduleNotFoundError(year, month)
        data = json.loads(path.read_text(encoding='utf-8'))
        return Schedule.from_dict(data, month=month, year=year)
