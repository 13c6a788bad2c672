"""
Tabular form of a schedule: one row per business day with the columns
Date, Day and Assigned Persons (comma-joined).
"""

from typing import List, Tuple
from datetime import date
import pandas as pd

from ..assignment.models import Schedule

COLUMNS = ['Date', 'Day', 'Assigned Persons']
ASSIGNEE_SEPARATOR = ', '


def schedule_to_rows(schedule: Schedule) -> List[Tuple[str, str, str]]:
    """Convert a schedule to (date, weekday name, assignees) rows."""
    return [
        (day, date.fromisoformat(day).strftime('%A'), ASSIGNEE_SEPARATOR.join(persons))
        for day, persons in schedule
    ]


def schedule_to_dataframe(schedule: Schedule) -> pd.DataFrame:
    """Convert a schedule to a DataFrame with the export columns."""
    return pd.DataFrame(schedule_to_rows(schedule), columns=COLUMNS)


def _split_assignees(cell) -> List[str]:
    if pd.isna(cell):
        return []
    return [name.strip() for name in str(cell).split(',') if name.strip()]


def dataframe_to_schedule(df: pd.DataFrame, month: int, year: int) -> Schedule:
    """
    Rebuild a schedule from its tabular form.

    Args:
        df: DataFrame with at least the Date and Assigned Persons columns
        month: Month the rows belong to
        year: Year the rows belong to

    Returns:
        Schedule with the rows' dates and assignee lists, in row order
    """
    missing_cols = [col for col in ('Date', 'Assigned Persons') if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns in schedule table: {missing_cols}")

    data = {}
    for _, row in df.iterrows():
        data[str(row['Date']).strip()] = _split_assignees(row['Assigned Persons'])
    return Schedule.from_dict(data, month=month, year=year)
