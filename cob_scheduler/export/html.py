"""
HTML table rendering of COB schedules.
"""

from ..assignment.models import Schedule
from .tabular import schedule_to_dataframe


def render_schedule_table(schedule: Schedule) -> str:
    """Render the Date / Day / Assigned Persons table as HTML."""
    df = schedule_to_dataframe(schedule)
    return df.to_html(index=False, escape=True, classes='schedule-table', border=0)
