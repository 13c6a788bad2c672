"""
Excel workbook export of COB schedules.
"""

import io

import pandas as pd
from openpyxl.utils import get_column_letter

from ..assignment.models import Schedule
from .tabular import COLUMNS, dataframe_to_schedule, schedule_to_dataframe

SHEET_NAME = 'COB Schedule'
XLSX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def workbook_filename(year: int, month: int) -> str:
    return f"cob-schedule-{year}-{month}.xlsx"


def write_workbook(schedule: Schedule) -> bytes:
    """
    Render a schedule as an .xlsx workbook.

    Returns:
        Workbook file contents
    """
    df = schedule_to_dataframe(schedule)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
        ws = writer.sheets[SHEET_NAME]
        for idx, column in enumerate(COLUMNS, start=1):
            longest = max([len(column)] + [len(str(v)) for v in df[column]])
            ws.column_dimensions[get_column_letter(idx)].width = longest + 2
    return buffer.getvalue()


def read_workbook(data: bytes, month: int, year: int) -> Schedule:
    """Load a schedule back from workbook contents produced by write_workbook."""
    df = pd.read_excel(io.BytesIO(data), sheet_name=SHEET_NAME, dtype=str, engine='openpyxl')
    return dataframe_to_schedule(df, month=month, year=year)
