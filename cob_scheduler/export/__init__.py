"""
Export formats for generated schedules.
"""

from .tabular import schedule_to_rows, schedule_to_dataframe, dataframe_to_schedule
from .workbook import write_workbook, read_workbook, workbook_filename, XLSX_MEDIA_TYPE
from .html import render_schedule_table

__all__ = [
    "schedule_to_rows",
    "schedule_to_dataframe",
    "dataframe_to_schedule",
    "write_workbook",
    "read_workbook",
    "workbook_filename",
    "XLSX_MEDIA_TYPE",
    "render_schedule_table",
]
