"""Tests for tabular, workbook and HTML export."""

import io

import pandas as pd
import pytest
from openpyxl import load_workbook

from cob_scheduler.assignment.engine import generate_schedule
from cob_scheduler.assignment.models import Schedule
from cob_scheduler.export import (
    dataframe_to_schedule,
    read_workbook,
    render_schedule_table,
    schedule_to_dataframe,
    schedule_to_rows,
    workbook_filename,
    write_workbook,
)


@pytest.fixture
def schedule(roster):
    return generate_schedule(1, 2025, roster, num_assignees=2)


def test_rows_have_date_weekday_and_joined_names(schedule):
    rows = schedule_to_rows(schedule)

    assert rows[0] == ("2025-01-02", "Thursday", "Alice, Bob")
    assert rows[1] == ("2025-01-03", "Friday", "Charlie, Alice")
    assert len(rows) == len(schedule)


def test_dataframe_columns(schedule):
    df = schedule_to_dataframe(schedule)
    assert list(df.columns) == ["Date", "Day", "Assigned Persons"]
    assert df.iloc[2]["Day"] == "Saturday"


def test_rows_round_trip(schedule):
    restored = dataframe_to_schedule(schedule_to_dataframe(schedule), month=1, year=2025)

    assert restored.to_dict() == schedule.to_dict()
    assert restored.dates == schedule.dates
    assert restored.workload_balance == schedule.workload_balance


def test_dataframe_to_schedule_requires_columns():
    with pytest.raises(ValueError):
        dataframe_to_schedule(pd.DataFrame({"Date": ["2025-01-02"]}), month=1, year=2025)


def test_blank_assignee_cell_restores_empty_list():
    df = pd.DataFrame({"Date": ["2025-01-02"], "Assigned Persons": [None]})
    assert dataframe_to_schedule(df, 1, 2025).assignments == {"2025-01-02": []}


def test_workbook_layout(schedule):
    wb = load_workbook(io.BytesIO(write_workbook(schedule)))

    assert wb.sheetnames == ["COB Schedule"]
    ws = wb["COB Schedule"]
    header = [cell.value for cell in ws[1]]
    assert header == ["Date", "Day", "Assigned Persons"]
    assert [cell.value for cell in ws[2]] == ["2025-01-02", "Thursday", "Alice, Bob"]
    assert ws.max_row == len(schedule) + 1


def test_workbook_round_trip(schedule):
    restored = read_workbook(write_workbook(schedule), month=1, year=2025)
    assert restored.to_dict() == schedule.to_dict()


def test_workbook_filename():
    assert workbook_filename(2025, 3) == "cob-schedule-2025-3.xlsx"


def test_html_table_escapes_names():
    schedule = Schedule.from_dict({"2025-01-02": ["<Alice>", "Bob & Co"]}, month=1, year=2025)
    html = render_schedule_table(schedule)

    assert "<table" in html
    assert "Assigned Persons" in html
    assert "Thursday" in html
    assert "&lt;Alice&gt;, Bob &amp; Co" in html


def test_schedule_dataframe_one_row_per_slot(schedule):
    df = schedule.to_dataframe()
    assert len(df) == 2 * len(schedule)
    first = df.iloc[0]
    assert (first["date"], first["day_name"], first["slot"], first["employee"]) == ("2025-01-02", "Thursday", 1, "Alice")
