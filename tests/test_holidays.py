"""Tests for holiday sets and business-day classification."""

from datetime import date

from cob_scheduler.assignment.holidays import (
    STATIC_HOLIDAYS,
    build_holiday_set,
    is_business_day,
    parse_holiday_list,
)


def test_holiday_set_is_union():
    holidays = build_holiday_set(["2025-03-10", date(2025, 4, 18)])
    assert set(STATIC_HOLIDAYS) <= holidays
    assert "2025-03-10" in holidays
    assert "2025-04-18" in holidays


def test_default_holiday_set():
    assert build_holiday_set() == frozenset(STATIC_HOLIDAYS)


def test_business_day_rules():
    holidays = build_holiday_set()
    assert is_business_day(date(2025, 1, 2), holidays)
    assert is_business_day(date(2025, 1, 4), holidays)  # Saturday
    assert not is_business_day(date(2025, 1, 5), holidays)  # Sunday
    assert not is_business_day(date(2025, 12, 25), holidays)


def test_parse_holiday_list():
    assert parse_holiday_list(" 2025-01-07, ,2025-01-19 ") == ["2025-01-07", "2025-01-19"]
    assert parse_holiday_list("") == []
    assert parse_holiday_list(None) == []
