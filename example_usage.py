#!/usr/bin/env python3
"""
Example usage of the COB Runner Scheduler.

This script demonstrates how to use the assignment engine, the exporters
and the schedule store together to build and save a monthly rota.
"""

from pathlib import Path

from cob_scheduler import ScheduleStore, generate_schedule
from cob_scheduler.assignment.holidays import STATIC_HOLIDAYS, parse_holiday_list
from cob_scheduler.export import schedule_to_dataframe, write_workbook, workbook_filename


def main():
    print("=== COB Runner Scheduler Demo ===\n")

    # 1. Roster and holidays
    print("1. Preparing roster and holidays...")
    employees = ["Alice", "Bob", "Charlie", "Dawit", "Eden"]
    extra_holidays = parse_holiday_list("2025-01-07, 2025-01-19")
    print(f"   Employees: {', '.join(employees)}")
    print(f"   Built-in holidays: {len(STATIC_HOLIDAYS)}")
    print(f"   Extra holidays: {', '.join(extra_holidays)}")

    # 2. Generate schedule
    print("\n2. Generating schedule for January 2025...")
    schedule = generate_schedule(
        month=1,
        year=2025,
        roster=employees,
        extra_holidays=extra_holidays,
        num_assignees=2
    )
    print(schedule.get_summary_report())

    # 3. Tabular view
    print("\n3. Tabular view:")
    df = schedule_to_dataframe(schedule)
    print(df.head(10).to_string(index=False))

    # 4. Persist and export
    print("\n4. Saving results...")
    store = ScheduleStore("schedules")
    json_path = store.save(schedule)
    print(f"   ✓ Schedule saved to {json_path}")

    xlsx_path = Path(workbook_filename(schedule.year, schedule.month))
    xlsx_path.write_bytes(write_workbook(schedule))
    print(f"   ✓ Workbook saved to {xlsx_path}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
