"""CSV adapter for calendar events."""

from __future__ import annotations

import csv

from time_allocation.schema import CalendarEvent

_REQUIRED_COLUMNS = {"title"}
_TRUE_VALUES = {"true", "1", "yes"}


def _parse_row(row: dict) -> CalendarEvent:
    all_day_raw = row.get("allDay") or ""
    return CalendarEvent(
        title=row.get("title") or "",
        start_time=row.get("startTime") or None,
        end_time=row.get("endTime") or None,
        all_day=all_day_raw.strip().lower() in _TRUE_VALUES,
    )


def parse(file_path: str) -> list[CalendarEvent]:
    """Parse CSV file into a list of calendar events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        missing = _REQUIRED_COLUMNS - set(reader.fieldnames)
        if missing:
            raise ValueError(f"Header: missing required columns {sorted(missing)}")

        return [_parse_row(row) for row in reader]
