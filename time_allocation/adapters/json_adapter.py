"""JSON adapter for calendar events."""

from __future__ import annotations

import json

from time_allocation.config import EVENTS_KEY
from time_allocation.schema import CalendarEvent


def _parse_item(item: dict, index: int) -> CalendarEvent:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object, got {type(item).__name__}")

    title = item.get("title")
    return CalendarEvent(
        title="" if title is None else str(title),
        start_time=item.get("startTime"),
        end_time=item.get("endTime"),
        all_day=bool(item.get("allDay", False)),
    )


def parse(file_path: str) -> list[CalendarEvent]:
    """Parse a JSON event list or storage document into calendar events."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict):
        payload = payload.get(EVENTS_KEY) or []

    if not isinstance(payload, list):
        raise ValueError(f"JSON payload must be a list of events or an object with '{EVENTS_KEY}'")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
