"""Core data schema for calendar events and category tallies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CalendarEvent:
    """Calendar event as loaded from storage; timestamps stay raw ISO-8601 strings."""

    title: str
    start_time: Optional[str]
    end_time: Optional[str]
    all_day: bool = False


@dataclass
class EventRecord:
    """One categorized event inside a tally."""

    title: str
    start: Optional[str]
    hours: float


@dataclass
class CategoryTally:
    """Running total hours and event list for a single category."""

    total_hours: float = 0.0
    events: list[EventRecord] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        return len(self.events)

    def add(self, record: EventRecord) -> None:
        self.total_hours += record.hours
        self.events.append(record)
