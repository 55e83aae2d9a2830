"""Duration arithmetic and per-category aggregation."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Iterable, Optional

from time_allocation.rules import FINAL_RULES, Rule, categories_for, categorize
from time_allocation.schema import CalendarEvent, CategoryTally, EventRecord

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Optional[str]) -> datetime:
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def event_hours(event: CalendarEvent) -> float:
    """Return ``end - start`` in hours; unusable timestamps give NaN."""

    if event.start_time is None or event.end_time is None:
        return math.nan
    try:
        start = _parse_timestamp(event.start_time)
        end = _parse_timestamp(event.end_time)
        return (end - start).total_seconds() / 3600.0
    except (TypeError, ValueError):
        # mixed naive/aware timestamps raise TypeError on subtraction
        return math.nan


def timed_events(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Return events that are not flagged all-day, in input order."""

    return [event for event in events if not event.all_day]


def aggregate(
    events: Iterable[CalendarEvent], rules: Optional[tuple[Rule, ...]] = None
) -> dict[str, CategoryTally]:
    """Categorize timed events and total their hours per category."""

    if rules is None:
        rules = FINAL_RULES

    tallies = {category: CategoryTally() for category in categories_for(rules)}

    skipped = 0
    for event in events:
        if event.all_day:
            skipped += 1
            continue

        hours = event_hours(event)
        if math.isnan(hours):
            logger.warning("Event %r has unusable timestamps (%s, %s)", event.title, event.start_time, event.end_time)

        category = categorize(event.title, rules)
        tallies[category].add(EventRecord(title=event.title, start=event.start_time, hours=hours))

    logger.debug(
        "Aggregated %d events into %d categories, skipped %d all-day",
        sum(t.event_count for t in tallies.values()),
        len(tallies),
        skipped,
    )
    return tallies
