"""Report summaries over category tallies."""

from __future__ import annotations

from typing import Iterable, Optional

from time_allocation import categories as cat
from time_allocation.aggregator import aggregate, timed_events
from time_allocation.rules import Rule
from time_allocation.schema import CalendarEvent, CategoryTally


def total_hours(tallies: dict[str, CategoryTally]) -> float:
    """Sum hours over every tally."""

    return sum(tally.total_hours for tally in tallies.values())


def percentage(hours: float, total: float) -> float:
    """Share of ``total`` as a percentage; a zero total reports 0.0."""

    if total == 0:
        return 0.0
    return hours / total * 100.0


def category_breakdown(tallies: dict[str, CategoryTally]) -> list[dict]:
    """Return non-empty categories ordered by hours, largest first."""

    total = total_hours(tallies)
    ranked = sorted(tallies.items(), key=lambda item: item[1].total_hours, reverse=True)
    return [
        {
            "category": category,
            "hours": round(tally.total_hours, 2),
            "event_count": tally.event_count,
            "percentage": round(percentage(tally.total_hours, total), 1),
        }
        for category, tally in ranked
        if tally.total_hours > 0
    ]


def grouped_summary(tallies: dict[str, CategoryTally]) -> dict[str, dict]:
    total = total_hours(tallies)
    groups = {}
    for name, members in cat.GROUPS.items():
        hours = sum(tallies[member].total_hours for member in members if member in tallies)
        groups[name] = {
            "hours": round(hours, 2),
            "percentage": round(percentage(hours, total), 1),
        }
    return groups


def title_breakdown(tally: CategoryTally) -> list[dict]:
    """Collapse repeated titles within one category, keeping first-seen order."""

    by_title: dict[str, dict] = {}
    for record in tally.events:
        entry = by_title.setdefault(record.title, {"title": record.title, "hours": 0.0, "event_count": 0})
        entry["hours"] += record.hours
        entry["event_count"] += 1

    for entry in by_title.values():
        entry["hours"] = round(entry["hours"], 2)
    return list(by_title.values())


def sample_events(tallies: dict[str, CategoryTally], limit: int = 5) -> dict[str, list[dict]]:
    return {
        category: [
            {"title": record.title, "hours": round(record.hours, 2)} for record in tally.events[:limit]
        ]
        for category, tally in tallies.items()
        if tally.events and category != cat.MISCELLANEOUS
    }


def build_report(
    events: Iterable[CalendarEvent],
    rules: Optional[tuple[Rule, ...]] = None,
    tallies: Optional[dict[str, CategoryTally]] = None,
) -> dict:
    """Assemble the full category report, aggregating ``events`` unless ``tallies`` are given."""

    events = list(events)
    if tallies is None:
        tallies = aggregate(events, rules)
    misc = tallies.get(cat.MISCELLANEOUS)

    return {
        "categories": {
            category: {"hours": tally.total_hours, "event_count": tally.event_count}
            for category, tally in tallies.items()
        },
        "breakdown": category_breakdown(tallies),
        "total_hours": total_hours(tallies),
        "event_count": len(timed_events(events)),
        "groups": grouped_summary(tallies),
        "miscellaneous": [
            {"title": record.title, "start": record.start, "hours": round(record.hours, 2)}
            for record in (misc.events if misc else [])
        ],
    }
