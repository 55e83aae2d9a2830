from time_allocation import categories as cat
from time_allocation.aggregator import aggregate
from time_allocation.schema import CalendarEvent
from time_allocation.summary import (
    build_report,
    category_breakdown,
    grouped_summary,
    percentage,
    sample_events,
    title_breakdown,
    total_hours,
)


def week_events():
    return [
        CalendarEvent("Morning Workout", "2024-01-01T07:00:00Z", "2024-01-01T08:00:00Z", False),
        CalendarEvent("Work Sync", "2024-01-01T09:00:00Z", "2024-01-01T10:30:00Z", False),
        CalendarEvent("Team Offsite", "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z", True),
        CalendarEvent("Work Sync", "2024-01-02T09:00:00Z", "2024-01-02T10:00:00Z", False),
        CalendarEvent("Dinner with Kendall", "2024-01-02T19:00:00Z", "2024-01-02T21:00:00Z", False),
        CalendarEvent("Journal", "2024-01-03T07:00:00Z", "2024-01-03T07:30:00Z", False),
        CalendarEvent("Dentist", "2024-01-03T10:00:00Z", "2024-01-03T11:00:00Z", False),
    ]


def test_percentage_zero_total_policy():
    assert percentage(0.0, 0.0) == 0.0
    assert percentage(1.5, 0.0) == 0.0
    assert percentage(1.0, 4.0) == 25.0


def test_category_breakdown_sorted_and_nonzero_only():
    rows = category_breakdown(aggregate(week_events()))
    assert [row["category"] for row in rows] == [cat.WORK, cat.SOCIAL, cat.EXERCISE, cat.MISCELLANEOUS, cat.PERSONAL_DEVELOPMENT]
    assert rows[0] == {"category": cat.WORK, "hours": 2.5, "event_count": 2, "percentage": 35.7}
    assert rows[-1]["percentage"] == 7.1


def test_grouped_summary():
    groups = grouped_summary(aggregate(week_events()))
    assert set(groups) == {"creative", "self-care", "productive", "family", "maintenance"}
    assert groups["self-care"]["hours"] == 3.5
    assert groups["self-care"]["percentage"] == 50.0
    assert groups["productive"]["hours"] == 2.5
    assert groups["creative"] == {"hours": 0.0, "percentage": 0.0}


def test_grouped_summary_empty():
    groups = grouped_summary(aggregate([]))
    assert all(values == {"hours": 0.0, "percentage": 0.0} for values in groups.values())


def test_title_breakdown_collapses_repeats():
    tallies = aggregate(week_events())
    assert title_breakdown(tallies[cat.WORK]) == [{"title": "Work Sync", "hours": 2.5, "event_count": 2}]


def test_sample_events_skip_empty_and_misc():
    samples = sample_events(aggregate(week_events()), limit=1)
    assert cat.MISCELLANEOUS not in samples
    assert cat.FAMILY not in samples
    assert samples[cat.WORK] == [{"title": "Work Sync", "hours": 1.5}]


def test_build_report_scenario():
    report = build_report(week_events()[:3])
    assert report["total_hours"] == 2.5
    assert report["event_count"] == 2
    assert report["categories"][cat.EXERCISE] == {"hours": 1.0, "event_count": 1}
    assert report["categories"][cat.WORK] == {"hours": 1.5, "event_count": 1}
    assert report["categories"][cat.FAMILY] == {"hours": 0.0, "event_count": 0}
    assert report["miscellaneous"] == []


def test_build_report_lists_miscellaneous():
    report = build_report(week_events())
    assert report["miscellaneous"] == [{"title": "Dentist", "start": "2024-01-03T10:00:00Z", "hours": 1.0}]
    assert total_hours(aggregate(week_events())) == report["total_hours"] == 7.0


def test_build_report_empty():
    report = build_report([])
    assert report["total_hours"] == 0
    assert report["event_count"] == 0
    assert report["breakdown"] == []


def test_build_report_reuses_given_tallies():
    events = week_events()
    tallies = aggregate(events)
    assert build_report(events, tallies=tallies) == build_report(events)
    tallies[cat.WORK].total_hours = 10.0
    assert build_report(events, tallies=tallies)["categories"][cat.WORK]["hours"] == 10.0
