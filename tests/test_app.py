from time_allocation import categories as cat
from time_allocation.schema import CalendarEvent
from ui_demo_streamlit.app import run_analysis


def test_run_analysis_payload():
    events = [
        CalendarEvent("Update LinkedIn", "2024-01-01T07:00:00Z", "2024-01-01T08:00:00Z", False),
        CalendarEvent("Work Sync", "2024-01-01T09:00:00Z", "2024-01-01T10:30:00Z", False),
    ]
    result = run_analysis(events, "final")
    assert result["report"]["categories"][cat.SOCIAL]["event_count"] == 1
    assert result["focus"] == [{"title": "Work Sync", "hours": 1.5, "event_count": 1}]
    assert {"keyword": "update linkedin", "category": cat.JOB_SEARCH, "claimed_by": cat.SOCIAL} in result["shadows"]
