"""Streamlit demo UI for time_allocation."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

from time_allocation import config
from time_allocation.adapters import csv_adapter, json_adapter
from time_allocation.aggregator import aggregate
from time_allocation.rules import RULESETS, get_ruleset, shadowed_keywords
from time_allocation.summary import build_report, sample_events, title_breakdown


def _parse_events_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_events_from_path(temp_path)


def run_analysis(events: list, ruleset: str, focus_category: str = "work") -> dict[str, Any]:
    """Run categorization and return a UI-friendly result payload."""

    rules = get_ruleset(ruleset)
    tallies = aggregate(events, rules)
    report = build_report(events, rules, tallies=tallies)
    focus = tallies.get(focus_category)

    return {
        "report": report,
        "samples": sample_events(tallies, limit=config.SAMPLE_LIMIT),
        "focus": title_breakdown(focus) if focus else [],
        "shadows": [
            {"keyword": s.keyword, "category": s.category, "claimed_by": s.claimed_by}
            for s in shadowed_keywords(rules)
        ],
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Time Allocation", layout="wide")
    st.title("Time Allocation by Category")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload calendar export", type=["csv", "json"])
        use_demo = st.checkbox("Load demo events", value=True)
        names = sorted(RULESETS)
        ruleset = st.selectbox("Rule set", options=names, index=names.index(config.DEFAULT_RULESET))
        focus_category = st.text_input("Breakdown category", value="work")
        run = st.button("Analyze", type="primary")

    if not run:
        st.info("Pick an event source in the sidebar and click **Analyze**.")
        return

    try:
        if use_demo:
            events = json_adapter.parse("examples/sample_events.json")
            data_source = "demo events (examples/sample_events.json)"
        elif uploaded is not None:
            events = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo events'.")
            return

        result = run_analysis(events, ruleset, focus_category)
        report = result["report"]

        st.success(f"Loaded {len(events)} events from {data_source}.")

        c1, c2 = st.columns(2)
        c1.metric("Total hours", f"{report['total_hours']:.2f}")
        c2.metric("Timed events", report["event_count"])

        st.subheader("A) Hours by Category")
        st.table(report["breakdown"])

        st.subheader("B) Groupings")
        st.table([{"group": name, **values} for name, values in report["groups"].items()])

        st.subheader("C) Miscellaneous to Review")
        if report["miscellaneous"]:
            st.table(report["miscellaneous"])
        else:
            st.write("No miscellaneous items - everything is categorized!")

        st.subheader(f"D) {focus_category} Breakdown")
        st.table(result["focus"])

        with st.expander("Sample events by category"):
            st.json(result["samples"])

        with st.expander("Shadowed rule keywords"):
            st.table(result["shadows"])

    except (KeyError, ValueError) as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
