"""Demo script for time_allocation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_allocation.adapters.json_adapter import parse
from time_allocation.rules import get_ruleset
from time_allocation.summary import build_report


def main() -> None:
    events = parse("examples/sample_events.json")
    for name in ("v2", "final"):
        report = build_report(events, get_ruleset(name))
        print(f"[{name}] total: {report['total_hours']:.2f} hours across {report['event_count']} events")
        for row in report["breakdown"]:
            print(f"  {row['category']}: {row['hours']:.2f}h ({row['event_count']} events) - {row['percentage']:.1f}%")
        print("  groups:", report["groups"])
        print("  to review:", [item["title"] for item in report["miscellaneous"]])


if __name__ == "__main__":
    main()
