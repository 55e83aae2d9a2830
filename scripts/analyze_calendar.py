"""Categorize a calendar export and print hours per life category."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_allocation import config
from time_allocation.adapters import csv_adapter, json_adapter
from time_allocation.rules import get_ruleset, shadowed_keywords
from time_allocation.summary import build_report

logger = logging.getLogger("analyze_calendar")


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> int:
    parser = argparse.ArgumentParser(description="Break calendar time down by life category")
    parser.add_argument("--data", default=str(config.DEFAULT_STORAGE_FILE), help="Path to CSV/JSON events file")
    parser.add_argument("--ruleset", default=config.DEFAULT_RULESET, help="Rule set name (v1, v2, final)")
    parser.add_argument("--output", help="Also write the JSON report to this file")
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        rules = get_ruleset(args.ruleset)
        events = _load_events(Path(args.data))
    except (KeyError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Loaded %d events from %s", len(events), args.data)
    report = build_report(events, rules)
    report["ruleset"] = args.ruleset

    for shadow in shadowed_keywords(rules):
        logger.debug("Keyword %r for %s is claimed by %s", shadow.keyword, shadow.category, shadow.claimed_by)

    print(json.dumps(report, indent=2))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved category report to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
