"""Default settings for calendar analysis."""

import os
from pathlib import Path

# Project root
BASE_DIR = Path(__file__).resolve().parent.parent

# Storage document written by the calendar sync
DEFAULT_STORAGE_FILE = BASE_DIR / "data" / "storage.json"
EVENTS_KEY = "syncedEvents"

DEFAULT_RULESET = "final"

# Records shown per category in sample listings
SAMPLE_LIMIT = 5

LOG_LEVEL = os.getenv("TIME_ALLOCATION_LOG_LEVEL", "INFO").upper()
