"""
freeroom/config.py
==================
Teaching days, the semester to query and where its timetable is published.
"""

import os

from .models import DAY_NAMES


def get_active_config():
    config = {
        # display names, Sunday..Friday
        "days": list(DAY_NAMES),
        "current_semester": os.getenv("FREEROOM_SEMESTER", "2024b"),

        # courses-<semester>.json lives under this URL
        "feed_base_url": os.getenv("FREEROOM_FEED_URL", "http://localhost:8000/courses").rstrip("/"),

        # seconds
        "request_timeout": float(os.getenv("FREEROOM_TIMEOUT", "10")),
    }
    return config
