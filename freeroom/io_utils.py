import io
import json
import os
from typing import IO, Any, Dict, Optional, Union

import pandas as pd
import requests

from .config import get_active_config
from .errors import InvalidQuery
from .models import AvailabilityResult, DayCode, Query

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', encoding='utf-8')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def load_feed(src: TextOrPath) -> Dict[str, Any]:
    """Parse a courses-<semester>.json document."""
    f, should_close = _open_text(src)
    try:
        feed = json.load(f)
    finally:
        if should_close:
            f.close()
    if not isinstance(feed, dict):
        raise ValueError("timetable feed must be a JSON object keyed by course id")
    return feed


def feed_url(semester: Optional[str] = None, base_url: Optional[str] = None) -> str:
    config = get_active_config()
    semester = semester or config["current_semester"]
    base_url = (base_url or config["feed_base_url"]).rstrip("/")
    return f"{base_url}/courses-{semester}.json"


def fetch_feed(semester: Optional[str] = None, base_url: Optional[str] = None,
               timeout: Optional[float] = None) -> Dict[str, Any]:
    """Download the published timetable. HTTP and network errors propagate."""
    if timeout is None:
        timeout = get_active_config()["request_timeout"]
    resp = requests.get(feed_url(semester, base_url), timeout=timeout)
    resp.raise_for_status()
    feed = resp.json()
    if not isinstance(feed, dict):
        raise ValueError("timetable feed must be a JSON object keyed by course id")
    return feed


def parse_hour(text: str) -> int:
    """'9:45' -> 9, '14:00' -> 14, '7' -> 7."""
    try:
        return int(str(text).strip().split(":")[0])
    except ValueError as e:
        raise InvalidQuery(f"bad time {text!r}") from e


def parse_query(day: str, start: str, end: str) -> Query:
    try:
        day_code = DayCode.parse(day)
    except ValueError as e:
        raise InvalidQuery(str(e)) from e
    return Query(day=day_code, start_hour=parse_hour(start), end_hour=parse_hour(end))


def availability_to_frame(result: AvailabilityResult) -> pd.DataFrame:
    rows = [(building, room) for building, rooms in result.items() for room in rooms]
    return pd.DataFrame(rows, columns=["building", "room"])


def save_availability_csv(path: str, result: AvailabilityResult):
    availability_to_frame(result).to_csv(path, index=False, encoding='utf-8')
