import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .errors import MalformedLesson
from .models import DayCode, OccupancyRecord, ScheduleIndex

logger = logging.getLogger(__name__)


def parse_time_range(text: str) -> Tuple[int, int]:
    """'8:30-10:15' -> (8, 10). Minutes are dropped."""
    try:
        parts = str(text).split("-")
        start, end = parts[0], parts[1]
        return int(start.split(":")[0]), int(end.split(":")[0])
    except (ValueError, IndexError) as e:
        raise MalformedLesson(f"bad time range {text!r}") from e


def parse_lesson(lesson: Mapping[str, Any]) -> Optional[OccupancyRecord]:
    """Return the lesson's occupancy, or None for lessons without a room."""
    if not isinstance(lesson, Mapping):
        raise MalformedLesson(f"lesson is not a mapping: {lesson!r}")
    room = lesson.get("room")
    if room is None or str(room) == "":
        return None
    try:
        day = DayCode.parse(lesson["day"])
    except (KeyError, ValueError) as e:
        raise MalformedLesson(f"bad day {lesson.get('day')!r}") from e
    if "time" not in lesson:
        raise MalformedLesson("lesson has no time")
    start_hour, end_hour = parse_time_range(lesson["time"])
    return OccupancyRecord(
        building=str(lesson.get("building", "")),
        room=str(room),
        day=day,
        start_hour=start_hour,
        end_hour=end_hour,
    )


def _iter_lessons(feed: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
    for course in feed.values():
        if not isinstance(course, Mapping):
            continue
        for group in course.get("groups") or []:
            if not isinstance(group, Mapping):
                continue
            for lesson in group.get("lessons") or []:
                yield lesson


def build_index(feed: Mapping[str, Any]) -> ScheduleIndex:
    rooms_by_building: Dict[str, Set[str]] = {}
    records: List[OccupancyRecord] = []
    dropped = 0
    for lesson in _iter_lessons(feed):
        try:
            rec = parse_lesson(lesson)
        except MalformedLesson as e:
            dropped += 1
            logger.debug("Skipping lesson %r: %s", lesson, e)
            continue
        if rec is None:
            continue
        rooms_by_building.setdefault(rec.building, set()).add(rec.room)
        records.append(rec)
    logger.info(
        "Indexed %d rooms in %d buildings from %d lessons (%d malformed)",
        sum(len(r) for r in rooms_by_building.values()), len(rooms_by_building), len(records), dropped,
    )
    universe = {b: frozenset(rooms) for b, rooms in rooms_by_building.items()}
    return ScheduleIndex(universe=universe, records=tuple(records))
