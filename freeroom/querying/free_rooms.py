from typing import Dict, Iterable, List, Tuple

from ..algorithms.overlap import hours_overlap
from ..errors import InvalidQuery
from ..models import AvailabilityResult, OccupancyRecord, Query, RoomUniverse

MIN_HOUR = 0
MAX_HOUR = 23


def validate_query(query: Query) -> None:
    for hour in (query.start_hour, query.end_hour):
        if not MIN_HOUR <= hour <= MAX_HOUR:
            raise InvalidQuery(f"hour {hour} is outside {MIN_HOUR}..{MAX_HOUR}")
    if query.start_hour >= query.end_hour:
        raise InvalidQuery(
            f"window {query.start_hour}-{query.end_hour} must start before it ends"
        )


def find_free_rooms(universe: RoomUniverse, records: Iterable[OccupancyRecord], query: Query,
                    strict: bool = False) -> AvailabilityResult:
    """Rooms with no lesson overlapping the query window on the query day.

    With strict=False an inverted or out-of-range window is not rejected; the
    overlap test is applied to it as given. With strict=True it raises
    InvalidQuery.
    """
    if strict:
        validate_query(query)
    free: Dict[Tuple[str, str], bool] = {}
    for building, rooms in universe.items():
        for room in rooms:
            free[(building, room)] = True
    for rec in records:
        if rec.day != query.day:
            continue
        key = (rec.building, rec.room)
        if key not in free:
            continue
        if hours_overlap(query.start_hour, query.end_hour, rec.start_hour, rec.end_hour):
            free[key] = False
    by_building: Dict[str, List[str]] = {}
    for (building, room), is_free in free.items():
        if is_free:
            by_building.setdefault(building, []).append(room)
    return {b: sorted(by_building[b]) for b in sorted(by_building)}
