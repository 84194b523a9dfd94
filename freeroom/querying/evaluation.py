from ..models import AvailabilityResult, Query, ScheduleIndex


def describe_query(query: Query) -> str:
    return f"{query.day.display_name} {query.start_hour:02d}:00-{query.end_hour:02d}:00"


def summary(index: ScheduleIndex, query: Query, result: AvailabilityResult) -> str:
    records_today = sum(1 for r in index.records if r.day == query.day)
    free_rooms = sum(len(rooms) for rooms in result.values())
    return (
        f"Query: {describe_query(query)}\n"
        f"Buildings: {len(index.universe)}  Rooms: {index.room_count()}\n"
        f"Occupancy records: {len(index.records)}  On this day: {records_today}\n"
        f"Free rooms: {free_rooms}  In buildings: {len(result)}\n"
    )
