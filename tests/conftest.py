import pytest

from freeroom.models import DayCode, OccupancyRecord


def lesson(day="א", time="9:00-11:00", room="101", building="בניין 1", **extra):
    entry = {"day": day, "time": time, "room": room, "building": building}
    entry.update(extra)
    return entry


def record(room="101", day=DayCode.SUNDAY, start=9, end=11, building="בניין 1"):
    return OccupancyRecord(building=building, room=room, day=day, start_hour=start, end_hour=end)


@pytest.fixture
def sample_feed():
    """Two buildings, one course spread over several groups."""
    return {
        "10001": {
            "name": "Calculus 1",
            "groups": [
                {"lessons": [
                    lesson(time="9:00-11:00", room="101"),
                    lesson(time="14:00-16:00", room="102"),
                ]},
                {"lessons": [
                    lesson(day="ב", time="10:00-12:00", room="101"),
                    lesson(time="8:00-10:00", room="", building=""),
                ]},
            ],
        },
        "10002": {
            "groups": [
                {"lessons": [
                    lesson(time="12:00-13:00", room="A1", building="בניין 2"),
                    lesson(time="10:30-12:30", room="A2", building="בניין 2"),
                ]},
            ],
        },
    }
