from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

DAY_NAMES = ["ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי"]


class DayCode(Enum):
    SUNDAY = "א"
    MONDAY = "ב"
    TUESDAY = "ג"
    WEDNESDAY = "ד"
    THURSDAY = "ה"
    FRIDAY = "ו"

    @property
    def display_name(self) -> str:
        return DAY_NAMES[list(DayCode).index(self)]

    @classmethod
    def parse(cls, text: str) -> "DayCode":
        """Accept a feed letter ("א") or a display name ("ראשון")."""
        key = str(text).strip()
        for day in cls:
            if key == day.value or key == day.display_name:
                return day
        raise ValueError(f"unknown day: {text!r}")


@dataclass(frozen=True)
class OccupancyRecord:
    building: str
    room: str
    day: DayCode
    start_hour: int
    end_hour: int


# building -> rooms ever used
RoomUniverse = Dict[str, FrozenSet[str]]

# building -> sorted free rooms
AvailabilityResult = Dict[str, List[str]]


@dataclass(frozen=True)
class ScheduleIndex:
    universe: RoomUniverse
    records: Tuple[OccupancyRecord, ...] = ()

    def room_count(self) -> int:
        return sum(len(rooms) for rooms in self.universe.values())


@dataclass(frozen=True)
class Query:
    day: DayCode
    start_hour: int  # whole hours, minutes already dropped
    end_hour: int
