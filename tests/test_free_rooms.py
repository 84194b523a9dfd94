import pytest

from conftest import lesson, record
from freeroom.errors import InvalidQuery
from freeroom.index_build import build_index
from freeroom.models import DayCode, Query
from freeroom.querying.evaluation import describe_query, summary
from freeroom.querying.free_rooms import find_free_rooms, validate_query

SUNDAY = DayCode.SUNDAY
ONE_ROOM = {"B": frozenset({"1"})}


def sunday(start, end):
    return Query(day=SUNDAY, start_hour=start, end_hour=end)


class TestFindFreeRooms:

    def test_end_to_end(self):
        feed = {"c1": {"groups": [{"lessons": [
            lesson(room="101", time="9:00-11:00"),
            lesson(room="102", time="14:00-16:00"),
        ]}]}}
        index = build_index(feed)
        result = find_free_rooms(index.universe, index.records, sunday(10, 12))
        assert result == {"בניין 1": ["102"]}

    def test_touching_boundary_is_free(self):
        result = find_free_rooms(ONE_ROOM, [record("1", start=10, end=12, building="B")], sunday(9, 10))
        assert result == {"B": ["1"]}

    def test_partial_overlap_excluded(self):
        result = find_free_rooms(ONE_ROOM, [record("1", start=10, end=12, building="B")], sunday(9, 11))
        assert result == {}

    @pytest.mark.parametrize("query, lesson_hours", [
        (sunday(9, 13), (10, 11)),
        (sunday(10, 11), (9, 13)),
    ])
    def test_containment_excluded(self, query, lesson_hours):
        rec = record("1", start=lesson_hours[0], end=lesson_hours[1], building="B")
        assert find_free_rooms(ONE_ROOM, [rec], query) == {}

    def test_other_day_ignored(self):
        rec = record("1", day=DayCode.MONDAY, start=9, end=12, building="B")
        assert find_free_rooms(ONE_ROOM, [rec], sunday(10, 11)) == {"B": ["1"]}

    @pytest.mark.parametrize("order", [0, 1])
    def test_exclusion_is_monotonic(self, order):
        records = [
            record("1", start=10, end=12, building="B"),
            record("1", start=14, end=16, building="B"),
            record("1", start=7, end=8, building="B"),
        ]
        if order:
            records.reverse()
        assert find_free_rooms(ONE_ROOM, records, sunday(9, 11)) == {}

    def test_fully_booked_building_omitted(self):
        universe = {"Full": frozenset({"1", "2"}), "Open": frozenset({"3"})}
        records = [
            record("1", start=9, end=12, building="Full"),
            record("2", start=8, end=10, building="Full"),
            record("3", start=12, end=13, building="Open"),
        ]
        result = find_free_rooms(universe, records, sunday(9, 11))
        assert result == {"Open": ["3"]}
        assert "Full" not in result

    def test_sorted_output(self):
        universe = {"Zeta": frozenset({"b", "c", "a"}), "Alpha": frozenset({"20", "10"})}
        result = find_free_rooms(universe, [], sunday(9, 10))
        assert list(result) == ["Alpha", "Zeta"]
        assert result["Zeta"] == ["a", "b", "c"]
        assert result["Alpha"] == ["10", "20"]

    def test_unknown_room_record_ignored(self):
        rec = record("999", start=9, end=12, building="Elsewhere")
        assert find_free_rooms(ONE_ROOM, [rec], sunday(9, 11)) == {"B": ["1"]}

    def test_empty_universe(self):
        assert find_free_rooms({}, [], sunday(9, 11)) == {}

    def test_sub_hour_times_truncated(self, sample_feed):
        # A2 runs 10:30-12:30, which compares as 10-12
        index = build_index(sample_feed)
        result = find_free_rooms(index.universe, index.records, sunday(10, 12))
        assert result == {"בניין 1": ["102"], "בניין 2": ["A1"]}

    def test_index_reused_across_queries(self, sample_feed):
        index = build_index(sample_feed)
        morning = find_free_rooms(index.universe, index.records, sunday(8, 9))
        evening = find_free_rooms(index.universe, index.records, sunday(17, 19))
        assert morning == evening == {"בניין 1": ["101", "102"], "בניין 2": ["A1", "A2"]}


class TestQueryValidation:

    def test_lenient_degenerate_window(self):
        rec = record("1", start=9, end=11, building="B")
        assert find_free_rooms(ONE_ROOM, [rec], sunday(12, 12)) == {"B": ["1"]}

    @pytest.mark.parametrize("start, end", [(12, 10), (10, 10), (-1, 5), (22, 24)])
    def test_strict_rejects(self, start, end):
        with pytest.raises(InvalidQuery):
            find_free_rooms(ONE_ROOM, [], sunday(start, end), strict=True)

    def test_strict_accepts_normal_window(self):
        validate_query(sunday(0, 23))
        assert find_free_rooms(ONE_ROOM, [], sunday(9, 10), strict=True) == {"B": ["1"]}


class TestSummary:

    def test_counts(self, sample_feed):
        index = build_index(sample_feed)
        query = sunday(10, 12)
        text = summary(index, query, find_free_rooms(index.universe, index.records, query))
        assert "Query: ראשון 10:00-12:00" in text
        assert "Buildings: 2  Rooms: 4" in text
        assert "Occupancy records: 5  On this day: 4" in text
        assert "Free rooms: 2  In buildings: 2" in text

    def test_describe_query(self):
        assert describe_query(Query(DayCode.FRIDAY, 8, 9)) == "שישי 08:00-09:00"
