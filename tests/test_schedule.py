import datetime

import pytest

from bsdlink_routing.route import Route
from bsdlink_routing.schedule import (FixedScheduleProvider, TimetableScheduleProvider,
                                      generate_departures, next_departure, parse_departure)
from bsdlink_routing.stop import Stop

ROUTE = Route("R1", "Test", [Stop("A", "Alpha", 0, 0)])
OTHER = Route("R2", "Other", [Stop("A", "Alpha", 0, 0)])


def test_fixed_table_shape():
    departures = generate_departures()
    assert len(departures) == 20
    assert departures[0] == "14:17"
    assert departures[-1] == "19:30"
    assert departures[:4] == ["14:17", "14:37", "14:57", "15:17"]
    assert "16:59" in departures and "18:54" in departures


def test_fixed_table_strictly_increasing():
    times = [parse_departure(d) for d in generate_departures()]
    assert all(a < b for a, b in zip(times, times[1:]))


def test_fixed_provider_ignores_route():
    provider = FixedScheduleProvider()
    assert provider.departures_for(ROUTE) == provider.departures_for(OTHER) == generate_departures()


def test_timetable_provider_sorts_and_falls_back():
    provider = TimetableScheduleProvider({"R1": ["09:30", "07:05"]}, fallback=FixedScheduleProvider())
    assert provider.departures_for(ROUTE) == ["07:05", "09:30"]
    assert provider.departures_for(OTHER) == generate_departures()


def test_timetable_provider_without_fallback():
    provider = TimetableScheduleProvider({"R1": ["07:05"]})
    assert provider.departures_for(OTHER) == []


def test_timetable_rejects_bad_times():
    with pytest.raises(ValueError):
        TimetableScheduleProvider({"R1": ["7pm"]})
    with pytest.raises(ValueError):
        parse_departure("24:00")


def test_next_departure():
    departures = generate_departures()
    assert next_departure(departures, datetime.datetime(2025, 4, 10, 14, 0)) == "14:17"
    assert next_departure(departures, datetime.datetime(2025, 4, 10, 16, 24, 30)) == "16:54"
    assert next_departure(departures, datetime.datetime(2025, 4, 10, 14, 17, 45)) == "14:37"
    assert next_departure(departures, datetime.time(14, 17)) == "14:17"
    assert next_departure(departures, datetime.time(16, 55)) == "16:59"
    assert next_departure(departures, datetime.time(19, 31)) is None
