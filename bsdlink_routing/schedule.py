"""
Departure schedules.

Itinerary ranking does not care where departure times come from, so the
schedule is a provider object with a single ``departures_for(route)`` method.
``FixedScheduleProvider`` serves the BSD Link afternoon service pattern for
every route; ``TimetableScheduleProvider`` serves real per-route tables.
"""
import datetime
import logging
import re

# (first hour, last hour inclusive, minutes past the hour)
FIXED_SERVICE_PATTERN = [
    (14, 15, (17, 37, 57)),
    (16, 18, (4, 24, 54, 59)),
    (19, 19, (10, 30)),
]

_HHMM = re.compile(r'^([01]\d|2[0-3]):([0-5]\d)$')


def generate_departures():
    """Returns the fixed afternoon timetable as "HH:MM" strings, earliest first."""
    times = []
    for first_hour, last_hour, minutes in FIXED_SERVICE_PATTERN:
        for hour in range(first_hour, last_hour + 1):
            for minute in minutes:
                times.append(f"{hour:02d}:{minute:02d}")
    return times


def parse_departure(value):
    """Parses "HH:MM" into a datetime.time, raising ValueError on anything else."""
    match = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid departure time: {value!r}")
    return datetime.time(int(match.group(1)), int(match.group(2)))


def next_departure(departures, moment):
    """
    Finds the first departure at or after the time of day of `moment`.
    A bus leaves on the minute, so 14:17:45 has already missed the 14:17.

    Args:
        departures: ordered "HH:MM" strings
        moment: a datetime or time

    Returns:
        str: the departure, or None if the last bus has already left
    """
    now = moment.time() if isinstance(moment, datetime.datetime) else moment
    now = now.replace(tzinfo=None)
    for departure in departures:
        if parse_departure(departure) >= now:
            return departure
    return None


class ScheduleProvider:
    def departures_for(self, route):
        raise NotImplementedError


class FixedScheduleProvider(ScheduleProvider):
    """Same placeholder timetable for every route."""

    def __init__(self):
        self._departures = generate_departures()

    def departures_for(self, route):
        return list(self._departures)


class TimetableScheduleProvider(ScheduleProvider):
    """
    Per-route timetables keyed by route id.

    Times are validated and sorted on construction. Routes missing from the
    table are delegated to `fallback`, or get no departures at all.
    """

    def __init__(self, timetable, fallback=None):
        self.fallback = fallback
        self._timetable = {}
        for route_id, times in timetable.items():
            self._timetable[route_id] = sorted(times, key=parse_departure)
        logging.debug(f"Loaded timetable for {len(self._timetable)} routes")

    def departures_for(self, route):
        if route.route_id in self._timetable:
            return list(self._timetable[route.route_id])
        if self.fallback is not None:
            return self.fallback.departures_for(route)
        logging.debug(f"No timetable for route {route.route_id}")
        return []
