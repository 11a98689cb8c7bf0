import datetime

import pytest
import pytz

from bsdlink_routing.network import NetworkModel
from bsdlink_routing.stop import Stop

# Stops on the equator, 0.01 degrees (~1.1km) apart, so a 500m search
# around any stop finds only that stop.
LINE_STOPS = [
    Stop("A", "Alpha", 0.0, 0.00),
    Stop("B", "Bravo", 0.0, 0.01),
    Stop("C", "Charlie", 0.0, 0.02),
    Stop("D", "Delta", 0.0, 0.03),
    Stop("E", "Echo", 0.0, 0.04),
    Stop("F", "Foxtrot", 0.0, 0.05),
    Stop("G", "Golf", 0.0, 0.06),
]

LINE_ROUTES = [
    ("EAST", "Alpha - Golf", ["A", "B", "C", "D", "E", "F", "G"], "#213284"),
    ("WEST", "Golf - Alpha", ["G", "F", "E", "D", "C", "B", "A"], "#C72C2F"),
    ("LOOP", "Charlie Loop", ["C", "D", "C", "E"], "#500073"),
]


@pytest.fixture
def line_network():
    return NetworkModel(LINE_STOPS, LINE_ROUTES, name="Test Line")


@pytest.fixture
def requested_at():
    return pytz.timezone("Asia/Jakarta").localize(datetime.datetime(2025, 4, 10, 14, 0))


class FixedDurationProvider:
    """Path provider answering every request with a straight path and a fixed duration."""

    def __init__(self, walk_seconds=120.0, drive_seconds=300.0):
        self.walk_seconds = walk_seconds
        self.drive_seconds = drive_seconds
        self.calls = []

    def walking_estimate(self, start, end):
        self.calls.append(("walking", start, end))
        return [start, end], self.walk_seconds

    def driving_estimate(self, start, end):
        self.calls.append(("driving", start, end))
        return [start, (start[0], end[1]), end], self.drive_seconds


@pytest.fixture
def fixed_provider():
    return FixedDurationProvider()
