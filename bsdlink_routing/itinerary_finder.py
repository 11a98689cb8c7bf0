import logging

from .config import Config
from .geo import walking_time
from .itinerary import Itinerary
from .proximity import find_nearby_stops
from .schedule import FixedScheduleProvider


class ItineraryFinder:
    def __init__(self, network, schedule_provider=None, max_distance=None,
                 walk_speed=None, minutes_per_stop=None):
        """
        Initialize the finder over a loaded network.

        Args:
            network: the NetworkModel to search
            schedule_provider: where departures come from, the fixed table by default
            max_distance: search radius around each endpoint in meters
            walk_speed: meters per minute
            minutes_per_stop: flat ride time charged for every stop travelled
        """
        self.network = network
        self.schedule_provider = schedule_provider or FixedScheduleProvider()
        self.max_distance = max_distance if max_distance is not None else Config.NEARBY_RADIUS_M
        self.walk_speed = walk_speed or Config.WALK_SPEED_M_PER_MIN
        self.minutes_per_stop = minutes_per_stop if minutes_per_stop is not None else Config.MINUTES_PER_STOP

    def find_itineraries(self, start, end):
        """
        Lists every single-route journey from start to end, fastest first.

        Every (board stop, alight stop) pair of nearby stops is tried on every
        route. A route only counts if it reaches the board stop no later than
        the alight stop. Equal positions (same stop at both ends) are kept as
        zero-stop rides.

        Returns:
            list[Itinerary]: sorted by total time; ties keep discovery order.
                Empty when nothing is nearby or no route runs the right way.
        """
        start_stops = find_nearby_stops(self.network, start, self.max_distance)
        end_stops = find_nearby_stops(self.network, end, self.max_distance)

        candidates = []
        for board_stop in start_stops:
            for alight_stop in end_stops:
                for route in self.network.routes:
                    itinerary = self._build(route, board_stop, alight_stop, start, end)
                    if itinerary is not None:
                        candidates.append(itinerary)

        candidates.sort(key=lambda itinerary: itinerary.total_time)

        if not candidates:
            logging.info("No valid routes found. Try different start/end points.")
        else:
            logging.info(f"Found {len(candidates)} itineraries, fastest {candidates[0].formatted_total_time}")
        return candidates

    def _build(self, route, board_stop, alight_stop, start, end):
        board_index = route.first_index(board_stop.stop_id)
        alight_index = route.first_index(alight_stop.stop_id)
        if board_index is None or alight_index is None:
            return None
        # one-way: never ride a route backwards
        if board_index > alight_index:
            return None

        walk_to_board = walking_time(start, board_stop.coordinate, self.walk_speed)
        ride_time = (alight_index - board_index) * self.minutes_per_stop * 60
        walk_from_alight = walking_time(alight_stop.coordinate, end, self.walk_speed)

        return Itinerary(
            route=route,
            board_stop=board_stop,
            alight_stop=alight_stop,
            board_index=board_index,
            alight_index=alight_index,
            walk_to_board=walk_to_board,
            ride_time=ride_time,
            walk_from_alight=walk_from_alight,
            total_time=walk_to_board + ride_time + walk_from_alight,
            departures=tuple(self.schedule_provider.departures_for(route)),
        )
