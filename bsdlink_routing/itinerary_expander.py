import datetime
import logging

import pytz

from .config import Config
from .errors import DirectionsProviderFailure
from .geo import distance_between, walking_time
from .schedule import next_departure
from .step import Expansion, Step, StepMode

# Straight-line driving estimate, meters per minute (~30 km/h)
DRIVING_SPEED_M_PER_MIN = 500


class StraightLineProvider:
    """
    Offline path provider: a two-point path and a distance/speed duration.
    Also used as the fallback whenever the real provider fails.
    """

    def __init__(self, walk_speed=None):
        self.walk_speed = walk_speed or Config.WALK_SPEED_M_PER_MIN

    def walking_estimate(self, start, end):
        return [start, end], walking_time(start, end, self.walk_speed)

    def driving_estimate(self, start, end):
        return [start, end], distance_between(start, end) / DRIVING_SPEED_M_PER_MIN * 60


class ItineraryExpander:
    def __init__(self, walk_speed=None):
        self.fallback = StraightLineProvider(walk_speed)

    def expand(self, itinerary, start, end, path_provider=None, requested_at=None, is_current=None):
        """
        Turns a chosen itinerary into timed steps.

        The legs are resolved one after another, each provider call finishing
        before the next step's time is known: start, walk to the board stop,
        ride, walk to the destination, arrival. Step times are `requested_at`
        plus the time elapsed so far.

        Walk legs take their duration from the provider when it answers and
        from the straight-line estimate when it fails. The ride always lasts
        the itinerary's ride time; the provider only supplies its path.

        Args:
            itinerary: the Itinerary to expand
            start, end: the rider's (lat, lon) endpoints
            path_provider: object with walking_estimate/driving_estimate,
                straight lines only when omitted
            requested_at: when the journey starts, now in Config.TIMEZONE by default
            is_current: callable checked after every provider call; once it
                returns False the expansion is abandoned

        Returns:
            Expansion, or None if the request was superseded mid-way
        """
        provider = path_provider or self.fallback
        now = requested_at or datetime.datetime.now(pytz.timezone(Config.TIMEZONE))
        is_current = is_current or (lambda: True)

        route = itinerary.route
        board = itinerary.board_stop
        alight = itinerary.alight_stop
        ridden = route.stops_between(board, alight)

        elapsed = 0.0
        steps = [Step(now, "Start Point", StepMode.WALK, start)]
        legs = []

        def at(seconds):
            return now + datetime.timedelta(seconds=seconds)

        # walk to the board stop
        walk_path, walk_duration = self._estimate(provider.walking_estimate, self.fallback.walking_estimate,
                                                  start, board.coordinate, "walk to board")
        if not is_current():
            logging.info("Expansion superseded after walk-to-board leg; discarding")
            return None
        legs.append(tuple(walk_path))
        steps.append(Step(at(elapsed), f"Walk to {board.name}", StepMode.WALK, board.coordinate,
                          duration=walk_duration))
        elapsed += walk_duration

        # ride
        ride_path, _ = self._estimate(provider.driving_estimate, self.fallback.driving_estimate,
                                     board.coordinate, alight.coordinate, "ride")
        if not is_current():
            logging.info("Expansion superseded after ride leg; discarding")
            return None
        legs.append(tuple(ride_path))
        steps.append(Step(at(elapsed), f"Take {route.name}", StepMode.RIDE, alight.coordinate,
                          duration=itinerary.ride_time,
                          stop_names=tuple(stop.name for stop in ridden),
                          departure=next_departure(itinerary.departures, at(elapsed))))
        elapsed += itinerary.ride_time

        # walk to the destination
        final_path, final_duration = self._estimate(provider.walking_estimate, self.fallback.walking_estimate,
                                                    alight.coordinate, end, "walk to destination")
        if not is_current():
            logging.info("Expansion superseded after walk-to-destination leg; discarding")
            return None
        legs.append(tuple(final_path))
        steps.append(Step(at(elapsed), "Walk to Destination", StepMode.WALK, end, duration=final_duration))
        elapsed += final_duration

        steps.append(Step(at(elapsed), "Destination", StepMode.ARRIVE, end))

        logging.info(f"Expanded {route.name}: {len(steps)} steps, arriving {steps[-1].formatted_time}")
        return Expansion(itinerary=itinerary, requested_at=now, steps=tuple(steps), legs=tuple(legs))

    def _estimate(self, estimate, fallback, start, end, leg):
        try:
            return estimate(start, end)
        except DirectionsProviderFailure as e:
            logging.warning(f"Directions for {leg} failed, using straight line: {e}")
            return fallback(start, end)
