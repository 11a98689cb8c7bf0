import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import DirectionsProviderFailure
from .itinerary import Itinerary
from .itinerary_expander import ItineraryExpander
from .itinerary_finder import ItineraryFinder
from .network import default_network


@dataclass(frozen=True)
class TripPlan:
    """The answer to one planning request."""
    start: Tuple[float, float]
    end: Tuple[float, float]
    itineraries: Tuple[Itinerary, ...]
    overview_path: List[Tuple[float, float]]

    @property
    def is_empty(self) -> bool:
        return not self.itinerary_count

    @property
    def itinerary_count(self) -> int:
        return len(self.itineraries)


class TripSession:
    """
    Holds the rider's current planning request.

    Every plan(), reverse() or clear() supersedes whatever came before it: an
    expansion still running for an older request finishes its provider call
    and is then discarded, so stale steps never reach the caller.
    """

    def __init__(self, network=None, finder=None, expander=None, path_provider=None):
        self.network = network or default_network()
        self.finder = finder or ItineraryFinder(self.network)
        self.expander = expander or ItineraryExpander()
        self.path_provider = path_provider or self.expander.fallback
        self.current_plan: Optional[TripPlan] = None
        self._generation = 0
        self._lock = threading.Lock()
        self._executor = None

    def _supersede(self):
        with self._lock:
            self._generation += 1
            return self._generation

    def _is_current(self, generation):
        with self._lock:
            return generation == self._generation

    def plan(self, start, end):
        """
        Starts a new request: finds ranked itineraries between two coordinates
        along with a driving overview path for the whole trip.
        """
        generation = self._supersede()
        logging.info(f"Planning trip from {start} to {end}")

        try:
            overview_path, _ = self.path_provider.driving_estimate(start, end)
        except DirectionsProviderFailure as e:
            logging.warning(f"Overview directions failed, using straight line: {e}")
            overview_path = [start, end]

        itineraries = self.finder.find_itineraries(start, end)
        plan = TripPlan(start=start, end=end, itineraries=tuple(itineraries), overview_path=overview_path)
        with self._lock:
            if generation == self._generation:
                self.current_plan = plan
        return plan

    def reverse(self):
        """Swaps start and end of the current request and plans again."""
        if self.current_plan is None:
            raise ValueError("No trip planned to reverse")
        return self.plan(self.current_plan.end, self.current_plan.start)

    def clear(self):
        """Drops the current request; in-flight expansions will be discarded."""
        with self._lock:
            self._generation += 1
            self.current_plan = None

    def expand(self, itinerary):
        """
        Expands one itinerary of the current plan into steps.

        Returns None if a newer request arrived before the expansion finished.
        """
        return self._expansion_for(itinerary)()

    def expand_async(self, itinerary):
        """Same as expand() on a background worker; returns a Future."""
        job = self._expansion_for(itinerary)
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="trip-expand")
        return self._executor.submit(job)

    def _expansion_for(self, itinerary):
        # bound to the request current at call time, not at run time
        with self._lock:
            plan = self.current_plan
            generation = self._generation
        if plan is None:
            raise ValueError("No trip planned; call plan() first")

        def run():
            if not self._is_current(generation):
                return None
            return self.expander.expand(
                itinerary, plan.start, plan.end,
                path_provider=self.path_provider,
                is_current=lambda: self._is_current(generation),
            )
        return run

    def close(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
