"""
BSD Link Routing

Single-route bus journey planning for the BSD Link feeder network (BSD City, Tangerang).
Finds stops near the rider's start and end points, ranks the routes that connect
them by total travel time, and expands a chosen itinerary into timed steps.

Example:
    from bsdlink_routing import TripSession

    session = TripSession()
    plan = session.plan((-6.3199, 106.6437), (-6.3014, 106.6532))
    if plan.itineraries:
        expansion = session.expand(plan.itineraries[0])
        for step in expansion.steps:
            print(step.formatted_time, step.label)
"""

from .api_client import APIClient, Place
from .errors import DirectionsProviderFailure, InvalidStopReference, RoutingError
from .itinerary import Itinerary
from .itinerary_expander import ItineraryExpander, StraightLineProvider
from .itinerary_finder import ItineraryFinder
from .network import NetworkModel, default_network, load_network
from .proximity import find_nearby_stops
from .route import Route
from .schedule import FixedScheduleProvider, TimetableScheduleProvider, generate_departures
from .step import Expansion, Step, StepMode
from .stop import Stop
from .trip_session import TripPlan, TripSession

__all__ = [
    'APIClient', 'Place',
    'RoutingError', 'InvalidStopReference', 'DirectionsProviderFailure',
    'NetworkModel', 'Stop', 'Route', 'load_network', 'default_network',
    'find_nearby_stops', 'ItineraryFinder', 'Itinerary',
    'FixedScheduleProvider', 'TimetableScheduleProvider', 'generate_departures',
    'ItineraryExpander', 'StraightLineProvider', 'Step', 'StepMode', 'Expansion',
    'TripSession', 'TripPlan',
]
