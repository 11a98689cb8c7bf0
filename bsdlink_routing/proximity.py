import logging

from .config import Config
from .geo import haversine_distance


def find_nearby_stops(network, center, max_distance=None):
    """
    Finds the stops within max_distance meters of a coordinate.

    Stops are returned in network order. An empty list just means nothing is
    close enough; it is not an error.
    """
    if max_distance is None:
        max_distance = Config.NEARBY_RADIUS_M
    lat, lon = center
    nearby = [
        stop for stop in network.stops
        if haversine_distance(lat, lon, stop.lat, stop.lon) <= max_distance
    ]
    if not nearby:
        logging.info(f"No stops within {max_distance:.0f}m of ({lat}, {lon})")
    else:
        logging.debug(f"{len(nearby)} stops within {max_distance:.0f}m of ({lat}, {lon})")
    return nearby
