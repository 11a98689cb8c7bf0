import math

from .config import Config

EARTH_RADIUS_M = 6371000


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate the great-circle distance in meters between two points on Earth.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)
    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance_between(a, b):
    """Distance in meters between two (lat, lon) coordinates."""
    return haversine_distance(a[0], a[1], b[0], b[1])


def walking_time(a, b, speed=None):
    """
    Straight-line walking time in seconds between two coordinates.

    Args:
        a, b: (lat, lon) tuples
        speed: walking speed in meters per minute, Config.WALK_SPEED_M_PER_MIN by default
    """
    speed = speed or Config.WALK_SPEED_M_PER_MIN
    return distance_between(a, b) / speed * 60
