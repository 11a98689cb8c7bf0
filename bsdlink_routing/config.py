import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _float_pair(name, value, default):
    if not value:
        return default
    try:
        lat, lon = value.split(',')
        return float(lat), float(lon)
    except ValueError:
        raise ValueError(f"{name} must be 'lat,lon', got {value!r}") from None


class Config:
    """
    Configuration class for BSD Link Routing.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Timezone configuration
    TIMEZONE = os.environ.get('TIMEZONE', 'Asia/Jakarta')

    # External collaborators
    OSRM_URL = os.environ.get('OSRM_URL', 'https://router.project-osrm.org')
    OSM_URL = os.environ.get('OSM_URL', 'https://nominatim.openstreetmap.org/search')
    REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', 10))
    USER_AGENT = os.environ.get('USER_AGENT', 'BSDLinkRouting/1.0')

    # Network data; empty means the packaged BSD Link network
    NETWORK_FILE = os.environ.get('NETWORK_FILE', '')

    # Itinerary estimation
    NEARBY_RADIUS_M = float(os.environ.get('NEARBY_RADIUS_M', 500))
    WALK_SPEED_M_PER_MIN = float(os.environ.get('WALK_SPEED_M_PER_MIN', 80))
    MINUTES_PER_STOP = float(os.environ.get('MINUTES_PER_STOP', 3))

    # Place search bias (Tangerang)
    SEARCH_CENTER = _float_pair('SEARCH_CENTER', os.environ.get('SEARCH_CENTER'), (-6.1781, 106.6319))
    SEARCH_SPAN = float(os.environ.get('SEARCH_SPAN', 0.2))
    SEARCH_LOCALITY = os.environ.get('SEARCH_LOCALITY', 'tangerang')
