import requests
import logging
import time
from .config import Config
from .errors import DirectionsProviderFailure

# OSRM profile names per travel mode
OSRM_PROFILES = {
    "walking": "foot",
    "driving": "driving",
}


class Place:
    def __init__(self, name, lat, lon, address=""):
        self.name = name
        self.lat = float(lat)
        self.lon = float(lon)
        self.address = address

    @property
    def coordinate(self):
        return (self.lat, self.lon)

    def __repr__(self):
        return f"Place({self.name}, {self.lat}, {self.lon})"


class APIClient:
    """
    Client for the external collaborators of the planner:
    Nominatim place search and OSRM directions.

    Implements the path provider interface used by ItineraryExpander
    (walking_estimate / driving_estimate).
    """

    def __init__(self, osrm_url=None, search_url=None, timeout=None):
        """
        Initialize the API client.
        """
        self.osrm_url = (osrm_url or Config.OSRM_URL).rstrip('/')
        self.search_url = search_url or Config.OSM_URL
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self.search_cache = {}  # key: normalized query, value: list of Place
        self._last_search = None

    def _normalize_query(self, query: str) -> str:
        return " ".join(query.split()).lower()

    def _search_viewbox(self):
        lat, lon = Config.SEARCH_CENTER
        half = Config.SEARCH_SPAN / 2
        # Nominatim viewbox: left,top,right,bottom
        return f"{lon - half},{lat + half},{lon + half},{lat - half}"

    def _respect_rate_limit(self):
        # Nominatim usage policy: at most one request per second
        if self._last_search is not None:
            wait = 1 - (time.monotonic() - self._last_search)
            if wait > 0:
                time.sleep(wait)
        self._last_search = time.monotonic()

    def search_places(self, query: str, limit: int = 10):
        """
        Searches named places near the service area.

        Results are biased to the Config.SEARCH_CENTER box and only those whose
        address mentions Config.SEARCH_LOCALITY are kept. Uses a cache to
        avoid repeat API calls.

        Returns:
            list[Place]: possibly empty; failures are logged, never raised
        """
        if not query or not query.strip():
            return []

        normalized = self._normalize_query(query)
        if normalized in self.search_cache:
            logging.info("Cache hit for query '%s'", normalized)
            return list(self.search_cache[normalized])

        params = {
            "q": query.strip(),
            "format": "jsonv2",
            "addressdetails": 1,
            "limit": limit,
            "viewbox": self._search_viewbox(),
            "bounded": 1,
        }
        headers = {"User-Agent": Config.USER_AGENT}

        try:
            self._respect_rate_limit()
            response = requests.get(self.search_url, params=params, headers=headers, timeout=self.timeout)
            if response.status_code != 200:
                logging.error("Place search failed: %s", response.text[:200])
                return []
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logging.error("Exception during place search: %s", e)
            return []

        locality = Config.SEARCH_LOCALITY.lower()
        places = []
        for item in data:
            address = item.get("address") or {}
            if not any(locality in str(value).lower() for value in address.values()):
                continue
            try:
                name = item.get("name") or item.get("display_name", "").split(",")[0]
                places.append(Place(name, item["lat"], item["lon"], item.get("display_name", "")))
            except (KeyError, TypeError, ValueError) as e:
                logging.warning(f"Skipping malformed search result: {e}")

        logging.info("Place search '%s' returned %d results", normalized, len(places))
        self.search_cache[normalized] = places
        return list(places)

    def get_directions(self, start, end, mode: str):
        """
        Fetches a path and travel time from OSRM.

        Args:
            start, end: (lat, lon) tuples
            mode: "walking" or "driving"

        Returns:
            (path, duration): path is a list of (lat, lon), duration in seconds

        Raises:
            DirectionsProviderFailure: on any HTTP, network or response problem
        """
        profile = OSRM_PROFILES.get(mode)
        if profile is None:
            raise ValueError(f"Unknown travel mode: {mode}")

        coords = f"{start[1]:.6f},{start[0]:.6f};{end[1]:.6f},{end[0]:.6f}"
        url = f"{self.osrm_url}/route/v1/{profile}/{coords}"
        params = {"overview": "full", "geometries": "geojson", "steps": "false"}
        logging.debug(f"Requesting {mode} directions: {url}")

        try:
            response = requests.get(url, params=params, headers={"User-Agent": Config.USER_AGENT},
                                    timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DirectionsProviderFailure(f"Timeout fetching {mode} directions") from e
        except requests.exceptions.RequestException as e:
            raise DirectionsProviderFailure(f"Request error fetching {mode} directions: {e}") from e

        if response.status_code != 200:
            raise DirectionsProviderFailure(f"OSRM returned {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise DirectionsProviderFailure("OSRM returned invalid JSON") from e

        routes = data.get("routes") or []
        if data.get("code", "Ok") != "Ok" or not routes:
            raise DirectionsProviderFailure(f"No {mode} route found: {data.get('code')}")

        try:
            coordinates = routes[0]["geometry"]["coordinates"]
            path = [(float(lat), float(lon)) for lon, lat in coordinates]
            duration = float(routes[0]["duration"])
        except (KeyError, TypeError, ValueError) as e:
            raise DirectionsProviderFailure(f"Malformed OSRM route: {e}") from e

        if len(path) < 2:
            raise DirectionsProviderFailure("OSRM route has no geometry")
        return path, duration

    def walking_estimate(self, start, end):
        return self.get_directions(start, end, "walking")

    def driving_estimate(self, start, end):
        return self.get_directions(start, end, "driving")
