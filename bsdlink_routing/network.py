import json
import logging
import os

from .config import Config
from .errors import InvalidStopReference
from .route import Route
from .stop import Stop

DEFAULT_NETWORK_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'bsdlink_network.json')


class NetworkModel:
    """
    The static bus network: every stop and every route.

    Built once and only read afterwards. Routes are given as
    ``(route_id, name, [stop_id, ...], color)`` tuples and resolved against
    the stop list here, so a route can never point at a stop that does not
    exist.
    """

    def __init__(self, stops, routes, name=""):
        self.name = name
        self._stops = {}
        for stop in stops:
            if stop.stop_id in self._stops:
                raise ValueError(f"Duplicate stop id '{stop.stop_id}'")
            self._stops[stop.stop_id] = stop

        self._routes = {}
        for route_id, route_name, stop_ids, color in routes:
            if route_id in self._routes:
                raise ValueError(f"Duplicate route id '{route_id}'")
            route_stops = []
            for stop_id in stop_ids:
                if stop_id not in self._stops:
                    raise InvalidStopReference(route_id, stop_id)
                route_stops.append(self._stops[stop_id])
            self._routes[route_id] = Route(route_id, route_name, route_stops, color)

        logging.debug(f"Network '{self.name}' loaded: {len(self._stops)} stops, {len(self._routes)} routes")

    @classmethod
    def from_dict(cls, data):
        """
        Builds a network from the JSON document layout::

            {"name": "...",
             "stops": [{"id": "BS01", "name": "...", "lat": -6.3, "lon": 106.6}],
             "routes": [{"id": "R01", "name": "...", "color": "#213284", "stops": ["BS01"]}]}
        """
        try:
            stops = [Stop(s['id'], s['name'], s['lat'], s['lon']) for s in data['stops']]
            routes = [(r['id'], r['name'], list(r['stops']), r.get('color', '')) for r in data['routes']]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed network data: missing {e}") from e
        return cls(stops, routes, name=data.get('name', ''))

    @property
    def stops(self):
        return tuple(self._stops.values())

    @property
    def routes(self):
        return tuple(self._routes.values())

    def stop(self, stop_id):
        return self._stops[stop_id]

    def route(self, route_id):
        return self._routes[route_id]

    def __repr__(self):
        return f"NetworkModel({self.name}, {len(self._stops)} stops, {len(self._routes)} routes)"


def load_network(path):
    """Reads a network JSON file."""
    logging.info(f"Loading network from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return NetworkModel.from_dict(data)


def default_network():
    """Loads the network named by Config.NETWORK_FILE, or the packaged BSD Link network."""
    return load_network(Config.NETWORK_FILE or DEFAULT_NETWORK_FILE)
