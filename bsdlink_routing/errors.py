class RoutingError(Exception):
    """Base class for BSD Link routing errors."""


class InvalidStopReference(RoutingError):
    """A route refers to a stop id that is not part of the network."""

    def __init__(self, route_id, stop_id):
        self.route_id = route_id
        self.stop_id = stop_id
        super().__init__(f"Route '{route_id}' references unknown stop '{stop_id}'")


class DirectionsProviderFailure(RoutingError):
    """The external directions service could not produce a path."""
