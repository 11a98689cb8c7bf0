from typing import List, Optional, Sequence, Tuple

from .stop import Stop


class Route:
    """
    A directional bus line: an ordered sequence of stops.

    A route may visit the same stop more than once (loop lines). Every lookup
    by stop id resolves to the first occurrence in the sequence.
    """

    def __init__(self, route_id: str, name: str, stops: Sequence[Stop], color: str = "") -> None:
        if not stops:
            raise ValueError(f"Route '{route_id}' has no stops")
        self.route_id = str(route_id)
        self.name = name
        self.stops: Tuple[Stop, ...] = tuple(stops)
        self.color = color

    def first_index(self, stop_id: str) -> Optional[int]:
        for index, stop in enumerate(self.stops):
            if stop.stop_id == stop_id:
                return index
        return None

    def stops_between(self, board: Stop, alight: Stop) -> List[Stop]:
        """
        Returns the stops ridden from board to alight, both included.

        Returns an empty list if either stop is not on the route or if
        alight comes before board (routes are never ridden backwards).
        """
        board_index = self.first_index(board.stop_id)
        alight_index = self.first_index(alight.stop_id)
        if board_index is None or alight_index is None or board_index > alight_index:
            return []
        return list(self.stops[board_index:alight_index + 1])

    def path_between(self, board: Stop, alight: Stop) -> List[Tuple[float, float]]:
        return [stop.coordinate for stop in self.stops_between(board, alight)]

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented
        return self.route_id == other.route_id

    def __hash__(self):
        return hash(self.route_id)

    def __repr__(self):
        return f"Route({self.route_id}, {self.name}, {len(self.stops)} stops)"
