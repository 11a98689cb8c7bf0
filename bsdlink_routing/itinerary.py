from dataclasses import dataclass
from typing import Tuple

from .route import Route
from .stop import Stop


def format_duration(seconds: float) -> str:
    """Abbreviated hours/minutes, e.g. "1h 5m", "12m", "0m"."""
    minutes = int(seconds // 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"
    return f"{minutes}m"


@dataclass(frozen=True)
class Itinerary:
    """One candidate journey: walk to a stop, ride one route, walk to the destination."""
    route: Route
    board_stop: Stop
    alight_stop: Stop
    board_index: int
    alight_index: int
    walk_to_board: float
    ride_time: float
    walk_from_alight: float
    total_time: float
    departures: Tuple[str, ...] = ()

    @property
    def stop_count(self) -> int:
        return self.alight_index - self.board_index

    @property
    def formatted_total_time(self) -> str:
        return format_duration(self.total_time)

    def __str__(self):
        return (f"Take {self.route.name} from {self.board_stop.name} to {self.alight_stop.name} "
                f"({self.stop_count} stops, ~{self.formatted_total_time} total)")
