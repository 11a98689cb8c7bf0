import datetime
import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .itinerary import Itinerary, format_duration


class StepMode(enum.Enum):
    WALK = "walk"
    RIDE = "ride"
    ARRIVE = "arrive"


@dataclass(frozen=True)
class Step:
    """One line of the turn-by-turn list shown after an itinerary is chosen."""
    timestamp: datetime.datetime
    label: str
    mode: StepMode
    coordinate: Tuple[float, float]
    address: Optional[str] = None
    duration: Optional[float] = None
    stop_names: Optional[Tuple[str, ...]] = None
    departure: Optional[str] = None

    @property
    def formatted_time(self) -> str:
        return self.timestamp.strftime("%H:%M")

    @property
    def formatted_duration(self) -> Optional[str]:
        if self.duration is None:
            return None
        return format_duration(self.duration)


@dataclass(frozen=True)
class Expansion:
    """
    The expanded journey: timed steps plus one coordinate path per leg
    (walk to the board stop, the ride, walk to the destination).
    """
    itinerary: Itinerary
    requested_at: datetime.datetime
    steps: Tuple[Step, ...]
    legs: Tuple[Tuple[Tuple[float, float], ...], ...]

    @property
    def arrival_time(self) -> datetime.datetime:
        return self.steps[-1].timestamp

    @property
    def stop_path(self) -> Tuple[Tuple[float, float], ...]:
        """The ride drawn through the coordinates of every stop ridden."""
        itinerary = self.itinerary
        return tuple(itinerary.route.path_between(itinerary.board_stop, itinerary.alight_stop))
