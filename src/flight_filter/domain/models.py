"""
Domain Models - Flight and Segment value objects
"""
from datetime import datetime
from typing import Any, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import InvalidArgumentError

DISPLAY_FORMAT = "%Y-%m-%dT%H:%M"


def is_aware(instant: datetime) -> bool:
    """True when the instant carries a UTC offset"""
    return instant.tzinfo is not None and instant.utcoffset() is not None


class Segment(BaseModel):
    """A single leg of travel.

    Departure and arrival must both be naive or both be timezone-aware.
    """
    model_config = ConfigDict(frozen=True)

    departure: datetime = Field(..., description="Departure instant")
    arrival: datetime = Field(..., description="Arrival instant")

    def __init__(self, departure: Any = None, arrival: Any = None, **data: Any):
        super().__init__(departure=departure, arrival=arrival, **data)

    @model_validator(mode="before")
    @classmethod
    def require_instants(cls, data: Any) -> Any:
        if isinstance(data, dict) and (data.get("departure") is None or data.get("arrival") is None):
            raise InvalidArgumentError("segment requires both departure and arrival")
        return data

    @model_validator(mode="after")
    def check_same_awareness(self) -> "Segment":
        if is_aware(self.departure) != is_aware(self.arrival):
            raise InvalidArgumentError("departure and arrival must both be naive or both be timezone-aware")
        return self

    @property
    def aware(self) -> bool:
        return is_aware(self.departure)

    def format(self, fmt: str = DISPLAY_FORMAT) -> str:
        """Renders the segment as [departure|arrival]"""
        return f"[{self.departure.strftime(fmt)}|{self.arrival.strftime(fmt)}]"

    def __str__(self) -> str:
        return self.format()


class Flight(BaseModel):
    """An itinerary made of ordered segments"""
    model_config = ConfigDict(frozen=True)

    segments: Tuple[Segment, ...] = ()

    def __init__(self, segments: Iterable[Segment] = (), **data: Any):
        super().__init__(segments=tuple(segments), **data)

    @model_validator(mode="after")
    def check_same_awareness(self) -> "Flight":
        if len({segment.aware for segment in self.segments}) > 1:
            raise InvalidArgumentError("segments must all be naive or all be timezone-aware")
        return self

    @property
    def total_stops(self) -> int:
        """Number of layovers"""
        return max(0, len(self.segments) - 1)

    def format(self, fmt: str = DISPLAY_FORMAT) -> str:
        return " ".join(segment.format(fmt) for segment in self.segments)

    def __str__(self) -> str:
        return self.format()
