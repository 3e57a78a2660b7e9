"""
Flight Filters - time-based validity predicates
"""
from datetime import datetime, timedelta
from typing import Optional

from ..domain.models import Flight, is_aware
from .interfaces import Clock

DEFAULT_MAX_GROUND_MINUTES = 120

_ONE_MINUTE = timedelta(minutes=1)


class DepartureBeforeNowFilter:
    """Rejects flights with any segment departing before now.

    "Now" comes from ``clock`` (the wall clock by default) and is sampled
    once per ``is_valid`` call, so results may change between calls.
    A departure exactly at "now" is still valid.

    When "now" and the segments differ in awareness, "now" is converted
    through the local timezone: a naive reading is taken as local time,
    an aware one becomes naive local time.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or datetime.now

    def is_valid(self, flight: Flight) -> bool:
        if not flight.segments:
            return True

        now = _align(self._clock(), flight.segments[0].departure)
        return all(segment.departure >= now for segment in flight.segments)


class ArrivalBeforeDepartureFilter:
    """Rejects flights with a segment that arrives before it departs"""

    def is_valid(self, flight: Flight) -> bool:
        return all(segment.arrival >= segment.departure for segment in flight.segments)


class GroundTimeFilter:
    """Rejects flights whose total ground time exceeds the limit.

    Each layover is counted in whole minutes, truncated toward zero.
    Layovers are summed with their sign: a segment departing before the
    previous one landed contributes negative minutes and can offset
    longer layovers elsewhere in the itinerary.
    """

    def __init__(self, max_ground_minutes: int = DEFAULT_MAX_GROUND_MINUTES):
        self._max_ground_minutes = max_ground_minutes

    @property
    def max_ground_minutes(self) -> int:
        return self._max_ground_minutes

    def is_valid(self, flight: Flight) -> bool:
        return self.total_ground_minutes(flight) <= self._max_ground_minutes

    @staticmethod
    def total_ground_minutes(flight: Flight) -> int:
        """Signed sum of layover minutes between consecutive segments"""
        segments = flight.segments
        total = 0
        for previous, following in zip(segments, segments[1:]):
            total += _whole_minutes(following.departure - previous.arrival)
        return total


def _whole_minutes(delta: timedelta) -> int:
    minutes = abs(delta) // _ONE_MINUTE
    return minutes if delta >= timedelta(0) else -minutes


def _align(now: datetime, reference: datetime) -> datetime:
    if is_aware(now) == is_aware(reference):
        return now
    if is_aware(reference):
        return now.astimezone()
    return now.astimezone().replace(tzinfo=None)
