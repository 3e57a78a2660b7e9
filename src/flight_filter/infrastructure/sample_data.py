"""
Sample flights used by the console front-end
"""
from datetime import datetime, timedelta
from typing import List, Optional

from ..domain.exceptions import InvalidArgumentError
from ..domain.models import Flight, Segment


class FlightBuilder:
    """Factory for the demo list of flights"""

    @staticmethod
    def create_flights(now: Optional[datetime] = None) -> List[Flight]:
        """Builds six flights anchored three days after ``now``"""
        if now is None:
            now = datetime.now()
        anchor = now + timedelta(days=3)

        def hours(n: int) -> datetime:
            return anchor + timedelta(hours=n)

        return [
            # A normal flight with two hour duration
            FlightBuilder.create_flight(anchor, hours(2)),
            # A normal multi segment flight
            FlightBuilder.create_flight(anchor, hours(2), hours(3), hours(5)),
            # A flight departing in the past
            FlightBuilder.create_flight(anchor - timedelta(days=6), anchor),
            # A flight that departs before it arrives
            FlightBuilder.create_flight(anchor, hours(-6)),
            # A flight with more than two hours ground time
            FlightBuilder.create_flight(anchor, hours(2), hours(5), hours(6)),
            # Another flight with more than two hours ground time
            FlightBuilder.create_flight(anchor, hours(2), hours(3), hours(4), hours(6), hours(7)),
        ]

    @staticmethod
    def create_flight(*dates: datetime) -> Flight:
        """Pairs consecutive dates into departure/arrival segments"""
        if len(dates) % 2 != 0:
            raise InvalidArgumentError("you must pass an even number of dates")

        segments = [
            Segment(departure, arrival)
            for departure, arrival in zip(dates[::2], dates[1::2])
        ]
        return Flight(segments)
