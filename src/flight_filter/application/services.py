"""
Application Services - filter composition
"""
import logging
from typing import Iterable, List, Sequence

from ..domain.models import Flight
from .interfaces import FlightFilter

logger = logging.getLogger(__name__)


class FlightFilterService:
    """Applies one or many filters to a collection of flights"""

    def filter_one(self, flights: Iterable[Flight], flight_filter: FlightFilter) -> List[Flight]:
        """Keeps the flights accepted by a single filter, in original order"""
        return [flight for flight in flights if flight_filter.is_valid(flight)]

    def filter_all(self, flights: Iterable[Flight], filters: Sequence[FlightFilter]) -> List[Flight]:
        """Narrows the flights through every filter in turn.

        Each stage only sees the survivors of the previous one. With no
        filters the input comes back unchanged.
        """
        result = list(flights)

        for flight_filter in filters:
            before = len(result)
            result = self.filter_one(result, flight_filter)
            logger.debug(
                "%s kept %d of %d flights",
                type(flight_filter).__name__,
                len(result),
                before,
            )

        return result
