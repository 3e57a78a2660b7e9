"""
Interfaces/Contracts for the Application Layer
"""
from datetime import datetime
from typing import Callable, Protocol, runtime_checkable

from ..domain.models import Flight

# Zero-argument source of the current instant
Clock = Callable[[], datetime]


@runtime_checkable
class FlightFilter(Protocol):
    """Predicate deciding whether a flight is valid"""

    def is_valid(self, flight: Flight) -> bool:
        ...
