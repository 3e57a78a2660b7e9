"""
Pytest fixtures for flight filter tests.
"""

import pytest
from datetime import datetime

import sys
from pathlib import Path

# Make helpers importable from every test module
sys.path.insert(0, str(Path(__file__).parent))

from helpers import NOW, at, flight
from flight_filter.domain.models import Flight
from flight_filter.application.filters import (
    ArrivalBeforeDepartureFilter,
    DepartureBeforeNowFilter,
    GroundTimeFilter,
)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def departure_filter() -> DepartureBeforeNowFilter:
    return DepartureBeforeNowFilter(clock=lambda: NOW)


@pytest.fixture
def arrival_filter() -> ArrivalBeforeDepartureFilter:
    return ArrivalBeforeDepartureFilter()


@pytest.fixture
def ground_filter() -> GroundTimeFilter:
    return GroundTimeFilter()


@pytest.fixture
def all_filters(departure_filter, arrival_filter, ground_filter):
    return [departure_filter, arrival_filter, ground_filter]


@pytest.fixture
def valid_flight() -> Flight:
    return flight((at(1), at(2)), (at(2, 30), at(4)))


@pytest.fixture
def past_flight() -> Flight:
    return flight((at(-1), at(1)))


@pytest.fixture
def inverted_flight() -> Flight:
    return flight((at(3), at(1)))


@pytest.fixture
def long_layover_flight() -> Flight:
    return flight((at(1), at(2)), (at(5), at(6)))


@pytest.fixture
def mixed_flights(valid_flight, past_flight, inverted_flight, long_layover_flight):
    return [valid_flight, past_flight, inverted_flight, long_layover_flight]
