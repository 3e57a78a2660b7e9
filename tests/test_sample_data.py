"""
Tests for the demo flight builder.
"""

import pytest
from datetime import datetime, timedelta

from helpers import NOW
from flight_filter.domain.exceptions import InvalidArgumentError
from flight_filter.application.services import FlightFilterService
from flight_filter.infrastructure.sample_data import FlightBuilder


class TestCreateFlight:
    """Pairing timestamps into segments."""

    def test_pairs_dates_in_order(self):
        dates = [NOW + timedelta(hours=h) for h in range(4)]
        built = FlightBuilder.create_flight(*dates)

        assert [(s.departure, s.arrival) for s in built.segments] == [
            (dates[0], dates[1]),
            (dates[2], dates[3]),
        ]

    def test_no_dates_gives_empty_flight(self):
        assert FlightBuilder.create_flight().segments == ()

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_odd_number_of_dates_raises(self, count):
        dates = [NOW + timedelta(hours=h) for h in range(count)]
        with pytest.raises(InvalidArgumentError, match="even number of dates"):
            FlightBuilder.create_flight(*dates)


class TestCreateFlights:
    """The canonical demo data set."""

    def test_six_flights(self):
        flights = FlightBuilder.create_flights(now=NOW)
        assert [len(f.segments) for f in flights] == [1, 2, 1, 1, 2, 3]

    def test_anchored_three_days_ahead(self):
        first = FlightBuilder.create_flights(now=NOW)[0]
        assert first.segments[0].departure == NOW + timedelta(days=3)

    def test_each_filter_rejects_its_flights(self, departure_filter, arrival_filter, ground_filter):
        flights = FlightBuilder.create_flights(now=NOW)
        service = FlightFilterService()

        assert service.filter_one(flights, departure_filter) == flights[:2] + flights[3:]
        assert service.filter_one(flights, arrival_filter) == flights[:3] + flights[4:]
        assert service.filter_one(flights, ground_filter) == flights[:4]

    def test_all_filters_keep_the_two_normal_flights(self, all_filters):
        flights = FlightBuilder.create_flights(now=NOW)
        assert FlightFilterService().filter_all(flights, all_filters) == flights[:2]

    def test_defaults_to_wall_clock(self):
        flights = FlightBuilder.create_flights()
        assert flights[0].segments[0].departure > datetime.now()
