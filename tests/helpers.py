"""
Helper functions shared by the flight filter tests.
"""

from datetime import datetime, timedelta

from flight_filter.domain.models import Flight, Segment

# Pinned "now" used by every clock-dependent test
NOW = datetime(2026, 10, 19, 12, 0)


def at(hours: float = 0, minutes: float = 0, microseconds: float = 0) -> datetime:
    """Instant relative to NOW"""
    return NOW + timedelta(hours=hours, minutes=minutes, microseconds=microseconds)


def flight(*pairs) -> Flight:
    """Builds a flight from (departure, arrival) pairs"""
    return Flight([Segment(departure, arrival) for departure, arrival in pairs])
