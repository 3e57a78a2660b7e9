"""
Application configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Centralized configuration"""

    # Filters
    MAX_GROUND_MINUTES = int(os.getenv("FLIGHT_FILTER_MAX_GROUND_MINUTES", "120"))

    # Output
    LOG_LEVEL = os.getenv("FLIGHT_FILTER_LOG_LEVEL", "WARNING").upper()
    DATETIME_FORMAT = os.getenv("FLIGHT_FILTER_DATETIME_FORMAT", "%Y-%m-%dT%H:%M")
