"""
Factory for configured filters and services
"""
import logging
from typing import Callable, Dict, List, Optional

from .config import Config
from ..domain.exceptions import InvalidArgumentError
from ..application.filters import (
    ArrivalBeforeDepartureFilter,
    DepartureBeforeNowFilter,
    GroundTimeFilter,
)
from ..application.interfaces import FlightFilter
from ..application.services import FlightFilterService

logger = logging.getLogger(__name__)


class FlightFilterFactory:
    """Builds filters by name and the filtering service"""

    _BUILDERS: Dict[str, Callable[[Config], FlightFilter]] = {
        "departure": lambda config: DepartureBeforeNowFilter(),
        "arrival": lambda config: ArrivalBeforeDepartureFilter(),
        "ground": lambda config: GroundTimeFilter(config.MAX_GROUND_MINUTES),
    }

    @classmethod
    def filter_names(cls) -> List[str]:
        """Registered filter names in their default order"""
        return list(cls._BUILDERS)

    @classmethod
    def create_filter(cls, name: str, config: Optional[Config] = None) -> FlightFilter:
        """Creates a single filter by its registered name"""
        if config is None:
            config = Config()

        builder = cls._BUILDERS.get(name)
        if builder is None:
            raise InvalidArgumentError(
                f"unknown filter {name!r}, expected one of: {', '.join(cls._BUILDERS)}"
            )

        flight_filter = builder(config)
        logger.debug("Created %s for %r", type(flight_filter).__name__, name)
        return flight_filter

    @classmethod
    def create_default_filters(cls, config: Optional[Config] = None) -> List[FlightFilter]:
        """Creates every registered filter"""
        return [cls.create_filter(name, config) for name in cls.filter_names()]

    @staticmethod
    def create_service() -> FlightFilterService:
        return FlightFilterService()
