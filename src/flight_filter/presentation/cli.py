"""
Command line interface
"""
import argparse
import copy
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..domain.models import Flight
from ..infrastructure.config import Config
from ..infrastructure.factory import FlightFilterFactory
from ..infrastructure.sample_data import FlightBuilder

logger = logging.getLogger(__name__)

SECTION_TITLES = {
    "departure": "Excluding flights departing before now",
    "arrival": "Excluding segments arriving before departure",
    "ground": "Excluding flights with more than {limit} minutes on the ground",
}


class FlightFilterCLI:
    """CLI front-end running the demo flights through the filters"""

    def __init__(self, console: Optional[Console] = None, config: Optional[Config] = None):
        self.console = console or Console()
        self.config = config or Config()
        self.service = FlightFilterFactory.create_service()

    def run(self, argv: Optional[Sequence[str]] = None) -> List[Flight]:
        """Runs the CLI and returns the flights that passed every selected filter"""
        args = self._parse_arguments(argv)
        self._configure_logging(args.log_level)

        config = copy.copy(self.config)
        if args.max_ground_minutes is not None:
            config.MAX_GROUND_MINUTES = args.max_ground_minutes

        names = args.filters or FlightFilterFactory.filter_names()
        filters = [FlightFilterFactory.create_filter(name, config) for name in names]

        flights = FlightBuilder.create_flights()
        logger.info("Built %d sample flights", len(flights))

        self._display_flights("All flights", flights)

        for name, flight_filter in zip(names, filters):
            title = SECTION_TITLES[name].format(limit=config.MAX_GROUND_MINUTES)
            self._display_flights(title, self.service.filter_one(flights, flight_filter))

        passed = self.service.filter_all(flights, filters)
        self._display_flights("Flights passing ALL filters", passed)
        return passed

    def _parse_arguments(self, argv: Optional[Sequence[str]]) -> argparse.Namespace:
        """Sets up and parses command line arguments"""
        parser = argparse.ArgumentParser(
            prog="flight-filter",
            description="FlightFilter - validate sample itineraries against time-based filters",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  python -m flight_filter
  python -m flight_filter --filter departure --filter ground
  python -m flight_filter --max-ground-minutes 180 --log-level DEBUG
            """
        )

        parser.add_argument("--filter", dest="filters", action="append",
                            choices=FlightFilterFactory.filter_names(),
                            help="Filter to apply (repeatable, default: all)")
        parser.add_argument("--max-ground-minutes", type=int,
                            help=f"Ground time limit in minutes (default: {self.config.MAX_GROUND_MINUTES})")
        parser.add_argument("--log-level", default=self.config.LOG_LEVEL,
                            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                            help="Log verbosity")

        return parser.parse_args(argv)

    def _configure_logging(self, level: str):
        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=self.console, show_path=False)],
            force=True,
        )

    def _display_flights(self, title: str, flights: List[Flight]):
        """Prints a table of flights, or a notice when there are none"""
        if not flights:
            self.console.print(
                Panel("[yellow]No flights left after filtering.[/yellow]",
                      title=title, border_style="yellow")
            )
            return

        table = Table(show_lines=False, title=f"{title} ({len(flights)})")
        table.add_column("#", justify="right", style="bold cyan")
        table.add_column("Segments", style="yellow")
        table.add_column("Stops", justify="center")

        fmt = self.config.DATETIME_FORMAT
        for index, flight in enumerate(flights, start=1):
            table.add_row(str(index), Text(flight.format(fmt) or "-"), str(flight.total_stops))

        self.console.print(table)


def main():
    """Main entry point"""
    cli = FlightFilterCLI()
    cli.run()


if __name__ == "__main__":
    main()
