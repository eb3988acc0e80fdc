"""
Flight Search - command line entry point.

Runs one search against the shipped catalog and prints the result the way
the search form would show it.

Usage:
    python -m src.flight_search --origin GRU --destination GIG --date 2023-10-12
    python -m src.flight_search --list-airports
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from src.flight_search import messages
from src.flight_search.application import SearchFlights
from src.flight_search.config import Config
from src.flight_search.exceptions import InternalSearchError, MissingParameterError
from src.flight_search.logging_config import setup_logging
from src.flight_search.schemas.flight import Flight

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERNAL_ERROR = 1
EXIT_MISSING_FIELDS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-search",
        description="Search the flight catalog by origin, destination and date.",
    )
    parser.add_argument("--origin", help="Departure airport code (e.g. GRU)")
    parser.add_argument("--destination", help="Arrival airport code (e.g. GIG)")
    parser.add_argument("--date", help="Departure date, YYYY-MM-DD (prefix match)")
    parser.add_argument(
        "--list-airports",
        action="store_true",
        help="Print the airport list and exit (no search flags allowed)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help='Print the {"flights": [...]} response body instead of text',
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    return parser


def format_flight(flight: Flight, searcher: SearchFlights) -> str:
    """One display line per flight, with airport names when known."""
    origin = searcher.catalog.get_airport(flight.departure_airport)
    destination = searcher.catalog.get_airport(flight.arrival_airport)
    origin_name = origin.name if origin else flight.departure_airport
    destination_name = destination.name if destination else flight.arrival_airport
    return (
        f"{flight.airline} {flight.flight_number}  "
        f"{origin_name} ({flight.departure_airport}) {flight.departure_time} -> "
        f"{destination_name} ({flight.arrival_airport}) {flight.arrival_time}  "
        f"{Config.CURRENCY} {flight.price:.2f}"
    )


def flights_to_json(flights: List[Flight]) -> str:
    body = {
        "flights": [
            {
                "id": f.id,
                "departureAirport": f.departure_airport,
                "arrivalAirport": f.arrival_airport,
                "departureTime": f.departure_time,
                "arrivalTime": f.arrival_time,
                "price": f.price,
                "airline": f.airline,
                "flightNumber": f.flight_number,
            }
            for f in flights
        ]
    }
    return json.dumps(body, ensure_ascii=False, indent=2)


def main(argv: Optional[Sequence[str]] = None, searcher: Optional[SearchFlights] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:]).
        searcher: Facade to use; defaults to one over the shipped catalog.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_airports:
        search_flags = [
            flag
            for flag, value in (
                ("--origin", args.origin),
                ("--destination", args.destination),
                ("--date", args.date),
                ("--json", args.json or None),
            )
            if value is not None
        ]
        if search_flags:
            parser.error(
                f"--list-airports cannot be combined with {', '.join(search_flags)}"
            )

    setup_logging(args.log_level)

    searcher = searcher or SearchFlights()

    if args.list_airports:
        for airport in searcher.list_airports():
            print(f"{airport.code}  {airport.name}")
        return EXIT_OK

    try:
        flights = searcher.search(
            origin=args.origin,
            destination=args.destination,
            date=args.date,
        )
    except MissingParameterError:
        print(messages.FILL_ALL_FIELDS, file=sys.stderr)
        return EXIT_MISSING_FIELDS
    except InternalSearchError as exc:
        logger.error("Search failed: %s", exc)
        print(exc.user_message, file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    if args.json:
        print(flights_to_json(flights))
    elif not flights:
        print(messages.NO_FLIGHTS_FOUND)
    else:
        for flight in flights:
            print(format_flight(flight, searcher))
    return EXIT_OK
