"""
SearchFlights Use Case - Public API for flight search.

Facade that wires the default catalog and the search service, while
letting callers inject their own catalog (e.g. test fixtures).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from src.flight_search.adapters.data_providers.in_memory_catalog import (
    default_catalog,
)
from src.flight_search.ports.flight_catalog import FlightCatalog
from src.flight_search.schemas.flight import Airport, Flight
from src.flight_search.services.flight_search_service import FlightSearchService

logger = logging.getLogger(__name__)


class SearchFlights:
    """
    Public API for searching the flight catalog.

    Example usage:
        >>> searcher = SearchFlights()
        >>> flights = searcher.search(origin="GRU", destination="GIG", date="2023-10-12")
        >>> for flight in flights:
        ...     print(flight.airline, flight.flight_number, flight.price)

    Attributes:
        _catalog: Flight catalog (injected or the shipped mock dataset).
        _service: Underlying FlightSearchService.
    """

    def __init__(self, catalog: Optional[FlightCatalog] = None) -> None:
        """
        Initialize with an optional custom catalog.

        Args:
            catalog: Catalog to search. If None, uses the shipped mock dataset.
        """
        self._catalog = catalog if catalog is not None else default_catalog()
        self._service = FlightSearchService(self._catalog)

        logger.info("SearchFlights initialized with %s", self._catalog.name)

    @property
    def catalog(self) -> FlightCatalog:
        return self._catalog

    @property
    def service(self) -> FlightSearchService:
        return self._service

    def search(
        self,
        origin: Optional[str],
        destination: Optional[str],
        date: Optional[str],
    ) -> List[Flight]:
        """
        Search for flights.

        Raises:
            MissingParameterError: If any argument is absent or empty.
            InternalSearchError: If filtering fails unexpectedly.
        """
        return self._service.search(origin=origin, destination=destination, date=date)

    def list_airports(self) -> Tuple[Airport, ...]:
        return self._catalog.list_airports()

    def list_flights(self) -> Tuple[Flight, ...]:
        return self._catalog.list_flights()
