"""
Flight Catalog port interface.

Defines the read-only contract for data sources that hold the airport and
flight records the search service filters over.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from src.flight_search.schemas.flight import Airport, Flight, FlightDataFrame


class FlightCatalog(ABC):
    """
    Abstract interface for flight catalogs.

    A catalog is populated once at construction and never mutated. Records
    are returned as tuples of frozen dataclasses in declaration order.

    Implementations:
    - InMemoryFlightCatalog: static literal dataset held in process memory
    """

    @abstractmethod
    def list_airports(self) -> Tuple[Airport, ...]:
        """
        Return all airports in declaration order.

        Returns:
            Tuple of Airport records.
        """
        ...

    @abstractmethod
    def list_flights(self) -> Tuple[Flight, ...]:
        """
        Return all flights in declaration order.

        Returns:
            Tuple of Flight records. May be empty.
        """
        ...

    @abstractmethod
    def get_flights_df(self) -> FlightDataFrame:
        """
        Return the flights as a DataFrame the caller owns.

        Row i of the DataFrame describes list_flights()[i]. Changes made to
        the returned frame must not reach the catalog.

        Returns:
            DataFrame validated against FlightSchema.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this catalog.

        Returns:
            Catalog identifier (e.g., "In-memory mock catalog").
        """
        ...

    def get_airport(self, code: str) -> Optional[Airport]:
        """
        Look up an airport by exact code.

        Args:
            code: Airport code (case-sensitive).

        Returns:
            The matching Airport, or None.
        """
        for airport in self.list_airports():
            if airport.code == code:
                return airport
        return None
