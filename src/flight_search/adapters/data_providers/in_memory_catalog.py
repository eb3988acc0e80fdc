"""
In-memory Flight Catalog - static literals to records and DataFrame.

Builds the catalog once from dict literals, validates it against the
Pandera schemas, and never changes it for the life of the process.
"""

import logging
from dataclasses import asdict
from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd

from src.flight_search.adapters.data_providers.mock_data import (
    MOCK_AIRPORTS,
    MOCK_FLIGHTS,
)
from src.flight_search.ports.flight_catalog import FlightCatalog
from src.flight_search.schemas.flight import (
    Airport,
    AirportSchema,
    Flight,
    FlightDataFrame,
    FlightSchema,
)

logger = logging.getLogger(__name__)

FLIGHT_COLUMNS: Tuple[str, ...] = (
    "id",
    "departure_airport",
    "arrival_airport",
    "departure_time",
    "arrival_time",
    "price",
    "airline",
    "flight_number",
)


class InMemoryFlightCatalog(FlightCatalog):
    """
    Catalog backed by records held in process memory.

    Both collections are fixed at construction. Airports and flights are
    kept as tuples of frozen dataclasses; flights are also kept as a
    read-only DataFrame for vectorized filtering.

    Attributes:
        _airports: Airport records in declaration order.
        _flights: Flight records in declaration order.
        _flights_df: Private DataFrame, row i == _flights[i]. Never handed out.
    """

    def __init__(
        self,
        airports: Iterable[Airport],
        flights: Iterable[Flight],
        name: str = "In-memory catalog",
    ) -> None:
        """
        Initialize the catalog.

        Args:
            airports: Airport records.
            flights: Flight records.
            name: Label used in logs and the health endpoint.

        Raises:
            pandera.errors.SchemaError: If the records fail schema validation.
        """
        self._name = name
        self._airports: Tuple[Airport, ...] = tuple(airports)
        self._flights: Tuple[Flight, ...] = tuple(flights)

        AirportSchema.validate(
            pd.DataFrame([asdict(a) for a in self._airports], columns=["code", "name"])
        )
        self._flights_df = FlightSchema.validate(
            pd.DataFrame(
                [asdict(f) for f in self._flights],
                columns=list(FLIGHT_COLUMNS),
            )
        )

        logger.info(
            "%s loaded: %d airports, %d flights",
            self._name,
            len(self._airports),
            len(self._flights),
        )

    @classmethod
    def from_records(
        cls,
        airports: Iterable[Mapping[str, Any]],
        flights: Iterable[Mapping[str, Any]],
        name: str = "In-memory catalog",
    ) -> "InMemoryFlightCatalog":
        """
        Build a catalog from plain dict literals.

        Args:
            airports: Dicts with 'code' and 'name'.
            flights: Dicts with flight fields (camelCase or snake_case keys).
            name: Catalog label.

        Returns:
            New InMemoryFlightCatalog.
        """
        return cls(
            airports=[Airport.from_record(r) for r in airports],
            flights=[Flight.from_record(r) for r in flights],
            name=name,
        )

    def list_airports(self) -> Tuple[Airport, ...]:
        return self._airports

    def list_flights(self) -> Tuple[Flight, ...]:
        return self._flights

    def get_flights_df(self) -> FlightDataFrame:
        """
        Return a copy of the flights DataFrame.

        Callers may modify the copy freely; the catalog keeps its own frame
        aligned with list_flights().
        """
        return self._flights_df.copy(deep=True)

    @property
    def name(self) -> str:
        return self._name


def default_catalog(name: Optional[str] = None) -> InMemoryFlightCatalog:
    """Catalog over the shipped mock dataset."""
    return InMemoryFlightCatalog.from_records(
        MOCK_AIRPORTS,
        MOCK_FLIGHTS,
        name=name or "In-memory mock catalog",
    )
