"""
Flight Search Service - validation and filtering over a Flight Catalog.

Answers "which flights match this origin/destination/date" against the
catalog injected at construction time.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional

from src.flight_search.exceptions import InternalSearchError, MissingParameterError
from src.flight_search.schemas.flight import Flight
from src.flight_search.schemas.query import SearchQuery

if TYPE_CHECKING:
    import pandas as pd

    from src.flight_search.ports.flight_catalog import FlightCatalog

logger = logging.getLogger(__name__)


def build_match_mask(flights_df: pd.DataFrame, query: SearchQuery) -> pd.Series:
    """
    Boolean mask of rows matching a complete query.

    Airport codes are compared for exact equality. The date is a textual
    prefix match on the ISO-8601 departure time, so '2023-10' matches every
    departure in October 2023 and '12/10/2023' matches nothing.

    Args:
        flights_df: Catalog DataFrame (FlightSchema).
        query: Complete SearchQuery.

    Returns:
        Boolean Series aligned with flights_df.
    """
    return (
        (flights_df["departure_airport"] == query.origin)
        & (flights_df["arrival_airport"] == query.destination)
        & flights_df["departure_time"].str.startswith(query.date)
    )


class FlightSearchService:
    """
    Domain service for flight searches.

    Each call:
    1. Rejects incomplete queries with MissingParameterError
    2. Filters the catalog DataFrame with a vectorized mask
    3. Returns the matching Flight records in catalog order

    This service is stateless and thread-safe; the catalog is read-only.

    Attributes:
        _catalog: Catalog providing the flight records.
    """

    def __init__(self, catalog: FlightCatalog) -> None:
        """
        Initialize the search service.

        Args:
            catalog: Read-only flight catalog.
        """
        self._catalog = catalog

    @property
    def catalog(self) -> FlightCatalog:
        return self._catalog

    def search(
        self,
        origin: Optional[str],
        destination: Optional[str],
        date: Optional[str],
    ) -> List[Flight]:
        """
        Find flights for an origin, destination and date prefix.

        Args:
            origin: Departure airport code.
            destination: Arrival airport code.
            date: ISO-8601 date (or any prefix of a departure timestamp).

        Returns:
            Matching flights in catalog order. Empty if nothing matches.

        Raises:
            MissingParameterError: If any argument is absent or empty.
            InternalSearchError: If filtering fails unexpectedly.
        """
        return self.search_query(
            SearchQuery(origin=origin, destination=destination, date=date)
        )

    def search_query(self, query: SearchQuery) -> List[Flight]:
        """
        Find flights matching a SearchQuery.

        See search() for semantics.
        """
        missing = query.missing_fields
        if missing:
            logger.info("Rejected search, missing parameters: %s", ", ".join(missing))
            raise MissingParameterError(missing)

        start_time = time.perf_counter()
        try:
            flights = self._catalog.list_flights()
            flights_df = self._catalog.get_flights_df()
            if flights_df.empty:
                matches: List[Flight] = []
            else:
                positions = build_match_mask(flights_df, query).to_numpy().nonzero()[0]
                matches = [flights[i] for i in positions]
        except Exception as exc:
            logger.exception(
                "Flight search failed: origin=%s, destination=%s, date=%s",
                query.origin,
                query.destination,
                query.date,
            )
            raise InternalSearchError(f"Flight search failed: {exc}") from exc

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "Search %s -> %s on %s: %d match(es) in %.2fms",
            query.origin,
            query.destination,
            query.date,
            len(matches),
            elapsed_ms,
        )
        return matches
