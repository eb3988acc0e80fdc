"""
Schema definitions for Flight Search.

Frozen dataclasses for records handed to callers and Pandera-validated
DataFrames as the catalog's internal data contract.
"""

from .flight import (
    Airport,
    AirportDataFrame,
    AirportSchema,
    Flight,
    FlightDataFrame,
    FlightSchema,
)
from .query import QUERY_FIELDS, SearchQuery

__all__ = [
    # Records
    "Airport",
    "Flight",
    # DataFrame schemas
    "AirportSchema",
    "FlightSchema",
    "AirportDataFrame",
    "FlightDataFrame",
    # Query
    "QUERY_FIELDS",
    "SearchQuery",
]
