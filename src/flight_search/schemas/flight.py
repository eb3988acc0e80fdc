"""
Flight catalog schemas.

Frozen dataclasses are the records handed to callers; Pandera models are
the DataFrame contract checked once at the catalog boundary.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

import pandera as pa
from pandera.typing import DataFrame, Series

# Wire (camelCase) name -> attribute name, for records written as literals
_FLIGHT_KEY_ALIASES: Dict[str, str] = {
    "departureAirport": "departure_airport",
    "arrivalAirport": "arrival_airport",
    "departureTime": "departure_time",
    "arrivalTime": "arrival_time",
    "flightNumber": "flight_number",
}


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport reference record.

    Attributes:
        code: Short uppercase identifier (e.g., 'GRU'), unique in a catalog.
        name: Display name.
    """

    code: str
    name: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Airport":
        return cls(code=str(record["code"]), name=str(record["name"]))


@dataclass(frozen=True)
class Flight:
    """
    Immutable representation of one scheduled flight offering.

    Airport codes are expected to reference catalog airports but this is
    not checked. Times are ISO-8601 text and are compared textually.
    """

    id: str
    departure_airport: str
    arrival_airport: str
    departure_time: str
    arrival_time: str
    price: float
    airline: str
    flight_number: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Flight":
        """
        Build a Flight from a dict literal.

        Accepts both snake_case attribute names and the camelCase wire names
        (e.g. 'departureAirport').
        """
        data = {_FLIGHT_KEY_ALIASES.get(key, key): value for key, value in record.items()}
        return cls(
            id=str(data["id"]),
            departure_airport=str(data["departure_airport"]),
            arrival_airport=str(data["arrival_airport"]),
            departure_time=str(data["departure_time"]),
            arrival_time=str(data["arrival_time"]),
            price=float(data["price"]),
            airline=str(data["airline"]),
            flight_number=str(data["flight_number"]),
        )


class AirportSchema(pa.DataFrameModel):
    """Airport reference table, one row per airport in declaration order."""

    code: Series[str] = pa.Field(
        nullable=False,
        unique=True,
        description="Airport code (e.g., 'GRU', 'GIG')",
    )
    name: Series[str] = pa.Field(
        nullable=False,
        description="Airport display name",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class FlightSchema(pa.DataFrameModel):
    """
    Flight table contract.

    Only column presence, types and non-negative prices are checked.
    Uniqueness of 'id' and airport cross-references are not enforced.
    """

    id: Series[str] = pa.Field(
        nullable=False,
        description="Opaque flight identifier",
    )
    departure_airport: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport code",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport code",
    )
    departure_time: Series[str] = pa.Field(
        nullable=False,
        description="Departure time as ISO-8601 text",
    )
    arrival_time: Series[str] = pa.Field(
        nullable=False,
        description="Arrival time as ISO-8601 text",
    )
    price: Series[float] = pa.Field(
        ge=0,
        description="Ticket price in the configured currency",
    )
    airline: Series[str] = pa.Field(
        nullable=False,
        description="Airline display name",
    )
    flight_number: Series[str] = pa.Field(
        nullable=False,
        description="Carrier-specific flight number",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightSchema"
        description = "Static flight catalog rows"


# Type aliases for clarity in function signatures
AirportDataFrame = DataFrame[AirportSchema]
FlightDataFrame = DataFrame[FlightSchema]
