"""
Tests for catalog adapters.

Tests cover:
- InMemoryFlightCatalog construction from literals
- Declaration order and shipped dataset contents
- Catalog contents cannot be changed through its API
- Schema validation at the catalog boundary
"""

import dataclasses

import pandera as pa
import pytest

from src.flight_search.adapters.data_providers.in_memory_catalog import (
    FLIGHT_COLUMNS,
    InMemoryFlightCatalog,
    default_catalog,
)
from src.flight_search.adapters.data_providers.mock_data import (
    MOCK_AIRPORTS,
    MOCK_FLIGHTS,
)
from src.flight_search.ports.flight_catalog import FlightCatalog
from src.flight_search.schemas.flight import Airport, Flight


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def airport_records() -> list[dict]:
    return [
        {"code": "POA", "name": "Porto Alegre"},
        {"code": "REC", "name": "Recife"},
        {"code": "CNF", "name": "Belo Horizonte - Confins"},
    ]


@pytest.fixture
def flight_records() -> list[dict]:
    return [
        {
            "id": "x2",
            "departureAirport": "REC",
            "arrivalAirport": "POA",
            "departureTime": "2024-03-01T10:00:00",
            "arrivalTime": "2024-03-01T14:00:00",
            "price": 610.5,
            "airline": "Azul",
            "flightNumber": "AD4410",
        },
        {
            "id": "x1",
            "departureAirport": "POA",
            "arrivalAirport": "CNF",
            "departureTime": "2024-03-02T06:15:00",
            "arrivalTime": "2024-03-02T08:05:00",
            "price": 0.0,
            "airline": "GOL",
            "flightNumber": "G31001",
        },
    ]


@pytest.fixture
def catalog(airport_records, flight_records) -> InMemoryFlightCatalog:
    return InMemoryFlightCatalog.from_records(
        airport_records, flight_records, name="Fixture catalog"
    )


# =============================================================================
# IN-MEMORY CATALOG TESTS
# =============================================================================


class TestInMemoryFlightCatalog:
    """Tests for InMemoryFlightCatalog."""

    def test_implements_port(self, catalog):
        assert isinstance(catalog, FlightCatalog)

    def test_airports_in_declaration_order(self, catalog):
        """list_airports preserves literal order, not alphabetical."""
        codes = [a.code for a in catalog.list_airports()]
        assert codes == ["POA", "REC", "CNF"]

    def test_flights_in_declaration_order(self, catalog):
        ids = [f.id for f in catalog.list_flights()]
        assert ids == ["x2", "x1"]

    def test_records_are_dataclasses(self, catalog):
        assert all(isinstance(a, Airport) for a in catalog.list_airports())
        assert all(isinstance(f, Flight) for f in catalog.list_flights())

    def test_dataframe_rows_align_with_flights(self, catalog):
        """Row i of the DataFrame describes list_flights()[i]."""
        df = catalog.get_flights_df()
        assert list(df["id"]) == [f.id for f in catalog.list_flights()]
        assert list(df.columns[: len(FLIGHT_COLUMNS)]) == list(FLIGHT_COLUMNS)

    def test_zero_price_allowed(self, catalog):
        assert catalog.list_flights()[1].price == 0.0

    def test_name(self, catalog):
        assert catalog.name == "Fixture catalog"

    def test_get_airport(self, catalog):
        assert catalog.get_airport("REC") == Airport(code="REC", name="Recife")

    def test_get_airport_unknown_returns_none(self, catalog):
        assert catalog.get_airport("XXX") is None

    def test_get_airport_is_case_sensitive(self, catalog):
        assert catalog.get_airport("rec") is None

    def test_empty_flight_list(self, airport_records):
        """A catalog may hold no flights."""
        empty = InMemoryFlightCatalog.from_records(airport_records, [])
        assert empty.list_flights() == ()
        assert empty.get_flights_df().empty

    def test_negative_price_rejected(self, airport_records, flight_records):
        flight_records[0]["price"] = -10.0
        with pytest.raises(pa.errors.SchemaError):
            InMemoryFlightCatalog.from_records(airport_records, flight_records)

    def test_duplicate_airport_codes_rejected(self, flight_records):
        airports = [{"code": "GRU", "name": "A"}, {"code": "GRU", "name": "B"}]
        with pytest.raises(pa.errors.SchemaError):
            InMemoryFlightCatalog.from_records(airports, flight_records)

    def test_unknown_airport_codes_accepted(self, airport_records, flight_records):
        """Flights may reference codes missing from the airport list."""
        flight_records[0]["arrivalAirport"] = "ZZZ"
        catalog = InMemoryFlightCatalog.from_records(airport_records, flight_records)
        assert catalog.list_flights()[0].arrival_airport == "ZZZ"


class TestCatalogImmutability:
    """The catalog exposes no way to change its contents."""

    def test_collections_are_tuples(self, catalog):
        assert isinstance(catalog.list_airports(), tuple)
        assert isinstance(catalog.list_flights(), tuple)

    def test_records_are_frozen(self, catalog):
        flight = catalog.list_flights()[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            flight.price = 1.0

    def test_source_literals_do_not_leak(self, airport_records, flight_records):
        """Mutating the input literals after construction changes nothing."""
        catalog = InMemoryFlightCatalog.from_records(airport_records, flight_records)
        flight_records[0]["price"] = 1.0
        flight_records.clear()
        airport_records.clear()

        assert len(catalog.list_flights()) == 2
        assert catalog.list_flights()[0].price == 610.5
        assert len(catalog.list_airports()) == 3

    def test_repeated_calls_return_same_content(self, catalog):
        assert catalog.list_flights() == catalog.list_flights()
        assert catalog.list_airports() == catalog.list_airports()

    def test_dataframe_is_a_fresh_copy(self, catalog):
        assert catalog.get_flights_df() is not catalog.get_flights_df()

    def test_writes_to_returned_dataframe_do_not_reach_catalog(self, catalog):
        """Editing the returned frame leaves later frames and records intact."""
        df = catalog.get_flights_df()
        df.loc[0, "departure_airport"] = "XXX"
        df.loc[1, "price"] = 9999.0

        fresh = catalog.get_flights_df()
        assert list(fresh["departure_airport"]) == [
            f.departure_airport for f in catalog.list_flights()
        ]
        assert list(fresh["price"]) == [f.price for f in catalog.list_flights()]
        assert catalog.list_flights()[0].departure_airport == "REC"


# =============================================================================
# SHIPPED DATASET
# =============================================================================


class TestDefaultCatalog:
    """Tests for the shipped mock dataset."""

    def test_two_flights(self):
        catalog = default_catalog()
        assert [f.id for f in catalog.list_flights()] == ["1", "2"]

    def test_first_flight(self):
        flight = default_catalog().list_flights()[0]
        assert flight == Flight(
            id="1",
            departure_airport="GRU",
            arrival_airport="GIG",
            departure_time="2023-10-12T08:00:00",
            arrival_time="2023-10-12T09:05:00",
            price=350.0,
            airline="LATAM",
            flight_number="LA123",
        )

    def test_second_flight(self):
        flight = default_catalog().list_flights()[1]
        assert flight.departure_airport == "BSB"
        assert flight.arrival_airport == "SSA"
        assert flight.airline == "GOL"
        assert flight.price == 280.0

    def test_airports_never_empty(self):
        catalog = default_catalog()
        assert len(catalog.list_airports()) == len(MOCK_AIRPORTS) > 0

    def test_flight_airports_are_listed(self):
        """The shipped data keeps its airport references consistent."""
        codes = {a["code"] for a in MOCK_AIRPORTS}
        for record in MOCK_FLIGHTS:
            assert record["departureAirport"] in codes
            assert record["arrivalAirport"] in codes

    def test_custom_name(self):
        assert default_catalog(name="demo").name == "demo"
