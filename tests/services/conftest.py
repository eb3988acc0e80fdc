"""Pytest configuration for service tests."""

import pytest

from src.flight_search.adapters.data_providers.in_memory_catalog import (
    InMemoryFlightCatalog,
)

FIXTURE_AIRPORTS = [
    {"code": "GRU", "name": "São Paulo - Guarulhos"},
    {"code": "GIG", "name": "Rio de Janeiro - Galeão"},
    {"code": "SSA", "name": "Salvador"},
]


def _flight(id_, origin, destination, departure, price=100.0):
    return {
        "id": id_,
        "departureAirport": origin,
        "arrivalAirport": destination,
        "departureTime": departure,
        "arrivalTime": departure[:11] + "23:59:00",
        "price": price,
        "airline": "TEST",
        "flightNumber": f"TS{id_}",
    }


@pytest.fixture
def fixture_catalog() -> InMemoryFlightCatalog:
    """
    Catalog with several flights per route, deliberately not sorted.

    - a2, a1, a3: GRU -> GIG on 2024-01-05 (evening first), 2024-01-06
    - b1: GIG -> GRU, same day as a1 (reverse route)
    - c1: lowercase 'gru' origin (case sensitivity)
    - d1: GRU -> SSA in February
    """
    return InMemoryFlightCatalog.from_records(
        FIXTURE_AIRPORTS,
        [
            _flight("a2", "GRU", "GIG", "2024-01-05T18:30:00", price=420.0),
            _flight("b1", "GIG", "GRU", "2024-01-05T10:00:00"),
            _flight("a1", "GRU", "GIG", "2024-01-05T07:00:00", price=199.9),
            _flight("c1", "gru", "GIG", "2024-01-05T09:00:00"),
            _flight("a3", "GRU", "GIG", "2024-01-06T07:00:00"),
            _flight("d1", "GRU", "SSA", "2024-02-10T12:00:00"),
        ],
        name="Service fixture catalog",
    )
