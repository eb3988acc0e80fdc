"""
Fixtures for FastAPI endpoint tests.
"""

import pytest
from unittest.mock import MagicMock

from src.flight_search.application import SearchFlights
from src.flight_search.ports.flight_catalog import FlightCatalog


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def default_searcher() -> SearchFlights:
    """Facade over the shipped two-flight dataset."""
    return SearchFlights()


@pytest.fixture
def failing_searcher() -> MagicMock:
    """Searcher whose search() blows up with a non-domain error."""
    searcher = MagicMock(spec=SearchFlights)
    searcher.search.side_effect = RuntimeError("boom")
    searcher.catalog = MagicMock(spec=FlightCatalog)
    return searcher
