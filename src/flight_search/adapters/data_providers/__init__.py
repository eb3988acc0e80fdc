"""
Data provider adapters for flight catalogs.
"""

from src.flight_search.adapters.data_providers.in_memory_catalog import (
    InMemoryFlightCatalog,
    default_catalog,
)

__all__ = [
    "InMemoryFlightCatalog",
    "default_catalog",
]
