"""
Port interfaces for Flight Search.

Ports define the abstract interfaces the service layer depends on, so
catalogs can be swapped (e.g. fixture datasets in tests).
"""

from src.flight_search.ports.flight_catalog import FlightCatalog

__all__ = ["FlightCatalog"]
