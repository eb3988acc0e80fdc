"""
Domain services for Flight Search.
"""

from src.flight_search.services.flight_search_service import FlightSearchService

__all__ = ["FlightSearchService"]
