"""
Application layer for Flight Search.

Provides the public entry point used by the HTTP API and the CLI.
"""

from src.flight_search.application.search_flights import SearchFlights

__all__ = ["SearchFlights"]
