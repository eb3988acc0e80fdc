"""
Custom exceptions for the flight_search package.

Provides a small hierarchy so boundaries (HTTP handlers, CLI) can translate
failures into the short user-facing messages without leaking internals.
"""

from typing import Iterable

from src.flight_search import messages


class FlightSearchError(Exception):
    """Base exception for all flight search errors."""

    user_message: str = messages.INTERNAL_ERROR


class MissingParameterError(FlightSearchError):
    """Raised when origin, destination or date is absent or empty."""

    user_message = messages.MISSING_PARAMETERS

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        fields_str = ", ".join(self.missing)
        message = f"Missing required parameters: {fields_str}"
        super().__init__(message)


class InternalSearchError(FlightSearchError):
    """Raised when the catalog lookup fails for an unexpected reason."""

    user_message = messages.INTERNAL_ERROR

    def __init__(self, message: str = "Flight search failed unexpectedly") -> None:
        super().__init__(message)
