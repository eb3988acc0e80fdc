"""
Search query contract.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

QUERY_FIELDS: Tuple[str, ...] = ("origin", "destination", "date")


@dataclass(frozen=True)
class SearchQuery:
    """
    The three-field search request.

    Fields stay Optional so an incomplete query can still be represented
    and reported; FlightSearchService rejects it before filtering.

    Attributes:
        origin: Departure airport code (exact, case-sensitive match).
        destination: Arrival airport code (exact, case-sensitive match).
        date: Prefix of the ISO-8601 departure time (e.g. '2023-10-12').
    """

    origin: Optional[str] = None
    destination: Optional[str] = None
    date: Optional[str] = None

    @property
    def missing_fields(self) -> Tuple[str, ...]:
        """Names of fields that are None or the empty string."""
        return tuple(
            name
            for name in QUERY_FIELDS
            if getattr(self, name) is None or getattr(self, name) == ""
        )

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields
