"""
Shipped mock dataset.

Static literals loaded once into the default catalog. Keys use the wire
(camelCase) names so the records read the same as the API output.
"""

from typing import Any, Dict, List

MOCK_AIRPORTS: List[Dict[str, Any]] = [
    {"code": "GRU", "name": "São Paulo - Guarulhos"},
    {"code": "CGH", "name": "São Paulo - Congonhas"},
    {"code": "GIG", "name": "Rio de Janeiro - Galeão"},
    {"code": "SDU", "name": "Rio de Janeiro - Santos Dumont"},
    {"code": "BSB", "name": "Brasília"},
    {"code": "SSA", "name": "Salvador"},
    {"code": "CNF", "name": "Belo Horizonte - Confins"},
    {"code": "REC", "name": "Recife"},
    {"code": "POA", "name": "Porto Alegre"},
]

MOCK_FLIGHTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "departureAirport": "GRU",
        "arrivalAirport": "GIG",
        "departureTime": "2023-10-12T08:00:00",
        "arrivalTime": "2023-10-12T09:05:00",
        "price": 350.00,
        "airline": "LATAM",
        "flightNumber": "LA123",
    },
    {
        "id": "2",
        "departureAirport": "BSB",
        "arrivalAirport": "SSA",
        "departureTime": "2023-10-13T14:30:00",
        "arrivalTime": "2023-10-13T16:40:00",
        "price": 280.00,
        "airline": "GOL",
        "flightNumber": "G31234",
    },
]
