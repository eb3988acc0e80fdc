import asyncio
import json
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sse_starlette.sse import EventSourceResponse

from src.flight_search.config import Config
from src.flight_search.logging_config import setup_logging

setup_logging(Config.LOG_LEVEL)

from src.flight_search.application import SearchFlights
from src.flight_search.exceptions import (
    FlightSearchError,
    InternalSearchError,
    MissingParameterError,
)
from src.flight_search.schemas.flight import Flight
from src.flight_search.schemas.query import SearchQuery

logger = logging.getLogger(__name__)

searcher = SearchFlights()

app = FastAPI(title="Flight Search API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---
# Field names are camelCase on the wire.


class FlightOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,  # Allows reading from dataclasses
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    departure_airport: str
    arrival_airport: str
    departure_time: str
    arrival_time: str
    price: float
    airline: str
    flight_number: str


class FlightsResponse(BaseModel):
    flights: List[FlightOut]


class AirportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str


class AirportsResponse(BaseModel):
    airports: List[AirportOut]


class ErrorResponse(BaseModel):
    error: str


def flights_payload(flights: List[Flight]) -> Dict[str, Any]:
    """Serialize flights to the wire body ({"flights": [...]}, camelCase)."""
    response = FlightsResponse(
        flights=[FlightOut.model_validate(f) for f in flights]
    )
    return response.model_dump(by_alias=True)


def run_search(
    origin: Optional[str],
    destination: Optional[str],
    date: Optional[str],
) -> List[Flight]:
    """Call the searcher, turning unexpected failures into InternalSearchError."""
    try:
        return searcher.search(origin=origin, destination=destination, date=date)
    except FlightSearchError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error during flight search")
        raise InternalSearchError() from exc


# --- Error translation ---


@app.exception_handler(MissingParameterError)
async def missing_parameter_handler(request: Request, exc: MissingParameterError):
    return JSONResponse(status_code=400, content={"error": exc.user_message})


@app.exception_handler(FlightSearchError)
async def flight_search_error_handler(request: Request, exc: FlightSearchError):
    return JSONResponse(status_code=500, content={"error": exc.user_message})


# --- API Endpoints ---


@app.get(
    f"{Config.API_PREFIX}/flights",
    response_model=FlightsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_flights(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    date: Optional[str] = None,
):
    flights = run_search(origin, destination, date)
    return flights_payload(flights)


@app.get(f"{Config.API_PREFIX}/airports", response_model=AirportsResponse)
async def get_airports():
    """List airports in declaration order (feeds the origin/destination pickers)."""
    airports = searcher.list_airports()
    return AirportsResponse(
        airports=[AirportOut.model_validate(a) for a in airports]
    )


@app.get(f"{Config.API_PREFIX}/flights/stream")
async def get_flights_stream(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    date: Optional[str] = None,
):
    """
    SSE streaming variant of /flights.

    Emits:
    - stage: "validating" before the parameter check
    - stage: "searching" once the query is complete
    - complete: same JSON body as /flights
    - error: same JSON error body as /flights (instead of complete)
    """
    return EventSourceResponse(search_events(origin, destination, date))


async def search_events(
    origin: Optional[str],
    destination: Optional[str],
    date: Optional[str],
) -> AsyncIterator[Dict[str, str]]:
    """Generator that yields SSE events for one search."""
    # Stage 1: Validating
    yield {"event": "stage", "data": "validating"}

    query = SearchQuery(origin=origin, destination=destination, date=date)
    if query.missing_fields:
        exc = MissingParameterError(query.missing_fields)
        yield {"event": "error", "data": json.dumps({"error": exc.user_message})}
        return

    # Stage 2: Searching
    yield {"event": "stage", "data": "searching"}

    # Search is synchronous, run it off the event loop
    loop = asyncio.get_running_loop()
    try:
        flights = await loop.run_in_executor(
            None, lambda: run_search(origin, destination, date)
        )
    except FlightSearchError as exc:
        yield {"event": "error", "data": json.dumps({"error": exc.user_message})}
        return

    yield {"event": "complete", "data": json.dumps(flights_payload(flights))}


@app.get("/health")
async def health():
    catalog = searcher.catalog
    return {
        "status": "ok",
        "catalog": catalog.name,
        "flights": len(catalog.list_flights()),
        "airports": len(catalog.list_airports()),
    }
