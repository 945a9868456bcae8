# itinerary_planner/main.py
import logging
import random
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .budget import ACCOMMODATION_MULTIPLIERS
from .models import ItineraryDocument, Option, PlannerOptions, TripRequest
from .places import PlaceLookup, default_lookup
from .planner import plan_trip

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
logger = logging.getLogger(__name__)

ITINERARY_PATH = "/api/generate-itinerary"

INTEREST_OPTIONS = [
    "Culture & History", "Food & Dining", "Nature & Outdoors",
    "Shopping", "Adventure Sports", "Art & Museums", "Nightlife",
    "Relaxation", "Photography", "Local Experiences",
]

ACCOMMODATION_LABELS = {
    "budget": "Budget Hostels",
    "hotel": "Mid-range Hotels",
    "luxury": "Luxury Hotels",
    "apartment": "Vacation Rentals",
    "camping": "Camping",
}

TRANSPORTATION_OPTIONS = [
    Option(value="public", label="Public Transport"),
    Option(value="walking", label="Walking"),
    Option(value="bike", label="Bicycle"),
    Option(value="taxi", label="Taxis"),
    Option(value="rental", label="Car Rental"),
]


class PreflightCORSMiddleware(CORSMiddleware):
    """Answers accepted preflight requests with an empty body."""

    def preflight_response(self, request_headers):
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {k: v for k, v in response.headers.items() if k not in ("content-length", "content-type")}
        return Response(status_code=200, headers=headers)


app = FastAPI(title="Smart Itinerary Planner API")

app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

_lookup = default_lookup()


def get_place_lookup() -> Optional[PlaceLookup]:
    return _lookup


def get_rng() -> random.Random:
    return random.Random()


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        # Unparseable bodies are reported as internal errors
        logger.error("Could not parse itinerary request body: %s", errors)
        return JSONResponse(status_code=500, content={"error": "Failed to generate itinerary"})
    logger.info("Rejected itinerary request: %s", errors)
    return JSONResponse(status_code=400, content={"error": "Invalid input parameters"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.get("/")
def root():
    return {"message": "Welcome to Smart Itinerary Planner!"}


@app.get("/api/options", response_model=PlannerOptions)
def planner_options():
    """Choices offered by the planning form."""
    return PlannerOptions(
        interests=INTEREST_OPTIONS,
        accommodation=[Option(value=tier, label=ACCOMMODATION_LABELS[tier]) for tier in ACCOMMODATION_MULTIPLIERS],
        transportation=TRANSPORTATION_OPTIONS,
    )


@app.options(ITINERARY_PATH)
def itinerary_preflight():
    return Response(status_code=200)


@app.post(ITINERARY_PATH, response_model=ItineraryDocument)
async def generate_itinerary(
    trip: TripRequest,
    lookup: Optional[PlaceLookup] = Depends(get_place_lookup),
    rng: random.Random = Depends(get_rng),
):
    logger.info("Planning %d-day trip to %s for %d traveler(s)", trip.days, trip.city, trip.travelers)
    try:
        return await plan_trip(trip, lookup, rng)
    except Exception:
        logger.exception("Error generating itinerary for %s", trip.city)
        return JSONResponse(status_code=500, content={"error": "Failed to generate itinerary"})


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
