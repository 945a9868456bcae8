# itinerary_planner/planner.py
import logging
import random
from typing import List, Optional

from . import config
from .budget import estimated_day_cost, per_day_allocation, total_budget
from .models import CityPlaces, DayPlan, ItineraryDocument, TripRequest
from .places import PlaceLookup, fetch_city_places
from .schedule import generate_day_schedule
from .tips import generate_contacts, generate_tips

logger = logging.getLogger(__name__)

DEFAULT_INTERESTS = ["Local Experiences"]


def accommodation_note(day: int, days: int, accommodation: str, city: str) -> str:
    if days == 1:
        return f"Check-in and final night at your {accommodation} in {city}"
    if day == 1:
        return f"Check-in at your {accommodation} in {city}"
    if day == days:
        return f"Final night at your {accommodation} in {city}"
    return f"Continue your stay at {accommodation} in {city}"


def format_amount(amount: float) -> str:
    if amount == int(amount):
        return f"{config.CURRENCY_SYMBOL}{amount:,.0f}"
    return f"{config.CURRENCY_SYMBOL}{amount:,.2f}"


def trip_summary(request: TripRequest, interests: List[str]) -> str:
    travelers = f"{request.travelers} traveler{'s' if request.travelers > 1 else ''}"
    return (
        f"Experience the magic of {request.city} with this carefully crafted {request.days}-day itinerary "
        f"for {travelers}! Discover {', '.join(interests)} while enjoying {request.accommodation} "
        f"accommodations and {request.transportation} transportation. Your adventure is planned to fit "
        f"within your {format_amount(request.budget)} budget."
    )


def generate_itinerary(
    request: TripRequest,
    places: Optional[CityPlaces] = None,
    rng: Optional[random.Random] = None,
) -> ItineraryDocument:
    """Assemble the full itinerary for a validated trip request.

    Empty `places` (or None) means every day is planned from placeholders.
    `rng` drives duration labels and cost variance; pass a seeded instance
    for reproducible output.
    """
    places = places or CityPlaces()
    rng = rng or random.Random()
    interests = request.interests or DEFAULT_INTERESTS
    daily_allocation = per_day_allocation(request.budget, request.days, request.accommodation)

    days = []
    for day in range(1, request.days + 1):
        schedule = generate_day_schedule(
            day, request.city, interests, places.attractions, places.restaurants, rng
        )
        days.append(DayPlan(
            day=day,
            activities=schedule.activities,
            meals=schedule.meals,
            accommodation=accommodation_note(day, request.days, request.accommodation, request.city),
            estimatedCost=estimated_day_cost(daily_allocation, rng),
        ))

    return ItineraryDocument(
        city=request.city,
        summary=trip_summary(request, interests),
        totalBudget=total_budget(request.budget, request.days, request.accommodation),
        days=days,
        tips=generate_tips(request.city, request.interests),
        emergencyContacts=generate_contacts(request.city),
    )


async def plan_trip(
    request: TripRequest,
    lookup: Optional[PlaceLookup] = None,
    rng: Optional[random.Random] = None,
    timeout: float = config.PLACES_TIMEOUT,
) -> ItineraryDocument:
    places = await fetch_city_places(lookup, request.city, timeout)
    if not places.attractions:
        logger.info("Using placeholder attractions for %s", request.city)
    return generate_itinerary(request, places, rng)
