# itinerary_planner/places.py
import asyncio
import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Protocol, Tuple

import openrouteservice
import requests

from . import config
from .models import CityPlaces, Place

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"

ATTRACTION_CATEGORY = "tourist_attraction"
RESTAURANT_CATEGORY = "restaurant"
MAX_ATTRACTIONS = 6
MAX_RESTAURANTS = 4

# Latitude and longitude for cities that skip the geocoding round trip
CITY_COORDS = MappingProxyType({
    "paris": (48.8566, 2.3522),
    "tokyo": (35.6895, 139.6917),
    "london": (51.5074, -0.1278),
    "rome": (41.9028, 12.4964),
    "new york": (40.7128, -74.0060),
    "delhi": (28.6139, 77.2090),
    "mumbai": (19.0760, 72.8777),
    "agra": (27.1767, 78.0081),
})


class GeocodingError(LookupError):
    pass


class PlaceLookup(Protocol):
    def geocode(self, city: str) -> Tuple[float, float]:
        ...

    def search(self, lat: float, lon: float, category: str, max_results: int) -> List[Place]:
        ...


def to_place(result: dict, category: str) -> Place:
    """Convert a Places API result into a Place."""
    types = result.get("types") or []
    return Place(
        name=result["name"],
        location=result.get("vicinity") or "City Center",
        rating=result.get("rating"),
        categories=[category] + [t for t in types if t != category],
    )


def rank_places(places: List[Place], max_results: int, min_rating: float) -> List[Place]:
    """Drop low-rated and duplicate places, best rated first."""
    unique: Dict[str, Place] = {}
    for p in places:
        if p.rating is None or p.rating < min_rating:
            continue
        key = p.name.lower()
        if key not in unique:
            unique[key] = p
    ranked = sorted(unique.values(), key=lambda p: p.rating, reverse=True)
    return ranked[:max_results]


class GooglePlacesLookup:
    """Nearby search against the Google Places API.

    Cities missing from CITY_COORDS are geocoded through openrouteservice when
    an ORS key is configured, otherwise through Google Geocoding.
    """

    def __init__(
        self,
        api_key: str,
        ors_key: str = "",
        radius: int = config.SEARCH_RADIUS_METERS,
        min_rating: float = config.MIN_PLACE_RATING,
        timeout: float = config.PLACES_TIMEOUT,
        geocode_timeout: float = config.GEOCODE_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.radius = radius
        self.min_rating = min_rating
        self.timeout = timeout
        self.geocode_timeout = geocode_timeout
        self.session = session or requests.Session()
        self.ors_client = openrouteservice.Client(key=ors_key, timeout=geocode_timeout) if ors_key else None

    def geocode(self, city: str) -> Tuple[float, float]:
        key = city.strip().lower()
        if key in CITY_COORDS:
            return CITY_COORDS[key]
        if self.ors_client is not None:
            return self._geocode_ors(city)
        return self._geocode_google(city)

    def _geocode_ors(self, city: str) -> Tuple[float, float]:
        result = self.ors_client.pelias_search(text=city, size=1)
        features = result.get("features") or []
        if not features:
            raise GeocodingError(f"No coordinates found for {city}")
        lon, lat = features[0]["geometry"]["coordinates"][:2]
        return lat, lon

    def _geocode_google(self, city: str) -> Tuple[float, float]:
        res = self.session.get(GEOCODE_URL, params={"address": city, "key": self.api_key}, timeout=self.geocode_timeout)
        res.raise_for_status()
        results = res.json().get("results") or []
        if not results:
            raise GeocodingError(f"No coordinates found for {city}")
        location = results[0]["geometry"]["location"]
        return location["lat"], location["lng"]

    def nearby(self, lat: float, lon: float, category: str) -> List[Place]:
        params = {
            "location": f"{lat},{lon}",
            "radius": self.radius,
            "type": category,
            "key": self.api_key,
        }
        res = self.session.get(NEARBY_SEARCH_URL, params=params, timeout=self.timeout)
        res.raise_for_status()
        data = res.json()
        status = data.get("status")
        if status == "ZERO_RESULTS":
            logger.info("No %s places found near %s,%s", category, lat, lon)
            return []
        if status != "OK":
            raise ValueError(f"Places API error for {category}: {status} {data.get('error_message', '')}".strip())
        return [to_place(r, category) for r in data.get("results", []) if r.get("name")]

    def search(self, lat: float, lon: float, category: str, max_results: int) -> List[Place]:
        return rank_places(self.nearby(lat, lon, category), max_results, self.min_rating)

    def lookup(self, city: str, category: str, max_results: int) -> List[Place]:
        lat, lon = self.geocode(city)
        return self.search(lat, lon, category, max_results)


async def _geocode(lookup: PlaceLookup, city: str, timeout: float) -> Optional[Tuple[float, float]]:
    try:
        return await asyncio.wait_for(asyncio.to_thread(lookup.geocode, city), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Geocoding %s timed out after %ss", city, timeout)
    except Exception as e:
        logger.warning("Geocoding %s failed: %s", city, e)
    return None


async def _search_branch(
    lookup: PlaceLookup, coords: Tuple[float, float], category: str, max_results: int, timeout: float
) -> List[Place]:
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(lookup.search, coords[0], coords[1], category, max_results),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.warning("Place search for %s timed out after %ss", category, timeout)
    except Exception as e:
        logger.warning("Place search for %s failed: %s", category, e)
    return []


async def fetch_city_places(
    lookup: Optional[PlaceLookup],
    city: str,
    timeout: float = config.PLACES_TIMEOUT,
    geocode_timeout: float = config.GEOCODE_TIMEOUT,
) -> CityPlaces:
    """Geocode the city once, then search attractions and restaurants concurrently.

    A failed or timed-out step comes back empty so the planner falls back
    to placeholder places for it.
    """
    if lookup is None:
        return CityPlaces()
    coords = await _geocode(lookup, city, geocode_timeout)
    if coords is None:
        return CityPlaces()
    attractions, restaurants = await asyncio.gather(
        _search_branch(lookup, coords, ATTRACTION_CATEGORY, MAX_ATTRACTIONS, timeout),
        _search_branch(lookup, coords, RESTAURANT_CATEGORY, MAX_RESTAURANTS, timeout),
    )
    logger.info("Found %d attractions and %d restaurants for %s", len(attractions), len(restaurants), city)
    return CityPlaces(attractions=attractions, restaurants=restaurants)


def default_lookup() -> Optional[GooglePlacesLookup]:
    if not config.GOOGLE_PLACES_API_KEY:
        return None
    return GooglePlacesLookup(config.GOOGLE_PLACES_API_KEY, ors_key=config.ORS_API_KEY)
