import random
import time
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from itinerary_planner.main import app, get_place_lookup, get_rng
from itinerary_planner.models import Place


def make_attractions(n=6) -> List[Place]:
    return [
        Place(name=f"Attraction {i}", location=f"District {i}", rating=4.9 - i * 0.1, categories=["tourist_attraction"])
        for i in range(n)
    ]


def make_restaurants(n=4) -> List[Place]:
    ratings = [4.8, 4.6, 4.5, 4.0]
    return [
        Place(name=f"Restaurant {i}", location=f"Street {i}", rating=ratings[i % 4], categories=["restaurant", "food"])
        for i in range(n)
    ]


class FakeLookup:
    """Serves canned places per category."""

    def __init__(self, places: Dict[str, List[Place]], coords=(48.8566, 2.3522)):
        self.places = places
        self.coords = coords
        self.geocoded = []
        self.calls = []

    def geocode(self, city):
        self.geocoded.append(city)
        return self.coords

    def search(self, lat, lon, category, max_results):
        self.calls.append(((lat, lon), category, max_results))
        return list(self.places.get(category, []))[:max_results]


class FailingLookup:
    def geocode(self, city):
        raise ConnectionError("geocoding service unreachable")

    def search(self, lat, lon, category, max_results):
        raise ConnectionError("places service unreachable")


class SlowLookup:
    def __init__(self, delay=0.5, slow_geocode=False):
        self.delay = delay
        self.slow_geocode = slow_geocode

    def geocode(self, city):
        if self.slow_geocode:
            time.sleep(self.delay)
        return (0.0, 0.0)

    def search(self, lat, lon, category, max_results):
        time.sleep(self.delay)
        return make_attractions()


@pytest.fixture
def attractions():
    return make_attractions()


@pytest.fixture
def restaurants():
    return make_restaurants()


@pytest.fixture
def fake_lookup(attractions, restaurants):
    return FakeLookup({"tourist_attraction": attractions, "restaurant": restaurants})


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def client():
    app.dependency_overrides[get_place_lookup] = lambda: None
    app.dependency_overrides[get_rng] = lambda: random.Random(0)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
