# itinerary_planner/placeholders.py
"""
Placeholder places used when no live lookup data is available.

Names are built from the city name and a template set chosen by region.
Cities map to regions through CITY_REGIONS; any city not listed gets the
"default" templates.
"""
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .models import Place

CITY_REGIONS = MappingProxyType({
    "agra": "india",
    "delhi": "india",
    "new delhi": "india",
    "mumbai": "india",
    "jaipur": "india",
    "paris": "europe",
    "london": "europe",
    "rome": "europe",
})

# (name template, location, categories)
LANDMARK_TEMPLATES: Mapping[str, List[Tuple[str, str, List[str]]]] = MappingProxyType({
    "india": [
        ("{city} Fort", "Historic District", ["historical", "landmark"]),
        ("{city} Palace", "Royal Quarter", ["historical", "landmark"]),
        ("{city} Market", "Commercial Area", ["market", "shopping", "food"]),
        ("{city} Temple", "Religious Quarter", ["cultural", "place_of_worship"]),
        ("{city} Garden", "Green Zone", ["park", "garden"]),
        ("{city} Museum", "Cultural District", ["museum", "art"]),
        ("{city} Square", "City Center", ["landmark", "entertainment"]),
    ],
    "europe": [
        ("{city} Cathedral", "Historic Center", ["historical", "place_of_worship"]),
        ("{city} Palace", "Royal District", ["historical", "landmark"]),
        ("{city} Museum", "Cultural Quarter", ["museum", "art"]),
        ("{city} Park", "Green Zone", ["park"]),
        ("{city} Square", "City Center", ["landmark", "cafe"]),
        ("{city} Bridge", "Riverside", ["landmark"]),
        ("{city} Tower", "Landmark District", ["landmark", "entertainment"]),
    ],
    "default": [
        ("{city} City Center", "Downtown", ["landmark"]),
        ("{city} Main Square", "Central Plaza", ["landmark", "entertainment"]),
        ("{city} Local Market", "Market District", ["market", "shopping", "food"]),
        ("{city} Historical District", "Old Town", ["historical"]),
        ("{city} Cultural Quarter", "Arts District", ["cultural", "art"]),
        ("{city} Park", "Green Zone", ["park"]),
        ("{city} Museum", "Cultural Center", ["museum"]),
    ],
})

# Breakfast, lunch and dinner spots, in that order: (name template, location, rating)
RESTAURANT_TEMPLATES: Mapping[str, List[Tuple[str, str, float]]] = MappingProxyType({
    "india": [
        ("{city} Mughal Cafe", "Historic District", 4.3),
        ("{city} Spice Garden", "Market Area", 4.5),
        ("{city} Royal Palace Restaurant", "Luxury Zone", 4.7),
    ],
    "europe": [
        ("{city} Patisserie", "Old Town", 4.4),
        ("{city} Corner Bistro", "Latin Quarter", 4.6),
        ("{city} Grand Restaurant", "Riverside", 4.8),
    ],
    "default": [
        ("{city} Morning Cafe", "City Center", 4.2),
        ("{city} Traditional Bistro", "Market District", 4.4),
        ("{city} Fine Dining", "Cultural Quarter", 4.6),
    ],
})


def region_for(city: str) -> str:
    return CITY_REGIONS.get(city.strip().lower(), "default")


def placeholder_landmarks(city: str) -> List[Place]:
    templates = LANDMARK_TEMPLATES[region_for(city)]
    return [
        Place(name=name.format(city=city), location=location, categories=list(categories))
        for name, location, categories in templates
    ]


def placeholder_restaurants(city: str) -> List[Place]:
    templates = RESTAURANT_TEMPLATES[region_for(city)]
    return [
        Place(name=name.format(city=city), location=location, rating=rating, categories=["restaurant"])
        for name, location, rating in templates
    ]
