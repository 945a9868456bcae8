# itinerary_planner/schedule.py
import random
import re
from datetime import time
from types import MappingProxyType
from typing import Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple

from .models import Place
from .placeholders import placeholder_landmarks, placeholder_restaurants

MAX_ACTIVITIES = 4
LIVE_PLACES_PER_DAY = 4
PLACEHOLDER_PLACES_PER_DAY = 2
DURATIONS = ("2 hours", "1.5 hours")


class Slot(NamedTuple):
    start: time
    end: time
    label: str


class InterestExtra(NamedTuple):
    keywords: Tuple[str, ...]
    times: Tuple[time, time, time]   # day 1, day 2, any later day
    duration: str

    def time_for(self, day: int) -> time:
        return self.times[min(day, 3) - 1]


class DaySchedule(NamedTuple):
    activities: List[str]
    meals: List[str]


SLOT_PATTERNS = MappingProxyType({
    # Early start, full day of exploration
    1: (
        Slot(time(8, 0), time(10, 0), "Early Morning"),
        Slot(time(10, 30), time(12, 30), "Late Morning"),
        Slot(time(14, 0), time(16, 0), "Afternoon"),
        Slot(time(16, 30), time(18, 30), "Late Afternoon"),
        Slot(time(19, 0), time(21, 0), "Evening"),
    ),
    # Relaxed morning
    2: (
        Slot(time(9, 30), time(11, 30), "Morning"),
        Slot(time(12, 0), time(14, 0), "Midday"),
        Slot(time(15, 0), time(17, 0), "Afternoon"),
        Slot(time(17, 30), time(19, 30), "Evening"),
        Slot(time(20, 0), time(22, 0), "Night"),
    ),
    # Mid-morning start, late finish
    3: (
        Slot(time(10, 0), time(12, 0), "Late Morning"),
        Slot(time(13, 0), time(15, 0), "Early Afternoon"),
        Slot(time(16, 0), time(18, 0), "Late Afternoon"),
        Slot(time(18, 30), time(20, 30), "Evening"),
        Slot(time(21, 0), time(23, 0), "Late Night"),
    ),
})
DEFAULT_PATTERN_DAY = 1

INTEREST_EXTRAS = MappingProxyType({
    "Food & Dining": InterestExtra(
        ("food", "restaurant", "cafe", "bar"),
        (time(17, 0), time(18, 0), time(17, 30)),
        "1.5 hours",
    ),
    "Nightlife": InterestExtra(
        ("nightlife", "bar", "night_club", "entertainment"),
        (time(21, 0), time(22, 0), time(21, 30)),
        "2 hours",
    ),
    "Culture & History": InterestExtra(
        ("museum", "art", "cultural", "historical"),
        (time(14, 0), time(15, 0), time(16, 0)),
        "2 hours",
    ),
})

# Keyed by day % 3: breakfast, lunch, dinner
MEAL_TIMES = MappingProxyType({
    1: (time(7, 30), time(12, 30), time(19, 30)),
    2: (time(8, 30), time(13, 30), time(20, 0)),
    0: (time(8, 0), time(13, 0), time(19, 0)),
})
MEAL_NAMES = ("Breakfast", "Lunch", "Dinner")


def format_time(value: time) -> str:
    """12-hour clock without a leading zero, e.g. 8:00 AM."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def slot_pattern(day: int) -> Tuple[Slot, ...]:
    # Days past the table reuse the day-1 pattern
    return SLOT_PATTERNS.get(day, SLOT_PATTERNS[DEFAULT_PATTERN_DAY])


def rotation_offset(day: int, per_day: int) -> int:
    return (day - 1) * per_day


def rotate(items: Sequence[Place], offset: int) -> List[Place]:
    if not items:
        return []
    k = offset % len(items)
    return list(items[k:]) + list(items[:k])


def category_tokens(place: Place) -> Set[str]:
    # "art_gallery" -> {"art_gallery", "art", "gallery"}
    tokens = set()
    for c in place.categories:
        c = c.lower()
        tokens.add(c)
        tokens.update(t for t in re.split(r"[_\s]+", c) if t)
    return tokens


def matches_any(place: Place, keywords: Iterable[str]) -> bool:
    return not category_tokens(place).isdisjoint(keywords)


def format_activity(start: time, place: Place, duration: str) -> str:
    return f"{format_time(start)} - {place.name} ({duration}) - {place.location}"


def format_meal(when: time, meal: str, place: Place) -> str:
    text = f"{format_time(when)} - {meal} at {place.name} - {place.location}"
    if place.rating is not None:
        text += f" (Rating: {place.rating:g}/5)"
    return text


def _interest_extras(day: int, interests: Sequence[str], pool: List[Place]) -> List[Tuple[time, Place, str]]:
    """Pick one matching place per recognized interest, consuming it from the pool."""
    extras = []
    seen = set()
    for interest in interests:
        rule = INTEREST_EXTRAS.get(interest)
        if rule is None or interest in seen:
            continue
        seen.add(interest)
        match = next((p for p in pool if matches_any(p, rule.keywords)), None)
        if match is not None:
            pool.remove(match)
            extras.append((rule.time_for(day), match, rule.duration))
    return extras


def build_activities(
    day: int,
    city: str,
    interests: Sequence[str],
    attractions: Sequence[Place],
    rng: random.Random,
) -> List[str]:
    if attractions:
        pool, per_day = list(attractions), LIVE_PLACES_PER_DAY
    else:
        pool, per_day = placeholder_landmarks(city), PLACEHOLDER_PLACES_PER_DAY

    rotated = rotate(pool, rotation_offset(day, per_day))
    slots = slot_pattern(day)[:MAX_ACTIVITIES]
    fills = [(slot.start, place, rng.choice(DURATIONS)) for slot, place in zip(slots, rotated)]

    remaining = rotated[len(fills):]
    extras = _interest_extras(day, interests, remaining)[:MAX_ACTIVITIES]

    # Interest matches take priority over generic fills at the cap
    chosen = fills[:MAX_ACTIVITIES - len(extras)] + extras
    chosen.sort(key=lambda entry: entry[0])
    return [format_activity(start, place, duration) for start, place, duration in chosen]


def build_meals(day: int, city: str, restaurants: Sequence[Place]) -> List[str]:
    fallback = placeholder_restaurants(city)
    eateries = rotate(restaurants, rotation_offset(day, len(MEAL_NAMES)))[:len(MEAL_NAMES)]
    times = MEAL_TIMES[day % 3]

    meals = []
    for i, meal in enumerate(MEAL_NAMES):
        place = eateries[i] if i < len(eateries) else fallback[i]
        meals.append(format_meal(times[i], meal, place))
    return meals


def generate_day_schedule(
    day: int,
    city: str,
    interests: Sequence[str],
    attractions: Sequence[Place] = (),
    restaurants: Sequence[Place] = (),
    rng: Optional[random.Random] = None,
) -> DaySchedule:
    """
    Builds the activities and meals for one day of a trip.

    Args:
        day: 1-based day number.
        city: Destination name, used for placeholder places.
        interests: Interest tags in the order the traveler picked them.
        attractions: Looked-up attractions; empty means use placeholders.
        restaurants: Looked-up restaurants; missing meals use placeholders.
        rng: Random source for duration labels.

    Returns:
        DaySchedule with at most 4 activities and exactly 3 meals.
    """
    rng = rng or random.Random()
    return DaySchedule(
        activities=build_activities(day, city, interests, attractions, rng),
        meals=build_meals(day, city, restaurants),
    )
