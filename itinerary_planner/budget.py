# itinerary_planner/budget.py
import math
import random
from types import MappingProxyType

# Share of the daily budget spent on lodging, per accommodation tier
ACCOMMODATION_MULTIPLIERS = MappingProxyType({
    "budget": 0.3,
    "hotel": 0.4,
    "luxury": 0.5,
    "apartment": 0.35,
    "camping": 0.2,
})
DEFAULT_TIER = "hotel"

COST_VARIANCE = 0.02


def tier_multiplier(accommodation: str) -> float:
    return ACCOMMODATION_MULTIPLIERS.get(accommodation.lower(), ACCOMMODATION_MULTIPLIERS[DEFAULT_TIER])


def per_day_allocation(budget: float, days: int, accommodation: str) -> float:
    """Daily spend for the chosen tier, never above an even split of the budget."""
    max_daily_budget = math.floor(budget / days)
    return min(max_daily_budget * tier_multiplier(accommodation), max_daily_budget)


def total_budget(budget: float, days: int, accommodation: str) -> float:
    """Planned spend for the whole trip, clamped to the traveler's budget."""
    planned = round(per_day_allocation(budget, days, accommodation) * days, 2)
    return min(planned, budget)


def estimated_day_cost(allocation: float, rng: random.Random) -> int:
    variation = rng.uniform(1 - COST_VARIANCE, 1 + COST_VARIANCE)
    return max(0, round(allocation * variation))
