# itinerary_planner/models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TripRequest(BaseModel):
    """Trip parameters collected by the planning form."""
    city: str = Field(..., min_length=1, json_schema_extra={"example": "Paris"})
    budget: float = Field(..., gt=0, allow_inf_nan=False, description="Total trip budget, already in the local currency.")
    days: int = Field(..., ge=1, le=30)
    travelers: int = Field(..., ge=1, le=10)
    interests: List[str] = Field(default_factory=list)
    accommodation: str = "hotel"
    transportation: str = "public"

    @field_validator("city")
    @classmethod
    def city_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("city must not be empty")
        return value

    @field_validator("accommodation", "transportation")
    @classmethod
    def normalize_tag(cls, value: str) -> str:
        return value.strip().lower()


class Place(BaseModel):
    """A point of interest or eatery, looked up or generated."""
    model_config = ConfigDict(frozen=True)

    name: str
    location: str = "City Center"
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    categories: List[str] = Field(default_factory=list)


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    activities: List[str]
    meals: List[str]
    accommodation: str
    estimatedCost: int = Field(..., ge=0)


class ItineraryDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    summary: str
    totalBudget: float
    days: List[DayPlan]
    tips: List[str]
    emergencyContacts: List[str]


class CityPlaces(BaseModel):
    """Attractions and restaurants gathered for one city."""
    attractions: List[Place] = Field(default_factory=list)
    restaurants: List[Place] = Field(default_factory=list)


class Option(BaseModel):
    value: str
    label: str


class PlannerOptions(BaseModel):
    interests: List[str]
    accommodation: List[Option]
    transportation: List[Option]
