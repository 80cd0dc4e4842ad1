from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_FLOOR
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

# Enums
class Currency(str, Enum):
    INR = "INR"
    USD = "USD"

class TravelStyle(str, Enum):
    RELAXED = "Relaxed"
    ADVENTURE = "Adventure"
    LUXURY = "Luxury"
    FAMILY = "Family"
    BACKPACKER = "Backpacker"

class Interest(str, Enum):
    TEMPLES = "Temples"
    BEACHES = "Beaches"
    FOOD = "Food"
    TREKKING = "Trekking"
    HERITAGE_SITES = "Heritage Sites"
    SHOPPING = "Shopping"
    NIGHTLIFE = "Nightlife"
    FESTIVALS = "Festivals"

# per-day shares are computed with floats
MAX_BUDGET = 10**12

class TravelMode(str, Enum):
    FLIGHT = "Flight"
    TRAIN = "Train"
    BUS = "Bus"
    CAR = "Car"


def currency_symbol(currency) -> str:
    """INR maps to the rupee sign; every other code renders as dollars."""
    code = currency.value if isinstance(currency, Enum) else str(currency)
    return "₹" if code == Currency.INR.value else "$"


class TripRequest(BaseModel):
    """Validated trip preferences; never mutated once submitted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    destinations: List[str] = Field(..., alias="destination", min_length=1)
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    budget: int = Field(..., gt=0, le=MAX_BUDGET)
    currency: Currency
    travel_style: TravelStyle = Field(..., alias="travelStyle")
    interests: List[Interest] = Field(..., min_length=1)
    mode_of_travel: TravelMode = Field(..., alias="modeOfTravel")

    @field_validator('destinations')
    @classmethod
    def validate_destinations(cls, v):
        cleaned = [d.strip() for d in v]
        if any(not d for d in cleaned):
            raise ValueError("Destination names cannot be empty")
        if len(set(d.lower() for d in cleaned)) != len(cleaned):
            raise ValueError("Destinations must not contain duplicates")
        return cleaned

    @field_validator('budget', mode='before')
    @classmethod
    def coerce_budget(cls, v):
        # the form posts budget as a string; fractional amounts are floored
        if isinstance(v, bool):
            raise ValueError("Budget must be a number")
        if isinstance(v, (str, float)):
            try:
                return int(Decimal(str(v).strip()).to_integral_value(rounding=ROUND_FLOOR))
            except (InvalidOperation, ValueError, OverflowError):
                raise ValueError("Budget must be a number")
        return v

    @field_validator('interests')
    @classmethod
    def dedupe_interests(cls, v):
        return list(dict.fromkeys(v))

    @model_validator(mode='after')
    def check_date_order(self):
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self

    @property
    def trip_days(self) -> int:
        """Calendar days covered by the trip, both endpoints included."""
        return (self.end_date - self.start_date).days + 1

    @property
    def currency_symbol(self) -> str:
        return currency_symbol(self.currency)

    @property
    def destination_label(self) -> str:
        return ", ".join(self.destinations)


class Day(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day_number: int = Field(1, alias="dayNumber", ge=1)
    title: str = "Day Activities"
    morning: str = ""
    afternoon: str = ""
    evening: str = ""
    transport: str = ""
    food: str = ""
    tip: str = ""


class ParsedItinerary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    days: List[Day] = Field(default_factory=list)
    best_time_to_visit: Optional[str] = Field(None, alias="bestTimeToVisit")

    @computed_field(alias="hasDays")
    @property
    def has_days(self) -> bool:
        """False means the consumer should show the raw itinerary text."""
        return bool(self.days)
