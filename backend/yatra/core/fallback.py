"""
Deterministic sample itinerary used when the AI service is unavailable.

Content comes from the rotation tables in ``yatra.core.catalog``; nothing
depends on the current date, so the same request always yields the same text.
"""
import math
from datetime import date, timedelta
from typing import List, NamedTuple, Optional

from yatra.core import catalog, markers
from yatra.core.catalog import rotate
from yatra.core.models import TripRequest

DEFAULT_DAILY_BUDGET = 5000
# Known limitation: longer trips still get one sample week.
MAX_FALLBACK_DAYS = 7

MORNING_SHARE = 0.25
AFTERNOON_SHARE = 0.35
EVENING_SHARE = 0.25
FOOD_SHARE = 0.15

DISCLAIMER = (
    "⚠️ Note: This is a sample India-focused itinerary. For personalized "
    "AI-generated content with real-time information, please configure your "
    "Google Cloud API credentials:\n- GOOGLE_CLOUD_API_KEY"
)


class DayCosts(NamedTuple):
    morning: int
    afternoon: int
    evening: int
    food: int

    @property
    def total(self) -> int:
        return self.morning + self.afternoon + self.evening + self.food


def daily_budget(budget: Optional[int], days: int) -> int:
    if not budget:
        return DEFAULT_DAILY_BUDGET
    return budget // max(days, 1)


def split_daily_budget(budget_per_day: int) -> DayCosts:
    """Allocate one day's budget across the four priced line items."""
    return DayCosts(
        morning=math.floor(budget_per_day * MORNING_SHARE),
        afternoon=math.floor(budget_per_day * AFTERNOON_SHARE),
        evening=math.floor(budget_per_day * EVENING_SHARE),
        food=math.floor(budget_per_day * FOOD_SHARE),
    )


def format_day_date(day: date) -> str:
    """e.g. 'Friday, Jan 10'"""
    return f"{day:%A}, {day:%b} {day.day}"


def _cost(symbol: str, amount: int) -> str:
    return f"(Cost: {symbol}{amount})"


def render_day(index: int, day: date, costs: DayCosts, symbol: str) -> List[str]:
    return [
        f"{markers.DAY} {index} ({format_day_date(day)}): {rotate(catalog.DAY_THEMES, index)}",
        f"{markers.MORNING} {rotate(catalog.MORNING_ACTIVITIES, index)} {_cost(symbol, costs.morning)}",
        f"{markers.AFTERNOON} {rotate(catalog.AFTERNOON_ACTIVITIES, index)} {_cost(symbol, costs.afternoon)}",
        f"{markers.EVENING} {rotate(catalog.EVENING_ACTIVITIES, index)} {_cost(symbol, costs.evening)}",
        f"{markers.TRANSPORT} {rotate(catalog.LOCAL_TRANSPORT, index)}",
        f"{markers.FOOD} {rotate(catalog.FOOD_RECOMMENDATIONS, index)} {_cost(symbol, costs.food)}",
        f"{markers.TIP} {rotate(catalog.LOCAL_TIPS, index)}",
    ]


def generate_fallback_itinerary(request: TripRequest) -> str:
    """Build a formatted sample itinerary for a validated trip request."""
    days = request.trip_days
    symbol = request.currency_symbol
    costs = split_daily_budget(daily_budget(request.budget, days))
    destination = request.destination_label

    lines = [
        f"🇮🇳 Your {request.travel_style.value} Indian Adventure to {destination}",
        "",
        f"{markers.BEST_TIME} {destination}:",
        catalog.SEASONAL_NOTE,
        "",
    ]

    for i in range(1, min(days, MAX_FALLBACK_DAYS) + 1):
        current = request.start_date + timedelta(days=i - 1)
        lines.extend(render_day(i, current, costs, symbol))
        lines.append("")

    lines.append("")
    lines.append(DISCLAIMER)
    return "\n".join(lines)
