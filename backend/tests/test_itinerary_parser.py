"""
Tests for the best-effort itinerary text parser
"""

import pytest

from yatra.core.fallback import generate_fallback_itinerary
from yatra.core.itinerary_parser import (
    DEFAULT_DAY_TITLE,
    Cost,
    parse_cost,
    parse_day_header,
    parse_itinerary,
)
from yatra.core.markers import LineKind, classify_line
from yatra.core.models import TripRequest

AI_STYLE_TEXT = """
Here is your plan for Kerala!

🌟 Best Time to Visit Kerala:
September to March, after the monsoon.

**📅 Day 1: Kochi Backwaters**
**🌅 Morning:** Fort Kochi walk past the Chinese fishing nets (Cost: ₹500)
🌞 Afternoon: Mattancherry Palace and Jew Town (Cost: ₹300)
🌙 Evening: Kathakali show (Cost: ₹1,200)
🚗 Transport: Auto-rickshaw and ferry
🍽 Food: Appam with stew at Kashi Art Cafe (Cost: ₹400)
💡 Local Tip: Carry cash for ferry tickets

📅 Day 2 (Saturday, Nov 8): Alleppey Houseboat
🌅 Morning: Drive to Alleppey
🌙 Evening: Sunset on the houseboat deck
"""


def make_trip(start, end):
    return TripRequest(
        destination=["Goa"], startDate=start, endDate=end, budget=21000,
        currency="INR", travelStyle="Backpacker", interests=["Beaches"], modeOfTravel="Bus",
    )


@pytest.mark.parametrize("end,expected_days", [
    ("2025-05-02", 2),
    ("2025-05-04", 4),
    ("2025-05-07", 7),
    ("2025-05-12", 7),
])
def test_round_trip_of_generated_text(end, expected_days):
    parsed = parse_itinerary(generate_fallback_itinerary(make_trip("2025-05-01", end)))

    assert len(parsed.days) == expected_days
    assert [d.day_number for d in parsed.days] == list(range(1, expected_days + 1))
    for day in parsed.days:
        for field in ("morning", "afternoon", "evening", "transport", "food", "tip"):
            assert getattr(day, field), f"day {day.day_number} missing {field}"
    assert parsed.best_time_to_visit.startswith("The ideal time depends on the region")


def test_text_without_day_markers_yields_no_days():
    parsed = parse_itinerary("Error generating itinerary. Please try again.")
    assert parsed.days == []
    assert parsed.has_days is False


@pytest.mark.parametrize("text", ["", None, "\n\n   \n"])
def test_empty_input(text):
    parsed = parse_itinerary(text)
    assert parsed.days == []
    assert parsed.best_time_to_visit is None


def test_ai_style_text():
    parsed = parse_itinerary(AI_STYLE_TEXT)
    first, second = parsed.days

    assert parsed.best_time_to_visit == "September to March, after the monsoon."
    assert first.day_number == 1
    assert first.title == "Kochi Backwaters"
    assert first.morning == "Fort Kochi walk past the Chinese fishing nets (Cost: ₹500)"
    assert first.food == "Appam with stew at Kashi Art Cafe (Cost: ₹400)"
    assert first.tip == "Carry cash for ferry tickets"

    assert second.day_number == 2
    assert second.title == "Alleppey Houseboat"
    assert second.afternoon == ""
    assert second.transport == ""
    assert second.evening == "Sunset on the houseboat deck"


def test_header_without_title_uses_defaults():
    parsed = parse_itinerary("📅 Day 4 (Tuesday, Jan 14):\n🌅 Morning: Rest")
    assert parsed.days[0].title == DEFAULT_DAY_TITLE
    assert parsed.days[0].day_number == 1
    assert parsed.days[0].morning == "Rest"


def test_header_without_number_defaults_to_day_one():
    header = parse_day_header("📅 Day of rest: Beach time")
    assert header == {"day_number": 1, "title": DEFAULT_DAY_TITLE}


def test_sections_before_first_day_are_dropped():
    text = "🌅 Morning: Orphan activity\n📅 Day 1: Arrival\n🌞 Afternoon: Check in"
    parsed = parse_itinerary(text)
    assert len(parsed.days) == 1
    assert parsed.days[0].morning == ""
    assert parsed.days[0].afternoon == "Check in"


def test_best_time_marker_on_last_line_is_ignored():
    parsed = parse_itinerary("📅 Day 1: Arrival\n🌟 Best Time to Visit Goa:")
    assert parsed.best_time_to_visit is None
    assert len(parsed.days) == 1


def test_line_after_best_time_marker_is_still_parsed():
    parsed = parse_itinerary("🌟 Best Time to Visit Goa:\n📅 Day 1: Arrival")
    assert parsed.best_time_to_visit == "📅 Day 1: Arrival"
    assert parsed.days[0].title == "Arrival"


def test_repeated_day_numbers_are_kept_in_order():
    parsed = parse_itinerary("📅 Day 1: A\n📅 Day 1: B\n📅 Day 3: C")
    assert [(d.day_number, d.title) for d in parsed.days] == [(1, "A"), (1, "B"), (3, "C")]


def test_classify_line_order_and_variation_selector():
    assert classify_line("🍽 Food: Dosa").kind is LineKind.FOOD
    assert classify_line("🍽️ Food: Dosa").payload == " Dosa"
    assert classify_line("📅 Day 2: Trek").kind is LineKind.DAY
    assert classify_line("Just a sentence").kind is LineKind.OTHER


@pytest.mark.parametrize("text,expected", [
    ("Fort visit (Cost: ₹833)", Cost("₹", 833)),
    ("Show (Cost: $1,200)", Cost("$", 1200)),
    ("Museum (Cost: INR 450)", Cost("INR", 450)),
    ("Dinner (cost: ₹ 99.50)", Cost("₹", 99)),
    ("Free walking tour", None),
    ("", None),
])
def test_parse_cost(text, expected):
    assert parse_cost(text) == expected


def test_oversized_day_number_falls_back_to_default():
    parsed = parse_itinerary("📅 Day " + "9" * 5000 + ": Marathon\n🌅 Morning: Run")
    assert parsed.days[0].day_number == 1
    assert parsed.days[0].title == "Marathon"
    assert parsed.days[0].morning == "Run"


def test_best_time_line_is_kept_verbatim():
    parsed = parse_itinerary("🌟 Best Time to Visit Goa:\n   November to February  \n📅 Day 1: Beach")
    assert parsed.best_time_to_visit == "   November to February  "
