"""
Validation rules of the trip request model
"""

from datetime import date

import pytest
from pydantic import ValidationError

from yatra.core.models import (
    MAX_BUDGET, Currency, Day, Interest, ParsedItinerary, TravelMode, TravelStyle, TripRequest, currency_symbol,
)


def payload(**overrides):
    data = {
        "destination": ["Jaipur"],
        "startDate": "2025-01-10",
        "endDate": "2025-01-12",
        "budget": "10000",
        "currency": "INR",
        "travelStyle": "Relaxed",
        "interests": ["Temples", "Heritage Sites"],
        "modeOfTravel": "Train",
    }
    data.update(overrides)
    return data


class TestTripRequest:

    def test_wire_payload_is_parsed(self):
        trip = TripRequest(**payload())
        assert trip.destinations == ["Jaipur"]
        assert trip.start_date == date(2025, 1, 10)
        assert trip.budget == 10000
        assert trip.currency is Currency.INR
        assert trip.travel_style is TravelStyle.RELAXED
        assert trip.interests == [Interest.TEMPLES, Interest.HERITAGE_SITES]
        assert trip.mode_of_travel is TravelMode.TRAIN
        assert trip.trip_days == 3
        assert trip.currency_symbol == "₹"

    def test_snake_case_names_are_accepted(self):
        trip = TripRequest(
            destinations=["Goa"], start_date=date(2025, 1, 1), end_date=date(2025, 1, 2),
            budget=500, currency="USD", travel_style="Family", interests=["Beaches"],
            mode_of_travel="Car",
        )
        assert trip.destination_label == "Goa"
        assert trip.currency_symbol == "$"

    def test_request_is_immutable(self):
        trip = TripRequest(**payload())
        with pytest.raises(ValidationError):
            trip.budget = 1

    @pytest.mark.parametrize("field", [
        "destination", "startDate", "endDate", "budget",
        "currency", "travelStyle", "interests", "modeOfTravel",
    ])
    def test_missing_field_is_rejected(self, field):
        data = payload()
        del data[field]
        with pytest.raises(ValidationError):
            TripRequest(**data)

    @pytest.mark.parametrize("overrides", [
        {"destination": []},
        {"destination": ["Jaipur", " "]},
        {"destination": ["Jaipur", "jaipur"]},
        {"endDate": "2025-01-10"},
        {"endDate": "2025-01-09"},
        {"budget": 0},
        {"budget": "-50"},
        {"budget": "lots"},
        {"budget": "Infinity"},
        {"budget": float("inf")},
        {"budget": float("nan")},
        {"budget": 10**400},
        {"budget": "1e400"},
        {"currency": "EUR"},
        {"travelStyle": "Chaotic"},
        {"interests": []},
        {"interests": ["Skydiving"]},
        {"modeOfTravel": "Boat"},
    ])
    def test_invalid_values_are_rejected(self, overrides):
        with pytest.raises(ValidationError):
            TripRequest(**payload(**overrides))

    def test_destinations_are_trimmed(self):
        trip = TripRequest(**payload(destination=[" Jaipur ", "Udaipur"]))
        assert trip.destinations == ["Jaipur", "Udaipur"]
        assert trip.destination_label == "Jaipur, Udaipur"

    def test_fractional_budget_is_floored(self):
        assert TripRequest(**payload(budget="10000.75")).budget == 10000
        assert TripRequest(**payload(budget=2500.5)).budget == 2500

    def test_duplicate_interests_collapse(self):
        trip = TripRequest(**payload(interests=["Food", "Food", "Temples"]))
        assert trip.interests == [Interest.FOOD, Interest.TEMPLES]

    def test_past_dates_are_allowed_by_the_model(self):
        # the "not in the past" rule belongs to the HTTP boundary
        trip = TripRequest(**payload(startDate="2001-01-01", endDate="2001-01-02"))
        assert trip.trip_days == 2


def test_currency_symbol_mapping():
    assert currency_symbol(Currency.INR) == "₹"
    assert currency_symbol("INR") == "₹"
    assert currency_symbol(Currency.USD) == "$"
    assert currency_symbol("EUR") == "$"


def test_parsed_itinerary_serializes_with_camel_case():
    parsed = ParsedItinerary(days=[Day(day_number=2, title="Trek")], best_time_to_visit="Winter")
    data = parsed.model_dump(by_alias=True)
    assert data["bestTimeToVisit"] == "Winter"
    assert data["hasDays"] is True
    assert data["days"][0]["dayNumber"] == 2
    assert ParsedItinerary().model_dump(by_alias=True)["hasDays"] is False


def test_budget_upper_bound():
    assert TripRequest(**payload(budget=MAX_BUDGET)).budget == MAX_BUDGET
    with pytest.raises(ValidationError):
        TripRequest(**payload(budget=MAX_BUDGET + 1))
