"""
Canned content used by the fallback itinerary generator.

Every table has seven entries, one per day of the capped fallback week.
"""
from typing import Sequence, TypeVar

T = TypeVar("T")

SEASONAL_NOTE = (
    "The ideal time depends on the region - generally October to March offers "
    "pleasant weather across most of India. Avoid monsoon season (June-September) "
    "unless you enjoy the rains!"
)

DAY_THEMES = (
    "Arrival & Heritage Exploration",
    "Cultural Immersion & Temples",
    "Local Markets & Artisan Crafts",
    "Nature & Scenic Beauty",
    "Food Trail & Cooking Experience",
    "Adventure & Outdoor Activities",
    "Farewell & Last-minute Shopping",
)

MORNING_ACTIVITIES = (
    "Visit ancient temples and heritage sites with guided tour",
    "Explore bustling local markets and spice bazaars",
    "Take a heritage walk through old city quarters",
    "Visit museums showcasing regional art and history",
    "Early morning yoga session or meditation at peaceful spots",
    "Photography tour of architectural marvels",
    "Visit local artisan workshops and craft centers",
)

AFTERNOON_ACTIVITIES = (
    "Traditional Indian lunch followed by palace or fort exploration",
    "Shopping for handicrafts, textiles, and souvenirs",
    "Nature excursion to gardens, lakes, or hill stations",
    "Cooking class learning regional Indian cuisine",
    "Visit to local villages or cultural centers",
    "Adventure activities like trekking or water sports",
    "Explore modern attractions and entertainment districts",
)

EVENING_ACTIVITIES = (
    "Traditional dinner with cultural dance performance",
    "Evening aarti ceremony at riverside or temple",
    "Sunset viewing from scenic viewpoints or rooftops",
    "Night market exploration and street food tasting",
    "Traditional music and dance show",
    "Evening boat ride or heritage light show",
    "Rooftop dining with panoramic city views",
)

LOCAL_TRANSPORT = (
    "Local trains, metro, or app-based cabs (Ola/Uber)",
    "Auto-rickshaws for short distances, buses for longer routes",
    "Cycle rickshaws in old city areas, walking tours",
    "Private car rental or tourist buses for sightseeing",
    "Local trains for intercity travel, shared taxis",
    "Motorbike rentals or guided bike tours",
    "Airport transfers via pre-paid taxis or metro",
)

FOOD_RECOMMENDATIONS = (
    "Try regional thali at local restaurant - complete meal with variety",
    "Street food tour: chaat, samosas, and regional specialties",
    "Traditional breakfast: dosa, idli, or parathas with chai",
    "Authentic biryani or pulao at renowned local eatery",
    "Regional sweets and desserts from famous sweet shops",
    "Coastal cuisine: fresh seafood or regional fish curry",
    "Farewell dinner at heritage restaurant with live music",
)

LOCAL_TIPS = (
    "Remove shoes before entering temples and cover your head if required",
    "Bargaining is expected in markets - start at 50% of quoted price",
    "Carry hand sanitizer and drink bottled water for safety",
    "Dress modestly, especially when visiting religious sites",
    "Learn basic Hindi phrases - locals appreciate the effort",
    "Keep small denomination notes for tips, rickshaws, and street vendors",
    "Book train tickets in advance and arrive early at stations",
)


def rotate(table: Sequence[T], day: int) -> T:
    """Entry for a 1-based day index, wrapping around the table."""
    return table[(day - 1) % len(table)]
