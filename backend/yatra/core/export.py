import re
from typing import List, Sequence

from yatra.core.itinerary_parser import parse_cost, parse_itinerary
from yatra.core.models import Day

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w-]+", re.ASCII)


def export_filename(destinations: Sequence[str], extension: str = "txt") -> str:
    """'Jaipur', 'Udaipur' -> 'jaipur_udaipur_itinerary.txt'"""
    stem = "_".join(destinations).lower()
    stem = _UNSAFE_FILENAME_CHARS.sub("_", stem).strip("_") or "trip"
    return f"{stem}_itinerary.{extension}"


def _day_spend(day: Day) -> str:
    costs = [parse_cost(text) for text in (day.morning, day.afternoon, day.evening, day.food)]
    costs = [c for c in costs if c is not None]
    if not costs:
        return ""
    return f"{costs[0].symbol}{sum(c.amount for c in costs)}"


def render_plain_text(itinerary: str, destinations: Sequence[str], include_tips: bool = True) -> str:
    """
    Printable version of an itinerary.

    Text without any day markers is returned unchanged, mirroring how the
    results screen falls back to the raw text.
    """
    parsed = parse_itinerary(itinerary)
    if not parsed.has_days:
        return itinerary

    heading = f"YatraAI Itinerary: {', '.join(destinations) or 'Your Trip'}"
    out: List[str] = [heading, "=" * len(heading), ""]

    if parsed.best_time_to_visit:
        out += [f"Best Time to Visit: {parsed.best_time_to_visit}", ""]

    for day in parsed.days:
        out.append(f"Day {day.day_number}: {day.title}")
        sections = [
            ("Morning", day.morning),
            ("Afternoon", day.afternoon),
            ("Evening", day.evening),
            ("Transport", day.transport),
            ("Food", day.food),
        ]
        if include_tips:
            sections.append(("Local Tip", day.tip))
        for label, value in sections:
            if value:
                out.append(f"  {label}: {value}")
        spend = _day_spend(day)
        if spend:
            out.append(f"  Estimated spend: {spend}")
        out.append("")

    return "\n".join(out).rstrip() + "\n"
