"""
Best-effort parser turning itinerary text into structured days.

The text comes either from the fallback generator or from a language model
asked to follow the same marker vocabulary. Nothing here raises on odd input:
unknown lines are skipped, unreadable day headers get default values, and
section lines seen before the first day header are dropped.
"""
import re
import logging
from decimal import Decimal, InvalidOperation
from typing import List, NamedTuple, Optional

from yatra.core import markers
from yatra.core.markers import LineKind, classify_line
from yatra.core.models import Day, ParsedItinerary

logger = logging.getLogger(__name__)

DEFAULT_DAY_NUMBER = 1
DEFAULT_DAY_TITLE = "Day Activities"

# "📅 Day 3 (Sunday, Jan 12): Local Markets & Artisan Crafts"
DAY_HEADER_RE = re.compile(
    re.escape(markers.normalize(markers.DAY)) + r"\s*(\d+)(?:\s*\([^)]*\))?\s*:\s*(.+)"
)
COST_RE = re.compile(r"\(\s*Cost:\s*([^\d\s(]*)\s*([\d,]+(?:\.\d+)?)\s*\)", re.IGNORECASE)

_SECTION_FIELDS = {
    LineKind.MORNING: "morning",
    LineKind.AFTERNOON: "afternoon",
    LineKind.EVENING: "evening",
    LineKind.TRANSPORT: "transport",
    LineKind.FOOD: "food",
    LineKind.TIP: "tip",
}


class Cost(NamedTuple):
    symbol: str
    amount: int


def _clean(payload: str) -> str:
    # models like to wrap labels in markdown bold: "**🌅 Morning:** ..."
    return payload.strip().strip("*").strip()


def parse_day_header(line: str) -> dict:
    m = DAY_HEADER_RE.search(line)
    if not m:
        return {"day_number": DEFAULT_DAY_NUMBER, "title": DEFAULT_DAY_TITLE}
    title = _clean(m.group(2)) or DEFAULT_DAY_TITLE
    try:
        number = int(m.group(1))
    except ValueError:
        # too many digits for int()
        number = DEFAULT_DAY_NUMBER
    return {"day_number": number or DEFAULT_DAY_NUMBER, "title": title}


def parse_cost(text: str) -> Optional[Cost]:
    """Pull the '(Cost: ₹833)' annotation out of an activity line."""
    if not text:
        return None
    m = COST_RE.search(text)
    if not m:
        return None
    try:
        amount = Decimal(m.group(2).replace(",", ""))
    except InvalidOperation:
        return None
    return Cost(symbol=m.group(1), amount=int(amount))


def parse_itinerary(text: Optional[str]) -> ParsedItinerary:
    lines = [line for line in (text or "").split("\n") if line.strip()]
    days: List[Day] = []
    current: Optional[dict] = None
    best_time: Optional[str] = None

    for index, raw in enumerate(lines):
        kind, line, payload = classify_line(raw)

        if kind is LineKind.BEST_TIME:
            # payload is the following line, kept verbatim
            if index + 1 < len(lines):
                best_time = lines[index + 1]
        elif kind is LineKind.DAY:
            if current is not None:
                days.append(Day(**current))
            current = parse_day_header(line)
        elif kind in _SECTION_FIELDS:
            if current is not None:
                current[_SECTION_FIELDS[kind]] = _clean(payload)

    if current is not None:
        days.append(Day(**current))

    if not days:
        logger.debug(f"No day markers found in {len(lines)} itinerary lines")
    return ParsedItinerary(days=days, best_time_to_visit=best_time)
