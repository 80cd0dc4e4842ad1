"""
Line-prefix vocabulary of itinerary text.

The fallback generator writes these tokens and the parser keys on them, so
both sides import them from here. The AI prompt asks for the same tokens.
"""
from enum import Enum
from typing import NamedTuple

BEST_TIME = "🌟 Best Time to Visit"
DAY = "📅 Day"
MORNING = "🌅 Morning:"
AFTERNOON = "🌞 Afternoon:"
EVENING = "🌙 Evening:"
TRANSPORT = "🚗 Transport:"
FOOD = "🍽️ Food:"
TIP = "💡 Local Tip:"

# emoji presentation selector; models emit food emoji with and without it
_VARIATION_SELECTOR = "\ufe0f"


class LineKind(str, Enum):
    BEST_TIME = "best_time"
    DAY = "day"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    TRANSPORT = "transport"
    FOOD = "food"
    TIP = "tip"
    OTHER = "other"


# Checked in this order; first hit wins.
MARKERS = (
    (LineKind.BEST_TIME, BEST_TIME),
    (LineKind.DAY, DAY),
    (LineKind.MORNING, MORNING),
    (LineKind.AFTERNOON, AFTERNOON),
    (LineKind.EVENING, EVENING),
    (LineKind.TRANSPORT, TRANSPORT),
    (LineKind.FOOD, FOOD),
    (LineKind.TIP, TIP),
)

SECTION_KINDS = frozenset({
    LineKind.MORNING,
    LineKind.AFTERNOON,
    LineKind.EVENING,
    LineKind.TRANSPORT,
    LineKind.FOOD,
    LineKind.TIP,
})


class ClassifiedLine(NamedTuple):
    kind: LineKind
    line: str     # normalized line, marker included
    payload: str  # text after the marker, untrimmed


def normalize(text: str) -> str:
    return text.replace(_VARIATION_SELECTOR, "")


_NORMALIZED = tuple((kind, normalize(token)) for kind, token in MARKERS)


def classify_line(line: str) -> ClassifiedLine:
    """Match a line against the marker vocabulary."""
    norm = normalize(line)
    for kind, token in _NORMALIZED:
        pos = norm.find(token)
        if pos != -1:
            return ClassifiedLine(kind, norm, norm[pos + len(token):])
    return ClassifiedLine(LineKind.OTHER, norm, "")
