"""
Share text and deep links for an itinerary.
"""
from typing import Optional
from urllib.parse import quote

# same set of characters JavaScript's encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def _encode(text: str) -> str:
    return quote(text, safe=_URI_SAFE)


def share_message(destination: str) -> str:
    return f"Check out this amazing {destination} itinerary I created with YatraAI!"


def email_subject(destination: str) -> str:
    return f"Amazing {destination} Travel Itinerary"


def mailto_url(destination: str, share_url: str, recipient: str = "", message: Optional[str] = None) -> str:
    body = f"{message or share_message(destination)}\n\nView the full itinerary here: {share_url}"
    return f"mailto:{quote(recipient, safe='@')}?subject={_encode(email_subject(destination))}&body={_encode(body)}"


def whatsapp_url(destination: str, share_url: str, message: Optional[str] = None) -> str:
    text = f"{message or share_message(destination)}\n\nView the full itinerary: {share_url}"
    return f"https://wa.me/?text={_encode(text)}"
