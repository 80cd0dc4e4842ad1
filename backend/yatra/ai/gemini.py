"""
Client for Google's Generative Language API (Gemini).

Only the request/response contract lives here. Deciding what to do when the
service fails (use the fallback itinerary) is the caller's job.
"""
import asyncio
import textwrap
from typing import Any, Dict, Optional

import aiohttp
import structlog

from yatra.core import markers
from yatra.core.errors import AIServiceError, AIServiceNotConfigured
from yatra.core.models import TripRequest
from yatra.core.settings import Settings

logger = structlog.get_logger(__name__)

_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    Plan a detailed itinerary from {start} to {end} for a {style} traveler visiting {destination} in India with a budget of {budget} {currency}. Interests: {interests}. Preferred travel mode: {mode}.

    Return a day-by-day schedule with morning, afternoon, and evening activities. Include approximate costs in {currency}, local transport suggestions (train, metro, rickshaw, cab), cultural tips, and 1 local food recommendation per day.

    Format the output clearly with Day 1, Day 2, etc. For each day include:
    {day} X: [Location/Theme]
    {morning} [Activity with description] (Cost: {symbol}XXX)
    {afternoon} [Activity with description] (Cost: {symbol}XXX)
    {evening} [Activity with description] (Cost: {symbol}XXX)
    {transport} [Local transport recommendations]
    {food} [Local food recommendation with restaurant suggestion]
    {tip} [Cultural tip, best time to visit, or local custom]

    Include practical Indian travel details like:
    - Best times to visit attractions to avoid crowds
    - Local customs and etiquette (especially for temples/religious sites)
    - Seasonal considerations and weather
    - Booking recommendations for trains/flights
    - Safety tips for solo/family travelers
    - Regional specialties and must-try dishes
    - Local festivals or events during the travel period"""
)


def build_itinerary_prompt(req: TripRequest) -> str:
    """Return the prompt string for a trip request."""
    return _PROMPT_TEMPLATE.format(
        start=req.start_date.isoformat(),
        end=req.end_date.isoformat(),
        style=req.travel_style.value,
        destination=req.destination_label,
        budget=req.budget,
        currency=req.currency.value,
        interests=", ".join(i.value for i in req.interests),
        mode=req.mode_of_travel.value,
        symbol=req.currency_symbol,
        day=markers.DAY,
        morning=markers.MORNING,
        afternoon=markers.AFTERNOON,
        evening=markers.EVENING,
        transport=markers.TRANSPORT,
        food=markers.FOOD,
        tip=markers.TIP,
    )


def extract_candidate_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None if any level is missing"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text.strip() else None


class GeminiClient:
    """Thin async adapter over the generateContent endpoint"""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash-latest",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_seconds: float = 30.0,
        generation_config: Optional[Dict[str, Any]] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.generation_config = generation_config or {
            "temperature": 0.7,
            "topK": 40,
            "topP": 0.95,
            "maxOutputTokens": 2048,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.GOOGLE_CLOUD_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_API_BASE,
            timeout_seconds=settings.GEMINI_TIMEOUT_SECONDS,
            generation_config={
                "temperature": settings.GEMINI_TEMPERATURE,
                "topK": settings.GEMINI_TOP_K,
                "topP": settings.GEMINI_TOP_P,
                "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
            },
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.generation_config,
        }

    async def _post(self, payload: Dict[str, Any]) -> Any:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                ) as response:
                    if response.status < 200 or response.status >= 300:
                        body = await response.text()
                        logger.error(
                            "gemini_api_error",
                            status_code=response.status,
                            body=body[:500],
                        )
                        raise AIServiceError(
                            f"Gemini API returned HTTP {response.status}",
                            status_code=response.status,
                            body=body,
                        )
                    return await response.json(content_type=None)
        except AIServiceError:
            raise
        except asyncio.TimeoutError as e:
            raise AIServiceError(f"Gemini API timed out after {self.timeout_seconds}s") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise AIServiceError(f"Gemini API request failed: {e}") from e

    async def generate(self, prompt: str) -> Optional[str]:
        """
        Send a prompt and return the first candidate's text.

        Raises AIServiceNotConfigured when no API key is set and
        AIServiceError for non-2xx answers, timeouts and transport errors.
        Returns None when the service answered without any candidate text.
        """
        if not self.configured:
            raise AIServiceNotConfigured("GOOGLE_CLOUD_API_KEY is not configured")

        data = await self._post(self.build_payload(prompt))
        text = extract_candidate_text(data)
        if text is None:
            logger.warning("gemini_empty_response", model=self.model)
        return text
