from uuid import uuid4
from typing import Optional
from dataclasses import dataclass
from datetime import date, datetime, timezone, timedelta
import time
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
import structlog

from yatra.ai.gemini import GeminiClient, build_itinerary_prompt
from yatra.api.schemas import (
    GenerateItineraryResponse, ItineraryTextRequest, ParseResponse,
    ShareLinkCreate, ShareLinkCreateResponse, SharedItineraryRead,
    ExportRequest,
)
from yatra.core import share
from yatra.core.errors import AIServiceError, AIServiceNotConfigured
from yatra.core.export import export_filename, render_plain_text
from yatra.core.fallback import generate_fallback_itinerary
from yatra.core.itinerary_parser import parse_itinerary
from yatra.core.models import TripRequest
from yatra.core.settings import Settings

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/itineraries", tags=["itineraries"])

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)
settings = Settings()

# In-memory public share tokens; nothing is persisted across restarts
_SHARE_LINKS: dict[str, dict] = {}

def _prune_expired_links(now: datetime) -> None:
    for token in [t for t, link in _SHARE_LINKS.items() if now > link["expires_at"]]:
        del _SHARE_LINKS[token]


NO_CANDIDATE_MESSAGE = "Unable to generate itinerary. Please try again."
ERROR_MESSAGE = "Error generating itinerary. Please try again."

@asynccontextmanager
async def performance_timer(operation: str):
    """Context manager for timing operations"""
    start = time.time()
    try:
        yield
    finally:
        duration = time.time() - start
        logger.info("operation_completed", operation=operation, duration_seconds=round(duration, 2))


@dataclass
class GenerationResult:
    itinerary: str
    source: str  # "ai" or "fallback"


class ItineraryService:
    """Runs the AI call and substitutes the sample itinerary when it fails"""

    def __init__(self, client: GeminiClient):
        self.client = client

    def fallback(self, trip: TripRequest) -> GenerationResult:
        return GenerationResult(generate_fallback_itinerary(trip), "fallback")

    async def generate(self, trip: TripRequest) -> GenerationResult:
        log = logger.bind(destination=trip.destination_label, trip_days=trip.trip_days)
        try:
            text = await self.client.generate(build_itinerary_prompt(trip))
        except AIServiceNotConfigured:
            log.info("fallback_itinerary_used", reason="ai_not_configured")
            return self.fallback(trip)
        except AIServiceError as e:
            log.warning(
                "fallback_itinerary_used",
                reason="ai_unavailable",
                error=str(e),
                status_code=e.status_code,
            )
            return self.fallback(trip)

        if text is None:
            return GenerationResult(NO_CANDIDATE_MESSAGE, "ai")

        log.info("ai_itinerary_generated", length=len(text))
        return GenerationResult(text, "ai")


def get_ai_client() -> GeminiClient:
    return GeminiClient.from_settings(Settings())

def get_itinerary_service(client: GeminiClient = Depends(get_ai_client)) -> ItineraryService:
    return ItineraryService(client)

def ensure_trip_dates(trip: TripRequest, today: Optional[date] = None) -> None:
    """Reject trips that start in the past; ordering is checked by the model itself"""
    today = today or date.today()
    if trip.start_date < today:
        raise HTTPException(
            status_code=422,
            detail="Start date cannot be in the past."
        )


@router.post("/generate",
    response_model=GenerateItineraryResponse,
    responses={
        422: {"description": "Invalid trip request or start date in the past"},
        429: {"description": "Rate limit exceeded"},
    },
    summary="Generate a day-by-day travel itinerary",
    description="Asks the AI service for an itinerary and falls back to a sample itinerary when it is unavailable"
)
@limiter.limit(settings.rate_limit(settings.RATE_LIMIT_GENERATE))
async def generate_itinerary(
    request: Request,
    payload: TripRequest,
    service: ItineraryService = Depends(get_itinerary_service),
):
    """Generate itinerary text for a validated trip request"""
    ensure_trip_dates(payload)
    async with performance_timer("itinerary_generation"):
        try:
            result = await service.generate(payload)
        except Exception:
            # the user always gets some text back, even here
            logger.exception("itinerary_generation_failed")
            return GenerateItineraryResponse(itinerary=ERROR_MESSAGE, source="error")

    return GenerateItineraryResponse(itinerary=result.itinerary, source=result.source)


@router.post("/parse", response_model=ParseResponse)
@limiter.limit(settings.rate_limit(settings.RATE_LIMIT_PARSE))
async def parse_itinerary_text(request: Request, payload: ItineraryTextRequest):
    """Split itinerary text into structured days; hasDays=false means show rawText"""
    parsed = parse_itinerary(payload.itinerary)
    return ParseResponse(
        days=parsed.days,
        best_time_to_visit=parsed.best_time_to_visit,
        raw_text=payload.itinerary,
    )


@router.post("/share-link", response_model=ShareLinkCreateResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.rate_limit(settings.RATE_LIMIT_SHARE))
async def create_share_link(request: Request, payload: ShareLinkCreate):
    """Create a tokenized public share link for an itinerary."""
    now = datetime.now(timezone.utc)
    _prune_expired_links(now)
    token = uuid4().hex
    expires_at = now + timedelta(days=settings.SHARE_LINK_TTL_DAYS)
    _SHARE_LINKS[token] = {
        "itinerary": payload.itinerary,
        "destination": payload.destination,
        "expires_at": expires_at,
    }
    url = str(request.url_for("read_shared_itinerary", token=token))
    destination = ", ".join(payload.destination)
    message = payload.message or share.share_message(destination)

    logger.info("share_link_created", destination=destination, expires_at=expires_at.isoformat())
    return ShareLinkCreateResponse(
        token=token,
        url=url,
        expires_at=expires_at,
        message=message,
        whatsapp_url=share.whatsapp_url(destination, url, message),
        mailto_url=share.mailto_url(destination, url, payload.recipient or "", message),
    )


@router.get("/shared/{token}", response_model=SharedItineraryRead)
@limiter.limit(settings.rate_limit(settings.RATE_LIMIT_READ))
async def read_shared_itinerary(request: Request, token: str):
    """Public endpoint to read an itinerary shared via token."""
    link = _SHARE_LINKS.get(token)
    if not link:
        raise HTTPException(status_code=404, detail="Invalid or expired share link")
    if datetime.now(timezone.utc) > link["expires_at"]:
        _SHARE_LINKS.pop(token, None)
        raise HTTPException(status_code=410, detail="Share link has expired")

    return SharedItineraryRead(
        itinerary=link["itinerary"],
        destination=link["destination"],
        parsed=parse_itinerary(link["itinerary"]),
        expires_at=link["expires_at"],
    )


@router.post("/export", response_class=PlainTextResponse)
@limiter.limit(settings.rate_limit(settings.RATE_LIMIT_READ))
async def export_itinerary(request: Request, payload: ExportRequest):
    """Download the itinerary as a plain-text file"""
    filename = export_filename(payload.destination)
    body = render_plain_text(payload.itinerary, payload.destination, include_tips=payload.include_tips)
    return PlainTextResponse(
        body,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
