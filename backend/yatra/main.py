import re
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import structlog
from prometheus_fastapi_instrumentator import Instrumentator

from yatra.api import itinerary
from yatra.core.settings import Settings
from yatra.middleware.logging import RequestLoggingMiddleware

VERSION = "1.0.0"

settings = Settings()

_KEY_PARAM_RE = re.compile(r'([?&]key=)[^&\s]+')
_GOOGLE_KEY_RE = re.compile(r'(AIza[0-9A-Za-z\-_]{35})')

# Redaction processor to scrub API keys from any string values in the event dict
def redact_api_keys(logger, method_name, event_dict):
    def scrub(v):
        if isinstance(v, str):
            # the Gemini key travels as a ?key= query parameter
            v = _KEY_PARAM_RE.sub(r'\1REDACTED', v)
            v = _GOOGLE_KEY_RE.sub('REDACTED', v)
            return v
        if isinstance(v, list):
            return [scrub(x) for x in v]
        if isinstance(v, dict):
            return {k: scrub(vv) for k, vv in v.items()}
        return v

    for k, v in list(event_dict.items()):
        event_dict[k] = scrub(v)
    return event_dict

# Configure structured logging with JSON output
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_api_keys,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

_handlers = [logging.StreamHandler()]
if settings.LOG_FILE:
    _handlers.append(logging.FileHandler(settings.LOG_FILE))

# Configure standard library logging; structlog handles formatting
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(message)s',
    handlers=_handlers
)

logger = structlog.get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "application_starting",
        ai_configured=bool(settings.GOOGLE_CLOUD_API_KEY),
        model=settings.GEMINI_MODEL,
    )
    if not settings.GOOGLE_CLOUD_API_KEY:
        logger.warning("ai_key_missing", detail="every request will get the sample itinerary")
    yield
    logger.info("application_stopped")

app = FastAPI(
    title="YatraAI API",
    description="AI-powered India travel itinerary generation service",
    version=VERSION,
    lifespan=lifespan
)

# Rate limiter shared with the itinerary routes
app.state.limiter = itinerary.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Instrumentator().instrument(app).expose(app, endpoint="/metrics")

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
        exc_info=True
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

# Health check endpoint
@app.get("/")
def health_check():
    return {"status": "API active", "version": VERSION}

@app.get("/health")
async def health_check_detailed():
    """Detailed health check endpoint"""
    ai_status = "configured" if Settings().GOOGLE_CLOUD_API_KEY else "fallback_only"
    return {
        "status": "healthy",
        "version": VERSION,
        "components": {
            "ai_service": ai_status,
            "fallback_generator": "healthy",
            "api": "healthy"
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

prefix = "/api/v1"

app.include_router(itinerary.router, prefix=prefix, tags=["itineraries"])
