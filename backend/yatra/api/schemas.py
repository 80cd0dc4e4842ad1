from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from yatra.core.models import ParsedItinerary

# Itinerary text can be long, but never unbounded
MAX_ITINERARY_LENGTH = 20000

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# ===== GENERATION SCHEMAS =====

class GenerateItineraryResponse(CamelModel):
    itinerary: str
    source: str = Field(..., description="ai, fallback or error")

# ===== PARSING SCHEMAS =====

class ItineraryTextRequest(CamelModel):
    itinerary: str = Field(..., max_length=MAX_ITINERARY_LENGTH, description="Formatted itinerary text")

class ParseResponse(ParsedItinerary):
    raw_text: str = Field(..., alias="rawText")

# ===== SHARE SCHEMAS =====

def _clean_destinations(v: List[str]) -> List[str]:
    cleaned = [d.strip() for d in v if d and d.strip()]
    if not cleaned:
        raise ValueError("At least one destination is required")
    return cleaned

class ShareLinkCreate(CamelModel):
    itinerary: str = Field(..., min_length=1, max_length=MAX_ITINERARY_LENGTH)
    destination: List[str] = Field(..., min_length=1)
    recipient: Optional[str] = Field(None, max_length=254, description="Email address for the mailto link")
    message: Optional[str] = Field(None, max_length=500)

    @field_validator('destination')
    @classmethod
    def validate_destination(cls, v):
        return _clean_destinations(v)

    @field_validator('itinerary')
    @classmethod
    def validate_itinerary(cls, v):
        if not v.strip():
            raise ValueError("Itinerary cannot be empty")
        return v

class ShareLinkCreateResponse(CamelModel):
    token: str
    url: str
    expires_at: datetime
    message: str
    whatsapp_url: str
    mailto_url: str

class SharedItineraryRead(CamelModel):
    itinerary: str
    destination: List[str]
    parsed: ParsedItinerary
    expires_at: datetime

# ===== EXPORT SCHEMAS =====

class ExportRequest(CamelModel):
    itinerary: str = Field(..., min_length=1, max_length=MAX_ITINERARY_LENGTH)
    destination: List[str] = Field(..., min_length=1)
    include_tips: bool = True

    @field_validator('destination')
    @classmethod
    def validate_destination(cls, v):
        return _clean_destinations(v)
