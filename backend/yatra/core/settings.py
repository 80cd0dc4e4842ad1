from pathlib import Path
from typing import Union
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Google Generative Language API
    GOOGLE_CLOUD_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-1.5-flash-latest"
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT_SECONDS: float = 30.0

    # Generation config sent with every prompt
    GEMINI_TEMPERATURE: float = 0.7
    GEMINI_TOP_K: int = 40
    GEMINI_TOP_P: float = 0.95
    GEMINI_MAX_OUTPUT_TOKENS: int = 2048

    # Rate Limiting
    ENABLE_RATE_LIMITING: bool = True
    RATE_LIMIT_GENERATE: str = "5/minute"
    RATE_LIMIT_PARSE: str = "60/minute"
    RATE_LIMIT_SHARE: str = "5/minute"
    RATE_LIMIT_READ: str = "120/minute"

    # Application Settings
    SHARE_LINK_TTL_DAYS: int = 7

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty disables the file handler

    # CORS
    ALLOWED_ORIGINS: Union[list, str] = ["http://localhost:3000", "http://localhost:3001"]

    @field_validator('ALLOWED_ORIGINS', mode='before')
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse ALLOWED_ORIGINS from comma-separated string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    def rate_limit(self, limit: str) -> str:
        """Return the configured limit, or a permissive one when limiting is off"""
        return limit if self.ENABLE_RATE_LIMITING else "1000/minute"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parents[3] / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )
