"""
Exception types shared across the itinerary pipeline.
"""
from typing import Optional


class YatraError(Exception):
    """Base class for application errors"""


class AIServiceError(YatraError):
    """The generative-language API could not produce an itinerary"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AIServiceNotConfigured(AIServiceError):
    """No API key is configured, so the remote service is never called"""
