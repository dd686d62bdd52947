"""
Pydantic schemas (wire representations)
"""
from app.schemas.translation import TranslationView
from app.schemas.auth import UserCredentials, TokenResponse, MessageResponse

__all__ = [
    "TranslationView",
    "UserCredentials",
    "TokenResponse",
    "MessageResponse",
]
