"""
SQLAlchemy models
"""
from app.models.translation import TranslationRecord, TranslationTag
from app.models.user import User

__all__ = [
    "TranslationRecord",
    "TranslationTag",
    "User",
]

# Import Base for Alembic
from app.core.database import Base
