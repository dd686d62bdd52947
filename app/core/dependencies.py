"""
FastAPI dependencies - explicit construction of the translation service
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.services.record_transformer import RecordTransformer
from app.services.translation_service import TranslationService
from app.stores.translation_store import SQLTranslationStore


def get_translation_service(db: Session = Depends(get_db)) -> TranslationService:
    """One service per request, bound to the request's session."""
    return TranslationService(
        SQLTranslationStore(db),
        RecordTransformer(),
        seed_total=settings.SEED_TOTAL,
        seed_batch_size=settings.SEED_BATCH_SIZE,
    )
