"""
Business logic services - translation lifecycle, search, seeding, export
"""
from app.services.record_transformer import RecordTransformer
from app.services.translation_service import TranslationService
from app.services.seeder import BulkSeeder

__all__ = [
    "RecordTransformer",
    "TranslationService",
    "BulkSeeder",
]
