"""
Persistence layer for translation records
"""
from app.stores.translation_store import TranslationStore, SQLTranslationStore

__all__ = [
    "TranslationStore",
    "SQLTranslationStore",
]
