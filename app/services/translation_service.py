"""
Translation Service - create/update/search/seed orchestration

Owns timestamp assignment, field validation and not-found handling.
Holds no state between calls besides its store and transformer.
"""
from typing import Dict, Iterable, List, Optional
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.utils import utcnow
from app.schemas.translation import TranslationView
from app.services.record_transformer import RecordTransformer
from app.services.seeder import BulkSeeder, TOTAL, BATCH
from app.stores.translation_store import TranslationStore

logger = logging.getLogger(__name__)

MAX_KEY_LENGTH = 255
REQUIRED_FIELDS = ("key", "content", "locale")


class TranslationService:
    """
    Translation management operations.
    
    The store and transformer are passed in explicitly; build one service
    per request/session.
    
    Example:
        service = TranslationService(SQLTranslationStore(db), RecordTransformer())
        view = service.create(TranslationView(key="greeting.hello", content="Hello", locale="en"))
    """
    
    def __init__(
        self,
        store: TranslationStore,
        transformer: Optional[RecordTransformer] = None,
        seed_total: int = TOTAL,
        seed_batch_size: int = BATCH
    ):
        self.store = store
        self.transformer = transformer or RecordTransformer()
        self.seed_total = seed_total
        self.seed_batch_size = seed_batch_size
    
    def _validate(self, view: TranslationView) -> None:
        """
        Reject blank required fields and over-long keys.
        
        Raises:
            ValidationError: With one message per offending field
        """
        errors: Dict[str, str] = {}
        for field in REQUIRED_FIELDS:
            value = getattr(view, field)
            if value is None or not value.strip():
                errors[field] = "must not be blank"
        if view.key is not None and len(view.key) > MAX_KEY_LENGTH:
            errors["key"] = f"size must be between 0 and {MAX_KEY_LENGTH}"
        if errors:
            raise ValidationError(errors)
    
    def create(self, view: TranslationView) -> TranslationView:
        """
        Create a translation.
        
        Args:
            view: Incoming translation (id/timestamps ignored)
        
        Returns:
            Stored translation with id and timestamps populated
        """
        self._validate(view)
        
        record = self.transformer.to_record(view)
        now = utcnow()
        record.created_at = now
        record.updated_at = now
        
        saved = self.store.save(record)
        logger.info(f"Created translation {saved.id} ({saved.key}/{saved.locale})")
        return self.transformer.to_view(saved)
    
    def update(self, record_id: str, view: TranslationView) -> TranslationView:
        """
        Overwrite key/content/locale/tags of an existing translation.
        
        Read-then-write with no concurrency control: two concurrent updates
        of the same id both succeed and the later save wins.
        
        Args:
            record_id: Translation id
            view: New field values (id/timestamps ignored)
        
        Returns:
            Updated translation
        
        Raises:
            NotFoundError: If no translation has this id (nothing is written)
        """
        self._validate(view)
        
        existing = self.store.find_by_id(record_id)
        if existing is None:
            raise NotFoundError(f"Translation not found with id: {record_id}")
        
        self.transformer.apply_onto_record(view, existing)
        now = utcnow()
        if existing.updated_at is not None and now < existing.updated_at:
            now = existing.updated_at
        existing.updated_at = now
        
        saved = self.store.save(existing)
        logger.info(f"Updated translation {saved.id}")
        return self.transformer.to_view(saved)
    
    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[TranslationView]:
        return self.transformer.to_views(self.store.find_all(skip=skip, limit=limit))
    
    def get_by_id(self, record_id: str) -> Optional[TranslationView]:
        """Translation by id, or None when it does not exist."""
        record = self.store.find_by_id(record_id)
        if record is None:
            return None
        return self.transformer.to_view(record)
    
    def get_by_locale(self, locale: str) -> List[TranslationView]:
        return self.transformer.to_views(self.store.find_by_locale(locale))
    
    def search_by_key(self, substring: str) -> List[TranslationView]:
        return self.transformer.to_views(self.store.find_by_key_substring(substring))
    
    def search_by_content(self, substring: str) -> List[TranslationView]:
        return self.transformer.to_views(self.store.find_by_content_substring(substring))
    
    def search_by_tags(self, tags: Iterable[str]) -> List[TranslationView]:
        return self.transformer.to_views(self.store.find_by_tags_in(set(tags)))
    
    def create_seed_translations(self) -> int:
        """
        Populate the store with the synthetic dataset.
        
        Returns:
            Number of records inserted
        """
        logger.info(
            f"Seeding {self.seed_total} translations in batches of {self.seed_batch_size}"
        )
        seeder = BulkSeeder(self.store, total=self.seed_total, batch_size=self.seed_batch_size)
        return seeder.run()
