"""
Translation Store - persistence abstraction over the document/row storage
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreError
from app.models.translation import TranslationRecord, TranslationTag

logger = logging.getLogger(__name__)


class TranslationStore(ABC):
    """
    Storage contract required by TranslationService and BulkSeeder.
    
    Any engine offering equality, case-insensitive substring and
    set-membership queries over indexed string fields can implement it.
    Each save is atomic for one record; nothing spans several records
    except save_batch.
    """
    
    @abstractmethod
    def save(self, record: TranslationRecord) -> TranslationRecord:
        """
        Insert when `record.id` is unset (assigning a new unique id),
        otherwise replace the stored record with that id in full.
        """
    
    @abstractmethod
    def save_batch(self, records: Sequence[TranslationRecord]) -> None:
        """Persist new records in one bulk operation: all of them or none."""
    
    @abstractmethod
    def find_by_id(self, record_id: str) -> Optional[TranslationRecord]:
        pass
    
    @abstractmethod
    def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[TranslationRecord]:
        """All records in store-native order; `limit=None` means no limit."""
    
    @abstractmethod
    def find_by_key_substring(self, substring: str) -> List[TranslationRecord]:
        """Case-insensitive containment on `key`."""
    
    @abstractmethod
    def find_by_content_substring(self, substring: str) -> List[TranslationRecord]:
        """Case-insensitive containment on `content`."""
    
    @abstractmethod
    def find_by_tags_in(self, tags: Iterable[str]) -> List[TranslationRecord]:
        """Records sharing at least one tag with `tags` (OR semantics)."""
    
    @abstractmethod
    def find_by_locale(self, locale: str) -> List[TranslationRecord]:
        """Exact, case-sensitive equality on `locale`."""


def _like_pattern(substring: str) -> str:
    """Wrap a literal substring in % after escaping LIKE wildcards."""
    escaped = (
        substring.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


class SQLTranslationStore(TranslationStore):
    """
    SQLAlchemy implementation.
    
    Works on the request-scoped session it is given; every write commits
    immediately and rolls the session back before raising StoreError.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StoreError(f"Failed to {action}: {e}") from e
    
    def _query(self, statement) -> List[TranslationRecord]:
        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Translation query failed: {e}")
            raise StoreError(f"Translation query failed: {e}") from e
    
    def save(self, record: TranslationRecord) -> TranslationRecord:
        if record.id is None:
            record.id = str(uuid.uuid4())
            self.db.add(record)
        else:
            record = self.db.merge(record)
        self._commit(f"save translation {record.id}")
        self.db.refresh(record)
        return record
    
    def save_batch(self, records: Sequence[TranslationRecord]) -> None:
        for record in records:
            if record.id is None:
                record.id = str(uuid.uuid4())
        self.db.add_all(records)
        self._commit(f"save batch of {len(records)} translations")
    
    def find_by_id(self, record_id: str) -> Optional[TranslationRecord]:
        try:
            return self.db.get(TranslationRecord, record_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to load translation {record_id}: {e}") from e
    
    def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[TranslationRecord]:
        statement = select(TranslationRecord)
        if skip:
            statement = statement.offset(skip)
        if limit is not None:
            statement = statement.limit(limit)
        return self._query(statement)
    
    def find_by_key_substring(self, substring: str) -> List[TranslationRecord]:
        return self._query(
            select(TranslationRecord).where(
                TranslationRecord.key.ilike(_like_pattern(substring), escape="\\")
            )
        )
    
    def find_by_content_substring(self, substring: str) -> List[TranslationRecord]:
        return self._query(
            select(TranslationRecord).where(
                TranslationRecord.content.ilike(_like_pattern(substring), escape="\\")
            )
        )
    
    def find_by_tags_in(self, tags: Iterable[str]) -> List[TranslationRecord]:
        return self._query(
            select(TranslationRecord).where(
                TranslationRecord.tag_links.any(TranslationTag.tag.in_(list(tags)))
            )
        )
    
    def find_by_locale(self, locale: str) -> List[TranslationRecord]:
        return self._query(
            select(TranslationRecord).where(TranslationRecord.locale == locale)
        )
