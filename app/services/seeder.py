"""
Bulk Seeder - synthetic dataset for test/staging environments

Generates TOTAL records one at a time and flushes them to the store in
batches of BATCH, so the working set never exceeds one batch. A failing
batch aborts the run; batches flushed before it stay persisted.
"""
from datetime import datetime
from typing import List
import logging

from app.core.monitoring import monitor_performance
from app.core.utils import utcnow
from app.models.translation import TranslationRecord
from app.stores.translation_store import TranslationStore

logger = logging.getLogger(__name__)

TOTAL = 100_000
BATCH = 1000
LOCALES = ("en", "fr")  # even index -> en, odd index -> fr


def build_seed_record(i: int, now: datetime) -> TranslationRecord:
    """Synthetic record number `i` (1-based)."""
    record = TranslationRecord(
        key=f"key_{i}",
        locale=LOCALES[0] if i % 2 == 0 else LOCALES[1],
        content=f"Sample content for translation {i}",
        created_at=now,
        updated_at=now,
    )
    # i % 10 == i % 20 for half of the indexes, leaving a single tag
    record.tags = {f"tag{i % 10}", f"tag{i % 20}"}
    return record


class BulkSeeder:
    """
    Batched writer for the synthetic dataset.
    
    Args:
        store: Target store (save_batch is the only method used)
        total: Number of records to generate
        batch_size: Records per save_batch call
    """
    
    def __init__(self, store: TranslationStore, total: int = TOTAL, batch_size: int = BATCH):
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self.store = store
        self.total = total
        self.batch_size = batch_size
    
    @monitor_performance
    def run(self) -> int:
        """
        Generate and persist every record.
        
        Returns:
            Number of records persisted
        """
        batch: List[TranslationRecord] = []
        
        for i in range(1, self.total + 1):
            now = utcnow()
            batch.append(build_seed_record(i, now))
            
            if len(batch) == self.batch_size:
                self.store.save_batch(batch)
                batch = []
                logger.info(f"Inserted {i} records...")
        
        if batch:
            self.store.save_batch(batch)
        
        logger.info(f"Finished inserting {self.total} records.")
        return self.total
