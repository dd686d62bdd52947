"""
Tests for the batched synthetic-data seeder
"""
from typing import List, Optional, Sequence

import pytest

from app.core.exceptions import StoreError
from app.models.translation import TranslationRecord
from app.services import seeder
from app.services.seeder import BulkSeeder, build_seed_record
from app.stores.translation_store import TranslationStore


class RecordingStore(TranslationStore):
    """Keeps a summary of every flushed batch instead of persisting it"""
    
    def __init__(self, fail_on_batch: Optional[int] = None):
        self.batch_sizes: List[int] = []
        self.rows = []
        self.fail_on_batch = fail_on_batch
    
    def save_batch(self, records: Sequence[TranslationRecord]) -> None:
        if self.fail_on_batch is not None and len(self.batch_sizes) + 1 == self.fail_on_batch:
            raise StoreError("connection lost")
        self.batch_sizes.append(len(records))
        self.rows.extend((r.key, r.locale, set(r.tags)) for r in records)
    
    def save(self, record):
        raise NotImplementedError
    
    def find_by_id(self, record_id):
        raise NotImplementedError
    
    def find_all(self, skip=0, limit=None):
        raise NotImplementedError
    
    def find_by_key_substring(self, substring):
        raise NotImplementedError
    
    def find_by_content_substring(self, substring):
        raise NotImplementedError
    
    def find_by_tags_in(self, tags):
        raise NotImplementedError
    
    def find_by_locale(self, locale):
        raise NotImplementedError


def test_default_dataset_size():
    assert seeder.TOTAL == 100_000
    assert seeder.BATCH == 1000


def test_partial_final_batch():
    store = RecordingStore()
    
    inserted = BulkSeeder(store, total=2500, batch_size=1000).run()
    
    assert inserted == 2500
    assert store.batch_sizes == [1000, 1000, 500]


def test_no_empty_flush_when_total_divisible():
    store = RecordingStore()
    
    BulkSeeder(store, total=3000, batch_size=1000).run()
    
    assert store.batch_sizes == [1000, 1000, 1000]


def test_generated_records_follow_index_pattern():
    store = RecordingStore()
    
    BulkSeeder(store, total=40, batch_size=7).run()
    
    assert len(store.rows) == 40
    for i, (key, locale, tags) in enumerate(store.rows, start=1):
        assert key == f"key_{i}"
        assert locale == ("en" if i % 2 == 0 else "fr")
        assert tags == {f"tag{i % 10}", f"tag{i % 20}"}


def test_build_seed_record_collapses_equal_tags():
    assert set(build_seed_record(5, None).tags) == {"tag5"}
    assert set(build_seed_record(15, None).tags) == {"tag5", "tag15"}
    assert build_seed_record(15, None).content == "Sample content for translation 15"


def test_failure_keeps_flushed_prefix():
    store = RecordingStore(fail_on_batch=3)
    
    with pytest.raises(StoreError):
        BulkSeeder(store, total=50, batch_size=10).run()
    
    assert store.batch_sizes == [10, 10]


def test_rejects_non_positive_batch_size():
    with pytest.raises(ValueError):
        BulkSeeder(RecordingStore(), total=10, batch_size=0)


def test_seeds_into_database(store):
    inserted = BulkSeeder(store, total=45, batch_size=20).run()
    
    records = store.find_all()
    assert inserted == 45
    assert len(records) == 45
    assert len({record.id for record in records}) == 45
    assert all(record.created_at is not None for record in records)
    assert len(store.find_by_locale("en")) == 22
    assert len(store.find_by_tags_in(["tag3"])) == 5
