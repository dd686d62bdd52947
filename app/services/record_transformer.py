"""
Record Transformer - explicit field mapping between TranslationView
(wire) and TranslationRecord (stored)
"""
from app.models.translation import TranslationRecord
from app.schemas.translation import TranslationView


class RecordTransformer:
    """
    Hand-written mapper between the two shapes.
    
    Only `key`, `content`, `locale` and `tags` flow from a view into a
    record. `id`, `created_at` and `updated_at` belong to the store and the
    service, so values supplied by callers are never copied.
    
    No validation happens here; callers must reject blank fields first.
    """
    
    def to_record(self, view: TranslationView) -> TranslationRecord:
        """Build a new, unsaved record (id and timestamps left unset)."""
        record = TranslationRecord(
            key=view.key,
            content=view.content,
            locale=view.locale,
        )
        record.tags = set(view.tags or ())
        return record
    
    def apply_onto_record(self, view: TranslationView, record: TranslationRecord) -> TranslationRecord:
        """
        Overwrite the caller-owned fields of an existing record in place.
        
        `id` and `created_at` are untouched; `updated_at` is the service's job.
        """
        record.key = view.key
        record.content = view.content
        record.locale = view.locale
        record.tags = set(view.tags or ())
        return record
    
    def to_view(self, record: TranslationRecord) -> TranslationView:
        """Full copy including id and both timestamps (tags sorted)."""
        return TranslationView(
            id=record.id,
            key=record.key,
            content=record.content,
            locale=record.locale,
            tags=sorted(record.tags),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
    
    def to_views(self, records) -> list:
        return [self.to_view(record) for record in records]
