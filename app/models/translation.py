"""
Translation record - the stored form of a translation entry
"""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship

from app.core.database import Base


class TranslationTag(Base):
    """One tag of one translation (composite key keeps set semantics)"""
    
    __tablename__ = "translation_tags"
    
    translation_id = Column(
        String(36),
        ForeignKey("translations.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag = Column(String, primary_key=True, index=True)  # unbounded VARCHAR
    
    def __init__(self, tag: str):
        self.tag = tag
    
    def __repr__(self):
        return f"<TranslationTag(tag={self.tag})>"


class TranslationRecord(Base):
    """
    Stored translation entry.
    
    `id` stays None until the store saves the record for the first time.
    `tags` behaves as a plain set of strings; assigning any iterable
    replaces the whole set.
    """
    
    __tablename__ = "translations"
    
    id = Column(String(36), primary_key=True)
    key = Column(String(255), nullable=False, index=True)  # greeting.hello, button.start, etc.
    content = Column(Text, nullable=False)
    locale = Column(String, nullable=False, index=True)  # en, fr, pt-BR (unbounded)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
    
    tag_links = relationship(
        TranslationTag,
        collection_class=set,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    tags = association_proxy("tag_links", "tag")
    
    def __repr__(self):
        return f"<TranslationRecord(id={self.id}, key={self.key}, locale={self.locale})>"
