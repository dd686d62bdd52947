"""
Pydantic schemas for the Translation API
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class TranslationView(BaseModel):
    """
    Wire representation of a translation entry.
    
    `id`, `createdAt` and `updatedAt` are accepted on input but ignored;
    the service always derives them. Field checks (non-blank, key length)
    are done by TranslationService so that direct callers get the same
    ValidationError as HTTP clients.
    """
    id: Optional[str] = None
    key: Optional[str] = None
    content: Optional[str] = None
    locale: Optional[str] = None
    tags: Optional[List[str]] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    
    @field_validator("tags")
    @classmethod
    def drop_duplicate_tags(cls, tags: Optional[List[str]]) -> Optional[List[str]]:
        if tags is None:
            return None
        return list(dict.fromkeys(tags))
    
    class Config:
        populate_by_name = True
        from_attributes = True
        json_schema_extra = {
            "example": {
                "key": "greeting.hello",
                "content": "Hello",
                "locale": "en",
                "tags": ["welcome", "homepage"],
            }
        }
