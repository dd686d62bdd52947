"""
Translation management endpoints.

All routes require a bearer token (see app.core.security.get_current_user).
The handlers only translate HTTP into TranslationService calls; errors
raised by the service are rendered by the handlers in app.main.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.core.dependencies import get_translation_service
from app.core.security import get_current_user
from app.schemas.translation import TranslationView
from app.services import export
from app.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


def _split_tags(raw: List[str]) -> List[str]:
    """Accept both ?tags=a&tags=b and ?tags=a,b"""
    tags = []
    for value in raw:
        tags.extend(part.strip() for part in value.split(",") if part.strip())
    return tags


@router.post("/seed")
async def seed_translations(service: TranslationService = Depends(get_translation_service)):
    """Insert the synthetic test dataset (100,000 records by default)."""
    inserted = service.create_seed_translations()
    return {"message": "Successfully seeded translations.", "inserted": inserted}


@router.post("", response_model=TranslationView)
async def create_translation(
    translation: TranslationView,
    service: TranslationService = Depends(get_translation_service)
):
    """Create a translation entry with key, locale, content and optional tags."""
    return service.create(translation)


@router.put("/{translation_id}", response_model=TranslationView)
async def update_translation(
    translation_id: str,
    translation: TranslationView,
    service: TranslationService = Depends(get_translation_service)
):
    """Update an existing translation; 404 if the id is unknown."""
    return service.update(translation_id, translation)


@router.get("", response_model=List[TranslationView])
async def list_translations(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    service: TranslationService = Depends(get_translation_service)
):
    """All translations; pass skip/limit to page through them."""
    return service.get_all(skip=skip, limit=limit)


@router.get("/search/key", response_model=List[TranslationView])
async def search_by_key(
    key: str = Query(..., description="Substring of the key (case-insensitive)"),
    service: TranslationService = Depends(get_translation_service)
):
    return service.search_by_key(key)


@router.get("/search/content", response_model=List[TranslationView])
async def search_by_content(
    content: str = Query(..., description="Substring of the content (case-insensitive)"),
    service: TranslationService = Depends(get_translation_service)
):
    return service.search_by_content(content)


@router.get("/search/tags", response_model=List[TranslationView])
async def search_by_tags(
    tags: List[str] = Query(..., description="Tags to match (any of them), comma-separated"),
    service: TranslationService = Depends(get_translation_service)
):
    return service.search_by_tags(_split_tags(tags))


@router.get("/locale/{locale}", response_model=List[TranslationView])
async def get_by_locale(
    locale: str,
    service: TranslationService = Depends(get_translation_service)
):
    return service.get_by_locale(locale)


@router.get("/export/csv")
async def export_csv(service: TranslationService = Depends(get_translation_service)):
    """Download every translation as CSV."""
    body = export.to_csv(service.get_all())
    return Response(
        content=body.encode("utf-8"),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=translations.csv"},
    )


@router.get("/export/json")
async def export_json(service: TranslationService = Depends(get_translation_service)):
    """Download every translation as indented JSON."""
    body = export.to_json(service.get_all())
    return Response(
        content=body.encode("utf-8"),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=translations.json"},
    )


@router.get("/{translation_id}", response_model=TranslationView)
async def get_translation(
    translation_id: str,
    service: TranslationService = Depends(get_translation_service)
):
    translation = service.get_by_id(translation_id)
    if translation is None:
        raise HTTPException(status_code=404, detail="Translation not found")
    return translation
