"""
Script to seed the translations table with the synthetic dataset
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load .env BEFORE importing anything from app
from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

import argparse
import logging

from app.core.config import settings
from app.core.database import SessionLocal, engine, Base
from app.core.logging_config import setup_logging
from app.models import translation, user  # noqa: F401
from app.services.translation_service import TranslationService
from app.stores.translation_store import SQLTranslationStore

logger = logging.getLogger("seed_translations")


def seed(total: int, batch_size: int) -> int:
    """Run the bulk seeder in its own session"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        service = TranslationService(
            SQLTranslationStore(db),
            seed_total=total,
            seed_batch_size=batch_size,
        )
        return service.create_seed_translations()
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed synthetic translations")
    parser.add_argument("--total", type=int, default=settings.SEED_TOTAL,
                        help="Number of records to insert")
    parser.add_argument("--batch-size", type=int, default=settings.SEED_BATCH_SIZE,
                        help="Records per bulk insert")
    args = parser.parse_args()
    
    setup_logging()
    inserted = seed(args.total, args.batch_size)
    logger.info(f"Done: {inserted} translations inserted")
