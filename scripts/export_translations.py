"""
Script to export all translations to a CSV or JSON file
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

from app.core.database import SessionLocal
from app.core.logging_config import setup_logging
from app.services import export
from app.services.translation_service import TranslationService
from app.stores.translation_store import SQLTranslationStore

logger = logging.getLogger("export_translations")

FORMATS = {
    "csv": export.to_csv,
    "json": export.to_json,
}


def export_translations(output: Path, fmt: str) -> int:
    """
    Write every translation to `output`.
    
    Returns:
        Number of exported translations
    """
    db = SessionLocal()
    try:
        views = TranslationService(SQLTranslationStore(db)).get_all()
    finally:
        db.close()
    
    output.write_text(FORMATS[fmt](views), encoding="utf-8")
    return len(views)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export translations")
    parser.add_argument("--format", choices=sorted(FORMATS), default="csv")
    parser.add_argument("--output", help="Target file (default: translations.<format>)")
    args = parser.parse_args()
    
    setup_logging()
    output = Path(args.output or f"translations.{args.format}")
    count = export_translations(output, args.format)
    logger.info(f"Exported {count} translations to {output}")
