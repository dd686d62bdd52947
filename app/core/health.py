"""
Health check utilities
"""
from typing import Dict, Any
from sqlalchemy import text

from app.core.database import SessionLocal
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


async def check_database() -> Dict[str, Any]:
    """
    Check database connectivity.
    
    Returns:
        Dictionary with status and details
    """
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "message": "Database connection successful"
            }
        finally:
            db.close()
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": f"Database connection failed: {str(e)}"
        }


async def get_health_status() -> Dict[str, Any]:
    """
    Get overall health status.
    
    Returns:
        Dictionary with health status of all components
    """
    db_status = await check_database()
    
    return {
        "status": db_status["status"],
        "version": VERSION,
        "environment": settings.ENVIRONMENT,
        "components": {
            "database": db_status,
        }
    }
