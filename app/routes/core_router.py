"""
Core / utility endpoints that live outside any domain-specific router.

Routes exposed:
    GET  /              : welcome message
    GET  /health        : liveness check
    POST /create-tables : create all tables via SQLAlchemy models
"""

from fastapi import APIRouter, HTTPException, status

from app.config import settings
from app.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Core"])


@router.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@router.get("/health")
async def health_check():
    return {"status": "ok", "message": "I Am Alive!!"}


@router.post("/create-tables")
async def create_tables_endpoint():
    """Create tables using SQLAlchemy models"""
    try:
        from app.database.create_tables import create_tables

        create_tables()
        return {"message": "Table creation process completed"}
    except Exception as e:
        logger.exception(f"[CreateTables] Failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create tables: {str(e)}"
        )
