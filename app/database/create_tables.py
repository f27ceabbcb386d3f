#!/usr/bin/env python3
"""
Create all Myymotto tables from the SQLAlchemy models.

Alembic is the source of truth for deployed databases; this is for local
setups and the /create-tables endpoint.
"""

import sys
import os

# Add the project root to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import app.models  # noqa: F401  registers every model on Base.metadata
from app.database.session import engine, Base
from app.core.logging_config import get_logger

logger = get_logger(__name__)


def create_tables(bind=None):
    """Initialize the database and create all tables."""
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database initialization completed")
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise


if __name__ == "__main__":
    create_tables()
