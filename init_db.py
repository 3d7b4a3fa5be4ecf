"""
Database initialization script.
Creates the users, authors and posts tables if they do not exist yet.
Run this as: python init_db.py
"""

import logging
import sys

from app.core.config import settings
from app.db.init_db import create_all_tables
from app.db.session import Database

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

def init_db() -> bool:
    """Initialize the database by creating all tables."""
    database = Database(settings.database_url, echo=settings.SQL_ECHO)
    try:
        create_all_tables(database)
        return True
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        return False
    finally:
        database.dispose()

if __name__ == "__main__":
    logger.info("Starting database initialization")
    if init_db():
        logger.info("Database initialization completed successfully")
    else:
        logger.error("Database initialization failed")
        sys.exit(1)
