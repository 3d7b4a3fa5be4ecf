import logging

from sqlalchemy import inspect

from app.db.base import Base
from app.db.session import Database

logger = logging.getLogger(__name__)


def create_all_tables(database: Database) -> set:
    """
    Create the users, authors and posts tables if they are absent.

    Safe to call on every boot. Errors are logged and re-raised: the
    application must not start against a store it cannot create tables in.
    """
    try:
        inspector = inspect(database.engine)
        existing_tables = inspector.get_table_names()

        Base.metadata.create_all(bind=database.engine)

        new_tables = set(inspect(database.engine).get_table_names()) - set(existing_tables)
        if new_tables:
            logger.info(f"Created new tables: {new_tables}")
        else:
            logger.info("All tables already exist")

        return new_tables
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise
