from typing import Any, Union
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("app")

# Base class for all SQLAlchemy models
Base = declarative_base()


class Database:
    """
    Owns the engine (and its connection pool) for the lifetime of the process.

    One instance is built at startup and attached to the FastAPI app; request
    handlers receive sessions from it through the get_db dependency.
    """

    def __init__(self, url: Union[str, URL], echo: bool = False, **engine_kwargs: Any) -> None:
        if not url:
            logger.error("Database URL is not set or empty!")
            raise ValueError("A database URL is required")

        engine_kwargs.setdefault("pool_pre_ping", True)  # Check connection before using from pool
        engine_kwargs.setdefault("pool_recycle", 3600)   # Recycle connections after 1 hour

        try:
            self.engine = create_engine(url, echo=echo, **engine_kwargs)
            logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise

        # Create session factory for database interactions
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
