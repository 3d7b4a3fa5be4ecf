from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as default_settings
from app.core.errors import http_exception_handler, request_validation_exception_handler
from app.db.init_db import create_all_tables
from app.db.session import Database
from app.middleware.request_logging import RequestLoggingMiddleware
from app.modules.user_management.api.router import router as user_router
from app.modules.posts.api.router import router as posts_router

logger = logging.getLogger("app")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around a single Database instance.

    Tables are created on startup; if that fails the exception propagates
    and the server does not come up.
    """
    settings = settings or default_settings

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if database is None:
        database = Database(settings.database_url, echo=settings.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
        create_all_tables(database)
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(
        lifespan=lifespan,
        title=settings.PROJECT_NAME,
        exception_handlers={
            RequestValidationError: request_validation_exception_handler,
            StarletteHTTPException: http_exception_handler,
        },
        debug=settings.DEBUG,
        description="Blog posts and user profiles",
        version=settings.VERSION,
    )
    app.state.database = database

    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Hello, World!"

    # Register API routers
    app.include_router(user_router, tags=["users"])
    app.include_router(posts_router, tags=["posts"])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
