from typing import Generator

from fastapi import Request

from app.db.session import Database


def get_database(request: Request) -> Database:
    """
    Dependency returning the Database instance the app was built with
    """
    return request.app.state.database


def get_db(request: Request) -> Generator:
    """
    Dependency for getting DB session
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()


async def get_raw_body(request: Request) -> bytes:
    """
    Dependency returning the undecoded request body, for handlers that must
    look a record up before they validate what was sent
    """
    return await request.body()
