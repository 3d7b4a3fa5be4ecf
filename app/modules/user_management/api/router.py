from typing import Any
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import RECORD_NOT_FOUND, storage_error
from app.core.schemas import Message
from app.deps import get_db
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import (
    User as UserSchema, UserCreate, UserUpdate, UserData, UserEnvelope,
)
from app.modules.user_management.services.user import (
    get_user, create_user, update_user, delete_user,
)


router = APIRouter()
logger = logging.getLogger("app")

def _lookup_user(db: Session, user_id: str) -> User:
    """
    Fetch a user for reading or fail with 500.
    Existing clients expect a missing user to surface as a server error
    carrying "record not found", not as a 404.
    """
    try:
        user = get_user(db, user_id=user_id)
    except SQLAlchemyError as e:
        raise storage_error(e)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=RECORD_NOT_FOUND,
        )
    return user

def _convert_user_to_schema(user: User) -> UserSchema:
    """Convert User model to UserSchema. """
    return UserSchema.model_validate(user)

@router.post("/create-user", response_model=UserData)
def create_new_user(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
) -> Any:
    """Create a user with a client-supplied id"""
    try:
        user = create_user(db, user_in)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"data": _convert_user_to_schema(user)}

@router.put("/update-user/{user_id}", response_model=UserData)
def update_user_by_id(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    user_in: UserUpdate,
) -> Any:
    """
    Update the fields present in the body.
    An unknown id updates nothing and still succeeds; the decoded body is
    echoed back in that case.
    """
    try:
        update_user(db, user_id, user_in)
        user = get_user(db, user_id=user_id)
    except SQLAlchemyError as e:
        raise storage_error(e)
    if not user:
        return {"data": UserSchema(id=user_id, **user_in.model_dump(exclude_none=True))}
    return {"data": _convert_user_to_schema(user)}

@router.get("/user/{user_id}", response_model=UserEnvelope)
def read_user_by_id(user_id: str, db: Session = Depends(get_db)) -> Any:
    """Get a specific user by id"""
    logger.info(f"Requested id: {user_id}")
    user = _lookup_user(db, user_id)
    return {"user": _convert_user_to_schema(user)}

@router.delete("/delete-user/{user_id}", response_model=Message)
def delete_user_by_id(user_id: str, db: Session = Depends(get_db)) -> Any:
    """Permanently delete a user"""
    try:
        user = get_user(db, user_id=user_id)
    except SQLAlchemyError as e:
        raise storage_error(e)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    try:
        delete_user(db, user)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"message": "User deleted successfully!"}
