from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def create_user(db: Session, user_in: UserCreate) -> User:
    """Create new user. A duplicate id fails with an IntegrityError."""
    logger.info(f"Creating user with ID: {user_in.id}")
    user = User(**user_in.model_dump())
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    return user

def update_user(db: Session, user_id: str, user_in: UserUpdate) -> int:
    """
    Update user by ID and return the number of rows changed.
    An unknown id matches nothing and is not an error.
    """
    logger.info(f"Updating user with ID: {user_id}")
    update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        return 0

    values = {getattr(User, field): value for field, value in update_data.items()}
    try:
        updated = db.query(User).filter(User.id == user_id).update(values, synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    if not updated:
        logger.info(f"No user with ID {user_id} to update")
    return updated

def delete_user(db: Session, user: User) -> None:
    """Hard delete: the row is removed from the table"""
    logger.info(f"Deleting user with ID: {user.id}")
    db.delete(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
