from typing import List, Optional
import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, Query
from sqlalchemy.sql import func

from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

def _visible_posts(db: Session) -> Query:
    """Posts that have not been soft deleted"""
    return db.query(Post).filter(Post.deleted_at.is_(None))

def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

def get_post(db: Session, post_id: int) -> Optional[Post]:
    """Get post by ID"""
    logger.info(f"Getting post with ID: {post_id}")
    return _visible_posts(db).filter(Post.id == post_id).first()

def get_posts(db: Session) -> List[Post]:
    """Get every visible post"""
    logger.info("Getting all posts")
    return _visible_posts(db).all()

def search_posts(db: Session, query: str) -> List[Post]:
    """Substring match over title, content and description"""
    logger.info(f"Searching posts for: {query!r}")
    pattern = f"%{query}%"
    return (
        _visible_posts(db)
        .filter(
            or_(
                Post.title.like(pattern),
                Post.content.like(pattern),
                Post.description.like(pattern),
            )
        )
        .all()
    )

def create_post(db: Session, post_in: PostCreate) -> Post:
    """Create new post"""
    logger.info(f"Creating post for author ID: {post_in.author_id!r}")
    post = Post(**post_in.model_dump())
    db.add(post)
    _commit(db)
    db.refresh(post)
    return post

def create_posts(db: Session, posts_in: List[PostCreate]) -> List[Post]:
    """Create several posts in a single commit"""
    logger.info(f"Creating {len(posts_in)} posts")
    posts = [Post(**post_in.model_dump()) for post_in in posts_in]
    db.add_all(posts)
    _commit(db)
    for post in posts:
        db.refresh(post)
    return posts

def update_post(db: Session, post: Post, post_in: PostUpdate) -> Post:
    """Update post"""
    logger.info(f"Updating post with ID: {post.id}")
    update_data = post_in.model_dump(exclude_unset=True, exclude_none=True)

    for field, value in update_data.items():
        setattr(post, field, value)

    _commit(db)
    db.refresh(post)
    return post

def delete_post(db: Session, post: Post) -> Post:
    """
    Soft delete a post.
    The row stays in the table with deleted_at set and drops out of every
    lookup, listing and search.
    """
    logger.info(f"Soft deleting post with ID: {post.id}")
    post.deleted_at = func.now()
    _commit(db)
    return post
