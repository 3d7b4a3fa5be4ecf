"""
Seed the database with two demo authors and their posts.
Safe to run repeatedly: authors are matched by id and posts by
(title, author), so nothing is inserted twice.
Run this as: python seed_db.py
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.init_db import create_all_tables
from app.db.session import Database
from app.modules.authors.models.author import Author
from app.modules.posts.models.post import Post

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-seed")

DEMO_AUTHORS = [
    {"id": "author-1", "name": "Author 1", "avatar_url": "https://example.com/avatar1.jpg"},
    {"id": "author-2", "name": "Author 2", "avatar_url": "https://example.com/avatar2.jpg"},
]

DEMO_POSTS = [
    {
        "title": "10 Essential Tips for Healthy Living",
        "author_id": "author-1",
        "category": "技術ブログ",
        "content": "Content of the post",
        "cover_url": "https://example.com/cover1.jpg",
        "meta_title": "Meta Title 1",
        "total_views": 1000,
        "total_shares": 100,
        "description": "Description of post 1",
        "total_comments": 10,
        "total_favorites": 50,
    },
    {
        "title": "5 Ways to Stay Active",
        "author_id": "author-2",
        "category": "技術書",
        "content": "Content of the post",
        "cover_url": "https://example.com/cover2.jpg",
        "meta_title": "Meta Title 2",
        "total_views": 1500,
        "total_shares": 150,
        "description": "Description of post 2",
        "total_comments": 15,
        "total_favorites": 75,
    },
]

def seed(db: Session) -> int:
    """Insert the demo rows that are missing and return how many were added."""
    added = 0
    for data in DEMO_AUTHORS:
        if db.get(Author, data["id"]) is None:
            db.add(Author(**data))
            added += 1

    for data in DEMO_POSTS:
        exists = (
            db.query(Post.id)
            .filter(Post.title == data["title"], Post.author_id == data["author_id"])
            .first()
        )
        if exists is None:
            db.add(Post(**data))
            added += 1

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return added

def main() -> int:
    database = Database(settings.database_url, echo=settings.SQL_ECHO)
    try:
        create_all_tables(database)
        with database.session() as db:
            added = seed(db)
        logger.info(f"Seeding finished, {added} rows added")
        return 0
    except SQLAlchemyError as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        database.dispose()

if __name__ == "__main__":
    sys.exit(main())
