from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base
from app.modules.authors.models.author import Author

class Post(Base):
    __tablename__ = "posts"

    # SQLite only autoincrements INTEGER primary keys
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True, index=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
    # Soft delete marker; rows with a value are invisible to every query
    deleted_at = Column(DateTime, nullable=True, index=True)

    title = Column(Text, nullable=False, default="")
    # No ForeignKey: posts may point at authors that do not exist
    author_id = Column(String(191), nullable=False, default="")
    category = Column(Text, nullable=False, default="")
    technology = Column(Text, nullable=False, default="")
    curriculum = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    cover_url = Column(Text, nullable=False, default="")
    meta_title = Column(Text, nullable=False, default="")
    total_views = Column(BigInteger, nullable=False, default=0)
    total_shares = Column(BigInteger, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
    total_comments = Column(BigInteger, nullable=False, default=0)
    total_favorites = Column(BigInteger, nullable=False, default=0)

    author = relationship(
        Author,
        primaryjoin="foreign(Post.author_id) == Author.id",
        lazy="joined",
        viewonly=True,
        uselist=False,
    )
