from sqlalchemy import Column, String, Text

from app.db.session import Base

class Author(Base):
    __tablename__ = "authors"

    id = Column(String(191), primary_key=True, index=True)
    name = Column(Text, nullable=False, default="")
    avatar_url = Column(Text, nullable=False, default="")
