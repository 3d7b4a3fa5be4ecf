from sqlalchemy import Boolean, Column, String, Text

from app.db.session import Base

class User(Base):
    __tablename__ = "users"

    # Client-supplied identity (e.g. the auth provider's uid)
    id = Column(String(191), primary_key=True, index=True)
    display_name = Column(Text, nullable=False, default="")
    photo_url = Column(Text, nullable=False, default="")
    class_ = Column("class", Text, nullable=False, default="")
    faculty = Column(Text, nullable=False, default="")
    department = Column(Text, nullable=False, default="")
    grade = Column(Text, nullable=False, default="")
    can = Column(Text, nullable=False, default="")
    did = Column(Text, nullable=False, default="")
    will = Column(Text, nullable=False, default="")
    is_public = Column(Boolean, nullable=False, default=False)
