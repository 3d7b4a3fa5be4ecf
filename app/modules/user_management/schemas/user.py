from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# JSON keys follow the field names the web/mobile clients already send

class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    display_name: str = Field("", alias="displayName")
    photo_url: str = Field("", alias="photoURL")
    class_: str = Field("", alias="class")
    faculty: str = ""
    department: str = ""
    grade: str = ""
    can: str = ""
    did: str = ""
    will: str = ""
    is_public: bool = Field(False, alias="isPublic")

class UserCreate(UserBase):
    id: str

class UserUpdate(BaseModel):
    """Partial update: only keys present in the request body are written"""
    model_config = ConfigDict(populate_by_name=True)

    display_name: Optional[str] = Field(None, alias="displayName")
    photo_url: Optional[str] = Field(None, alias="photoURL")
    class_: Optional[str] = Field(None, alias="class")
    faculty: Optional[str] = None
    department: Optional[str] = None
    grade: Optional[str] = None
    can: Optional[str] = None
    did: Optional[str] = None
    will: Optional[str] = None
    is_public: Optional[bool] = Field(None, alias="isPublic")

class User(UserBase):
    """User model returned to client"""
    id: str

class UserData(BaseModel):
    data: User

class UserEnvelope(BaseModel):
    user: User
