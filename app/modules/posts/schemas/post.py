from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.schemas import Int64
from app.modules.authors.schemas.author import Author

class PostBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    title: str = ""
    author_id: str = Field("", alias="authorId")
    category: str = ""
    technology: str = ""
    curriculum: str = ""
    content: str = ""
    cover_url: str = Field("", alias="coverUrl")
    meta_title: str = Field("", alias="metaTitle")
    total_views: Int64 = Field(0, alias="totalViews")
    total_shares: Int64 = Field(0, alias="totalShares")
    description: str = ""
    total_comments: Int64 = Field(0, alias="totalComments")
    total_favorites: Int64 = Field(0, alias="totalFavorites")

class PostCreate(PostBase):
    pass

class PostUpdate(BaseModel):
    """
    Partial update payload.

    Every field is optional; a key missing from the request body (or sent as
    null) leaves the stored column untouched, while "", 0 and false are
    written as given.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    author_id: Optional[str] = Field(None, alias="authorId")
    category: Optional[str] = None
    technology: Optional[str] = None
    curriculum: Optional[str] = None
    content: Optional[str] = None
    cover_url: Optional[str] = Field(None, alias="coverUrl")
    meta_title: Optional[str] = Field(None, alias="metaTitle")
    total_views: Optional[Int64] = Field(None, alias="totalViews")
    total_shares: Optional[Int64] = Field(None, alias="totalShares")
    description: Optional[str] = None
    total_comments: Optional[Int64] = Field(None, alias="totalComments")
    total_favorites: Optional[Int64] = Field(None, alias="totalFavorites")

class Post(PostBase):
    """Post model returned to client"""
    id: int = Field(alias="ID")
    created_at: Optional[datetime] = Field(None, alias="CreatedAt")
    updated_at: Optional[datetime] = Field(None, alias="UpdatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="DeletedAt")
    author: Author = Field(default_factory=Author)

    @field_validator("author", mode="before")
    @classmethod
    def empty_author_when_missing(cls, v):
        # Orphaned author ids render as an all-empty author, never null
        return {} if v is None else v

class PostEnvelope(BaseModel):
    post: Post

class PostList(BaseModel):
    posts: List[Post]

class PostCreated(BaseModel):
    message: str
    post: Post

class PostsCreated(BaseModel):
    message: str
    posts: List[Post]

class SearchResults(BaseModel):
    results: List[Post]
