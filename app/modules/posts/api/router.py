from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import decode_error, storage_error
from app.core.schemas import Message, PathId
from app.deps import get_db, get_raw_body
from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import (
    Post as PostSchema, PostCreate, PostUpdate, PostEnvelope, PostList,
    PostCreated, PostsCreated, SearchResults,
)
from app.modules.posts.services.post import (
    get_post, get_posts, search_posts, create_post, create_posts,
    update_post, delete_post,
)

router = APIRouter()

def _validate_post(db: Session, post_id: int) -> Post:
    """Validate post exists and return post object or raise HTTPException"""
    try:
        post = get_post(db, post_id=post_id)
    except SQLAlchemyError as e:
        raise storage_error(e)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

def _convert_post_to_schema(post: Post) -> PostSchema:
    return PostSchema.model_validate(post)

@router.get("/posts", response_model=PostList)
def read_posts(db: Session = Depends(get_db)) -> Any:
    """
    Retrieve every post that has not been deleted.
    """
    try:
        posts = get_posts(db)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"posts": [_convert_post_to_schema(post) for post in posts]}

@router.get("/posts/{post_id}", response_model=PostEnvelope)
def read_post_by_id(post_id: PathId, db: Session = Depends(get_db)) -> Any:
    """
    Get post by ID.
    """
    post = _validate_post(db, post_id)
    return {"post": _convert_post_to_schema(post)}

@router.post("/create-posts", response_model=PostsCreated)
def create_new_posts(
    *,
    db: Session = Depends(get_db),
    posts_in: List[PostCreate] = Body(...),
) -> Any:
    """
    Create several posts at once.
    """
    try:
        posts = create_posts(db, posts_in)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {
        "message": "Posts created successfully!",
        "posts": [_convert_post_to_schema(post) for post in posts],
    }

@router.post("/create-post", response_model=PostCreated)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
) -> Any:
    """
    Create new post.
    """
    try:
        post = create_post(db, post_in)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"message": "Post created successfully!", "post": _convert_post_to_schema(post)}

@router.get("/search", response_model=SearchResults)
def search(
    db: Session = Depends(get_db),
    query: str = Query("", description="Substring matched against title, content and description"),
) -> Any:
    """
    Search posts by substring. Case sensitivity follows the database collation.
    """
    try:
        posts = search_posts(db, query)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"results": [_convert_post_to_schema(post) for post in posts]}

@router.put("/edit/{post_id}", response_model=PostCreated)
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: PathId,
    raw_body: bytes = Depends(get_raw_body),
) -> Any:
    """
    Update a post. Only the fields present in the body are changed.
    The post is looked up before the body is decoded, so an unknown id is a
    404 whatever was sent.
    """
    post = _validate_post(db, post_id)
    try:
        post_in = PostUpdate.model_validate_json(raw_body)
    except ValidationError as e:
        raise decode_error(e)
    try:
        post = update_post(db, post, post_in)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"message": "Post updated successfully!", "post": _convert_post_to_schema(post)}

@router.delete("/delete/{post_id}", response_model=Message)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: PathId,
) -> Any:
    """
    Soft delete a post. Deleting an already deleted post returns 404.
    """
    post = _validate_post(db, post_id)
    try:
        delete_post(db, post)
    except SQLAlchemyError as e:
        raise storage_error(e)
    return {"message": "Post deleted successfully!"}
