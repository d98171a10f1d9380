import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.auth.dependencies import get_optional_session_identity, get_session_identity
from inkwell.auth.schemas import SessionIdentity
from inkwell.database import get_db
from inkwell.exceptions import InternalErrorException
from inkwell.posts.dependencies import get_post_service
from inkwell.posts.interactions import InteractionKind, interaction_status, toggle_interaction
from inkwell.posts.schemas import (
    BookmarkToggleResponse,
    LikeToggleResponse,
    PostCreate,
    PostDeleteResponse,
    PostDetailResponse,
    PostResponse,
    PostUpdate
)
from inkwell.posts.service import PostService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=List[PostResponse])
async def get_posts(
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db)
):
    """
    List all posts, newest first

    Each post carries its author's public fields and like/comment counts.
    No filtering or pagination is done server-side.
    """
    try:
        return await service.list_posts(db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to list posts")
        raise InternalErrorException()


@router.post("", response_model=PostResponse)
async def create_post(
    post_data: PostCreate,
    identity: SessionIdentity = Depends(get_session_identity),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a post authored by the session user

    - **title**: Post title (1-200 characters)
    - **content**: Post body (HTML)
    - **tags**: Free-text tags (optional)
    - **coverImage**: Cover image URL (optional, http/https)
    """
    try:
        return await service.create_post(post_data, identity, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to create post")
        raise InternalErrorException()


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(
    post_id: int,
    identity: Optional[SessionIdentity] = Depends(get_optional_session_identity),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Get a post with its comments and interaction counts

    - **post_id**: ID of the post
    """
    try:
        return await service.get_post_detail(post_id, identity, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to fetch post %s", post_id)
        raise InternalErrorException()


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    post_data: PostUpdate,
    identity: SessionIdentity = Depends(get_session_identity),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Update a post

    - **post_id**: ID of the post
    - **title**, **content**, **tags**, **coverImage**: new values (optional)

    Only the author may update.
    """
    try:
        return await service.update_post(post_id, post_data, identity, db)
    except HTTPException:
        # Re-raise known HTTP errors (e.g., 404 Not Found, 403 Forbidden)
        raise
    except Exception:
        logger.exception("Failed to update post %s", post_id)
        raise InternalErrorException()


@router.delete("/{post_id}", response_model=PostDeleteResponse)
async def delete_post(
    post_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    service: PostService = Depends(get_post_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a post together with its comments, likes and bookmarks

    Only the author may delete.
    """
    try:
        await service.delete_post(post_id, identity, db)
        return PostDeleteResponse(success=True)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to delete post %s", post_id)
        raise InternalErrorException()


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_post_like(
    post_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Like or unlike a post

    If already liked it is unliked, and vice versa.
    """
    try:
        state = await toggle_interaction(InteractionKind.LIKE, post_id, identity.user_id, db)
        return LikeToggleResponse(liked=state.active, likes_count=state.count)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to toggle like on post %s", post_id)
        raise InternalErrorException()


@router.get("/{post_id}/like", response_model=LikeToggleResponse)
async def get_post_like(
    post_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    db: AsyncSession = Depends(get_db)
):
    """Whether the session user likes the post"""
    try:
        state = await interaction_status(InteractionKind.LIKE, post_id, identity.user_id, db)
        return LikeToggleResponse(liked=state.active, likes_count=state.count)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to read like state of post %s", post_id)
        raise InternalErrorException()


@router.post("/{post_id}/bookmark", response_model=BookmarkToggleResponse)
async def toggle_post_bookmark(
    post_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Bookmark or un-bookmark a post

    If already bookmarked the bookmark is removed, and vice versa.
    """
    try:
        state = await toggle_interaction(InteractionKind.BOOKMARK, post_id, identity.user_id, db)
        return BookmarkToggleResponse(bookmarked=state.active, bookmarks_count=state.count)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to toggle bookmark on post %s", post_id)
        raise InternalErrorException()


@router.get("/{post_id}/bookmark", response_model=BookmarkToggleResponse)
async def get_post_bookmark(
    post_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    db: AsyncSession = Depends(get_db)
):
    """Whether the session user bookmarked the post"""
    try:
        state = await interaction_status(InteractionKind.BOOKMARK, post_id, identity.user_id, db)
        return BookmarkToggleResponse(bookmarked=state.active, bookmarks_count=state.count)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to read bookmark state of post %s", post_id)
        raise InternalErrorException()
