"""
Router for Users module
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.auth.dependencies import get_session_identity
from inkwell.auth.schemas import SessionIdentity
from inkwell.database import get_db
from inkwell.exceptions import InternalErrorException
from inkwell.posts.schemas import PostResponse
from inkwell.users.dependencies import get_users_service
from inkwell.users.schemas import UserProfileResponse
from inkwell.users.service import UsersService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me/bookmarks", response_model=List[PostResponse])
async def get_my_bookmarks(
    identity: SessionIdentity = Depends(get_session_identity),
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """Posts bookmarked by the current user, most recent bookmark first"""
    try:
        return await service.get_bookmarked_posts(identity.user_id, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to list bookmarks for user %s", identity.user_id)
        raise InternalErrorException()


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: int,
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Public profile of a user

    - **user_id**: ID of the user
    """
    try:
        return await service.get_user_profile(user_id, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to fetch user %s", user_id)
        raise InternalErrorException()


@router.get("/{user_id}/posts", response_model=List[PostResponse])
async def get_user_posts(
    user_id: int,
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """Posts written by a user, newest first"""
    try:
        return await service.get_user_posts(user_id, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to list posts of user %s", user_id)
        raise InternalErrorException()
