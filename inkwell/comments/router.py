import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.auth.dependencies import get_session_identity
from inkwell.auth.schemas import SessionIdentity
from inkwell.comments.dependencies import get_comment_service
from inkwell.comments.schemas import CommentCreate, CommentResponse
from inkwell.comments.service import CommentService
from inkwell.database import get_db
from inkwell.exceptions import InternalErrorException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Comments"])


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def get_comments(
    post_id: int,
    service: CommentService = Depends(get_comment_service),
    db: AsyncSession = Depends(get_db)
):
    """
    List comments of a post, newest first

    - **post_id**: ID of the post
    """
    try:
        return await service.list_comments(post_id, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to list comments of post %s", post_id)
        raise InternalErrorException()


@router.post("/{post_id}/comments", response_model=CommentResponse)
async def create_comment(
    post_id: int,
    comment_data: CommentCreate,
    identity: SessionIdentity = Depends(get_session_identity),
    service: CommentService = Depends(get_comment_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Comment on a post

    - **post_id**: ID of the post
    - **content**: Comment text
    """
    try:
        return await service.create_comment(post_id, comment_data, identity, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to comment on post %s", post_id)
        raise InternalErrorException()
