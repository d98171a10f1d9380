"""
Service layer for comments
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inkwell.auth.schemas import SessionIdentity
from inkwell.comments.models import Comment
from inkwell.comments.schemas import CommentCreate, CommentResponse
from inkwell.posts.interactions import ensure_post_exists

logger = logging.getLogger(__name__)


class CommentService:
    async def list_comments(self, post_id: int, db: AsyncSession) -> List[CommentResponse]:
        """All comments of a post, newest first"""
        result = await db.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .options(selectinload(Comment.author))
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return [CommentResponse.model_validate(comment) for comment in result.scalars().all()]

    async def create_comment(
        self,
        post_id: int,
        comment_data: CommentCreate,
        identity: SessionIdentity,
        db: AsyncSession
    ) -> CommentResponse:
        """
        Add a comment to a post. Any signed-in user may comment on any post.

        Raises:
            PostNotFoundException: If the post does not exist
        """
        await ensure_post_exists(post_id, db)

        comment = Comment(
            content=comment_data.content,
            post_id=post_id,
            author_id=identity.user_id,
        )
        db.add(comment)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        result = await db.execute(
            select(Comment)
            .where(Comment.id == comment.id)
            .options(selectinload(Comment.author))
            .execution_options(populate_existing=True)
        )
        comment = result.scalar_one()
        logger.info("User %s commented on post %s", identity.user_id, post_id)
        return CommentResponse.model_validate(comment)
