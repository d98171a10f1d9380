"""
Service layer for Users
"""
import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.posts.models import Post, PostBookmark
from inkwell.posts.schemas import PostResponse
from inkwell.posts.service import PostService
from inkwell.users.exceptions import UserNotFoundException
from inkwell.users.models import User
from inkwell.users.schemas import UserProfileResponse

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(self):
        """Initialize UsersService with dependencies"""
        self.post_service = PostService()

    async def get_user_or_404(self, user_id: int, db: AsyncSession) -> User:
        user = await db.get(User, user_id)
        if not user:
            raise UserNotFoundException(user_id)
        return user

    async def get_user_profile(self, user_id: int, db: AsyncSession) -> UserProfileResponse:
        """Public profile: never exposes email or password hash"""
        user = await self.get_user_or_404(user_id, db)
        result = await db.execute(
            select(func.count(Post.id)).where(Post.author_id == user_id)
        )
        posts_count = result.scalar() or 0

        return UserProfileResponse(
            id=user.id,
            name=user.name,
            avatar=user.avatar_url,
            bio=user.bio,
            created_at=user.created_at,
            posts_count=posts_count,
        )

    async def get_user_posts(self, user_id: int, db: AsyncSession) -> List[PostResponse]:
        """Posts written by a user, newest first"""
        await self.get_user_or_404(user_id, db)
        return await self.post_service.list_posts(db, author_id=user_id)

    async def get_bookmarked_posts(self, user_id: int, db: AsyncSession) -> List[PostResponse]:
        """Posts bookmarked by a user, most recently bookmarked first"""
        result = await db.execute(
            select(PostBookmark.post_id)
            .where(PostBookmark.user_id == user_id)
            .order_by(PostBookmark.created_at.desc(), PostBookmark.id.desc())
        )
        post_ids = list(result.scalars().all())
        if not post_ids:
            return []

        posts = await self.post_service.list_posts(db, post_ids=post_ids)
        by_id = {post.id: post for post in posts}
        return [by_id[post_id] for post_id in post_ids if post_id in by_id]
