"""
Service layer for Posts module with instance methods
"""
import logging
from typing import List, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inkwell.auth.schemas import SessionIdentity
from inkwell.comments.models import Comment
from inkwell.comments.service import CommentService
from inkwell.config import settings
from inkwell.posts.constants import INVALID_IMAGE_URL
from inkwell.posts.exceptions import (
    InsufficientPermissionsException,
    PostNotFoundException,
    PostValidationException
)
from inkwell.posts.interactions import InteractionKind, count_interactions
from inkwell.posts.models import Post, PostBookmark, PostLike
from inkwell.posts.schemas import PostCreate, PostDetailResponse, PostResponse, PostUpdate
from inkwell.posts.utils import calculate_reading_time, can_mutate, generate_slug
from inkwell.users.schemas import AuthorDetailResponse, AuthorResponse
from inkwell.utils.urls import is_http_url

logger = logging.getLogger(__name__)


def _count_subquery(model, label: str):
    return (
        select(model.post_id, func.count(model.id).label(label))
        .group_by(model.post_id)
        .subquery()
    )


class PostService:
    def __init__(self):
        """Initialize PostService with dependencies"""
        self.comment_service = CommentService()

    def _build_post_response(self, post: Post, likes_count: int, comments_count: int) -> PostResponse:
        return PostResponse(
            id=post.id,
            title=post.title,
            slug=post.slug,
            content=post.content,
            cover_image=post.cover_image,
            tags=list(post.tags or []),
            reading_time=post.reading_time,
            author_id=post.author_id,
            author=AuthorResponse.model_validate(post.author),
            likes_count=likes_count,
            comments_count=comments_count,
            created_at=post.created_at,
            updated_at=post.updated_at
        )

    def _validate_cover_image(self, cover_image: Optional[str]) -> None:
        if cover_image is not None and not is_http_url(cover_image):
            raise PostValidationException(INVALID_IMAGE_URL)

    async def _load_post(self, post_id: int, db: AsyncSession) -> Post:
        result = await db.execute(
            select(Post)
            .where(Post.id == post_id)
            .options(selectinload(Post.author))
            .execution_options(populate_existing=True)
        )
        post = result.scalar_one_or_none()
        if not post:
            raise PostNotFoundException()
        return post

    async def _comments_count(self, post_id: int, db: AsyncSession) -> int:
        result = await db.execute(
            select(func.count(Comment.id)).where(Comment.post_id == post_id)
        )
        return result.scalar() or 0

    async def _post_response(self, post_id: int, db: AsyncSession) -> PostResponse:
        post = await self._load_post(post_id, db)
        likes_count = await count_interactions(InteractionKind.LIKE, post.id, db)
        comments_count = await self._comments_count(post.id, db)
        return self._build_post_response(post, likes_count, comments_count)

    async def list_posts(
        self,
        db: AsyncSession,
        author_id: Optional[int] = None,
        post_ids: Optional[Sequence[int]] = None
    ) -> List[PostResponse]:
        """
        Posts newest first, each with its author and like/comment counts.
        Counts come from the relation tables at read time.
        """
        likes_sq = _count_subquery(PostLike, "likes_count")
        comments_sq = _count_subquery(Comment, "comments_count")

        query = (
            select(
                Post,
                func.coalesce(likes_sq.c.likes_count, 0),
                func.coalesce(comments_sq.c.comments_count, 0),
            )
            .outerjoin(likes_sq, likes_sq.c.post_id == Post.id)
            .outerjoin(comments_sq, comments_sq.c.post_id == Post.id)
            .options(selectinload(Post.author))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        if author_id is not None:
            query = query.where(Post.author_id == author_id)
        if post_ids is not None:
            query = query.where(Post.id.in_(list(post_ids)))

        result = await db.execute(query)
        return [
            self._build_post_response(post, likes_count, comments_count)
            for post, likes_count, comments_count in result.all()
        ]

    async def get_post_by_id(self, post_id: int, db: AsyncSession) -> Post:
        """Get a specific post by ID"""
        post = await db.get(Post, post_id)
        if not post:
            raise PostNotFoundException()
        return post

    async def get_post_detail(
        self,
        post_id: int,
        identity: Optional[SessionIdentity],
        db: AsyncSession
    ) -> PostDetailResponse:
        """Post with author bio, comments newest first and interaction counts"""
        post = await self._load_post(post_id, db)

        likes_count = await count_interactions(InteractionKind.LIKE, post.id, db)
        bookmarks_count = await count_interactions(InteractionKind.BOOKMARK, post.id, db)
        comments = await self.comment_service.list_comments(post.id, db)

        is_liked = None
        is_bookmarked = None
        if identity:
            is_liked = await self._has_interaction(PostLike, post.id, identity.user_id, db)
            is_bookmarked = await self._has_interaction(PostBookmark, post.id, identity.user_id, db)

        base = self._build_post_response(post, likes_count, len(comments))
        return PostDetailResponse(
            **base.model_dump(exclude={"author"}),
            author=AuthorDetailResponse.model_validate(post.author),
            bookmarks_count=bookmarks_count,
            comments=comments,
            is_liked=is_liked,
            is_bookmarked=is_bookmarked,
        )

    async def _has_interaction(self, model, post_id: int, user_id: int, db: AsyncSession) -> bool:
        result = await db.execute(
            select(model.id).where(model.post_id == post_id, model.user_id == user_id)
        )
        return result.first() is not None

    async def create_post(self, post_data: PostCreate, identity: SessionIdentity, db: AsyncSession) -> PostResponse:
        """
        Create a post authored by the session user.
        Slug and reading time are derived from title and content.
        """
        self._validate_cover_image(post_data.cover_image)

        db_post = Post(
            title=post_data.title,
            slug=generate_slug(post_data.title),
            content=post_data.content,
            cover_image=post_data.cover_image,
            tags=list(post_data.tags),
            reading_time=calculate_reading_time(post_data.content, settings.WORDS_PER_MINUTE),
            author_id=identity.user_id,
        )
        db.add(db_post)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info("User %s created post %s", identity.user_id, db_post.id)
        return self._build_post_response(await self._load_post(db_post.id, db), 0, 0)

    async def update_post(
        self,
        post_id: int,
        post_data: PostUpdate,
        identity: SessionIdentity,
        db: AsyncSession
    ) -> PostResponse:
        """
        Update a post. Only its author may do so.

        The slug is recomputed only when the title changes and the reading
        time only when the content changes, so links survive body edits.

        Raises:
            PostNotFoundException: If the post does not exist
            InsufficientPermissionsException: If the caller is not the author
        """
        post = await self.get_post_by_id(post_id, db)
        if not can_mutate(identity.user_id, post):
            raise InsufficientPermissionsException()

        fields_set = post_data.model_fields_set
        if "cover_image" in fields_set:
            self._validate_cover_image(post_data.cover_image)

        if post_data.title is not None and post_data.title != post.title:
            post.title = post_data.title
            post.slug = generate_slug(post_data.title)
        if post_data.content is not None and post_data.content != post.content:
            post.content = post_data.content
            post.reading_time = calculate_reading_time(post_data.content, settings.WORDS_PER_MINUTE)
        if post_data.tags is not None:
            post.tags = list(post_data.tags)
        if "cover_image" in fields_set:
            post.cover_image = post_data.cover_image

        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info("User %s updated post %s", identity.user_id, post_id)
        return await self._post_response(post_id, db)

    async def delete_post(self, post_id: int, identity: SessionIdentity, db: AsyncSession) -> bool:
        """
        Delete a post and its comments, likes and bookmarks. Only its author may do so.
        """
        post = await self.get_post_by_id(post_id, db)
        if not can_mutate(identity.user_id, post):
            raise InsufficientPermissionsException()

        try:
            # Dependents go explicitly so the cascade holds without FK enforcement
            await db.execute(delete(Comment).where(Comment.post_id == post_id))
            await db.execute(delete(PostLike).where(PostLike.post_id == post_id))
            await db.execute(delete(PostBookmark).where(PostBookmark.post_id == post_id))
            await db.delete(post)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info("User %s deleted post %s", identity.user_id, post_id)
        return True
