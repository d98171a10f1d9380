"""
Like and bookmark toggling.

Both interactions are a membership flip on a (post, user) row; the only
difference is which table holds the row. There is no "set" operation.
"""
import enum
import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.posts.exceptions import PostNotFoundException
from inkwell.posts.models import Post, PostBookmark, PostLike

logger = logging.getLogger(__name__)


class InteractionKind(str, enum.Enum):
    LIKE = "like"
    BOOKMARK = "bookmark"


INTERACTION_MODELS = {
    InteractionKind.LIKE: PostLike,
    InteractionKind.BOOKMARK: PostBookmark,
}


@dataclass(frozen=True)
class InteractionState:
    active: bool
    count: int


async def ensure_post_exists(post_id: int, db: AsyncSession) -> Post:
    post = await db.get(Post, post_id)
    if not post:
        raise PostNotFoundException()
    return post


async def count_interactions(kind: InteractionKind, post_id: int, db: AsyncSession) -> int:
    """Counted from rows on every call; there is no stored counter"""
    model = INTERACTION_MODELS[kind]
    result = await db.execute(
        select(func.count(model.id)).where(model.post_id == post_id)
    )
    return result.scalar() or 0


async def _find_interaction(kind: InteractionKind, post_id: int, user_id: int, db: AsyncSession):
    model = INTERACTION_MODELS[kind]
    result = await db.execute(
        select(model).where(
            model.post_id == post_id,
            model.user_id == user_id
        )
    )
    return result.scalar_one_or_none()


async def interaction_status(
    kind: InteractionKind, post_id: int, user_id: int, db: AsyncSession
) -> InteractionState:
    """Read-only check of whether the user currently holds the interaction"""
    await ensure_post_exists(post_id, db)
    existing = await _find_interaction(kind, post_id, user_id, db)
    count = await count_interactions(kind, post_id, db)
    return InteractionState(active=existing is not None, count=count)


async def toggle_interaction(
    kind: InteractionKind, post_id: int, user_id: int, db: AsyncSession
) -> InteractionState:
    """
    Flip the user's interaction with a post.

    Returns the state after the flip and the recounted total.

    Raises:
        PostNotFoundException: If the post does not exist
    """
    await ensure_post_exists(post_id, db)
    model = INTERACTION_MODELS[kind]

    existing = await _find_interaction(kind, post_id, user_id, db)
    if existing:
        try:
            await db.delete(existing)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        active = False
    else:
        db.add(model(post_id=post_id, user_id=user_id))
        try:
            await db.commit()
        except IntegrityError:
            # A concurrent toggle inserted the same (post, user) row first.
            # The unique constraint kept it single; the row exists either way.
            await db.rollback()
            if await _find_interaction(kind, post_id, user_id, db) is None:
                raise
            logger.info("Concurrent %s on post %s by user %s collapsed", kind.value, post_id, user_id)
        except Exception:
            await db.rollback()
            raise
        active = True

    count = await count_interactions(kind, post_id, db)
    logger.debug("User %s %s post %s -> active=%s count=%s", user_id, kind.value, post_id, active, count)
    return InteractionState(active=active, count=count)
