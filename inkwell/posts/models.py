from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from inkwell.database import Base
from inkwell.orm_mixins import CreatedAtMixin, TimestampMixin
from inkwell.posts.constants import MAX_SLUG_LENGTH, MAX_TITLE_LENGTH


class Post(Base, TimestampMixin):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(MAX_TITLE_LENGTH), nullable=False)
    # Not unique: two posts with the same title share a slug
    slug = Column(String(MAX_SLUG_LENGTH), nullable=False, index=True)
    content = Column(Text, nullable=False)
    cover_image = Column(String(512), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    reading_time = Column(Integer, nullable=False, default=1)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    author = relationship("User", back_populates="posts")
    comments = relationship("Comment", back_populates="post", passive_deletes=True)
    likes = relationship("PostLike", back_populates="post", passive_deletes=True)
    bookmarks = relationship("PostBookmark", back_populates="post", passive_deletes=True)


class PostLike(Base, CreatedAtMixin):
    __tablename__ = "post_likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="liked_posts")
    post = relationship("Post", back_populates="likes")

    # One like per user per post
    __table_args__ = (UniqueConstraint('user_id', 'post_id', name='unique_user_post_like'),)


class PostBookmark(Base, CreatedAtMixin):
    __tablename__ = "post_bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="bookmarks")
    post = relationship("Post", back_populates="bookmarks")

    # One bookmark per user per post
    __table_args__ = (UniqueConstraint('user_id', 'post_id', name='unique_user_post_bookmark'),)
