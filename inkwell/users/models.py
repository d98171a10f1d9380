"""
Models for Users module
"""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from inkwell.database import Base
from inkwell.orm_mixins import TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    avatar_url = Column(String(500), nullable=True)
    bio = Column(Text, nullable=True)

    # Relationships
    posts = relationship("Post", back_populates="author", passive_deletes=True)
    comments = relationship("Comment", back_populates="author", passive_deletes=True)
    liked_posts = relationship("PostLike", back_populates="user", passive_deletes=True)
    bookmarks = relationship("PostBookmark", back_populates="user", passive_deletes=True)
