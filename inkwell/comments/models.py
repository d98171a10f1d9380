from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from inkwell.database import Base
from inkwell.orm_mixins import CreatedAtMixin


class Comment(Base, CreatedAtMixin):
    """Comments are immutable once written."""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    post = relationship("Post", back_populates="comments")
    author = relationship("User", back_populates="comments")
