from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func


class CreatedAtMixin:
    """Mixin for rows that are written once and never updated."""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class TimestampMixin(CreatedAtMixin):
    """Mixin to add created_at and updated_at timestamps."""
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=True)
