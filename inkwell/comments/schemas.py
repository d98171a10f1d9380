from datetime import datetime

from pydantic import Field, field_validator

from inkwell.models import CustomModel
from inkwell.users.schemas import AuthorResponse

MAX_COMMENT_LENGTH = 5000


class CommentCreate(CustomModel):
    content: str = Field(..., min_length=1, max_length=MAX_COMMENT_LENGTH, description="Comment text")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment must not be empty")
        return v.strip()


class CommentResponse(CustomModel):
    id: int
    content: str
    post_id: int
    author_id: int
    author: AuthorResponse
    created_at: datetime
