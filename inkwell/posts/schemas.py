from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from inkwell.comments.schemas import CommentResponse
from inkwell.models import CustomModel
from inkwell.posts.constants import MAX_CONTENT_LENGTH, MAX_TAG_LENGTH, MAX_TAGS, MAX_TITLE_LENGTH, MIN_TITLE_LENGTH
from inkwell.posts.utils import normalize_tags
from inkwell.users.schemas import AuthorDetailResponse, AuthorResponse

# Constants for field descriptions
TITLE_DESCRIPTION = "Post title"
CONTENT_DESCRIPTION = "Post body (HTML)"
TAGS_DESCRIPTION = "Free-text tags, order preserved"
COVER_IMAGE_DESCRIPTION = "Cover image URL (http/https)"


def _validate_title(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Title must not be empty")
    return v.strip()


def _validate_content(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("Content must not be empty")
    return v


def _validate_tags(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return v
    tags = normalize_tags(v)
    if len(tags) > MAX_TAGS:
        raise ValueError(f"At most {MAX_TAGS} tags are allowed")
    if any(len(tag) > MAX_TAG_LENGTH for tag in tags):
        raise ValueError(f"Tags must be at most {MAX_TAG_LENGTH} characters")
    return tags


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None or not v.strip():
        return None
    return v.strip()


class PostCreate(CustomModel):
    """Schema for creating a post. The author is the session user."""
    title: str = Field(..., min_length=MIN_TITLE_LENGTH, max_length=MAX_TITLE_LENGTH, description=TITLE_DESCRIPTION)
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH, description=CONTENT_DESCRIPTION)
    tags: List[str] = Field(default_factory=list, description=TAGS_DESCRIPTION)
    cover_image: Optional[str] = Field(None, description=COVER_IMAGE_DESCRIPTION)

    validate_title = field_validator("title")(_validate_title)
    validate_content = field_validator("content")(_validate_content)
    validate_tags = field_validator("tags")(_validate_tags)
    validate_cover_image = field_validator("cover_image")(_blank_to_none)


class PostUpdate(CustomModel):
    """Schema for updating a post. Omitted fields keep their stored value."""
    title: Optional[str] = Field(None, min_length=MIN_TITLE_LENGTH, max_length=MAX_TITLE_LENGTH, description=TITLE_DESCRIPTION)
    content: Optional[str] = Field(None, min_length=1, max_length=MAX_CONTENT_LENGTH, description=CONTENT_DESCRIPTION)
    tags: Optional[List[str]] = Field(None, description=TAGS_DESCRIPTION)
    cover_image: Optional[str] = Field(None, description=COVER_IMAGE_DESCRIPTION)

    validate_title = field_validator("title")(_validate_title)
    validate_content = field_validator("content")(_validate_content)
    validate_tags = field_validator("tags")(_validate_tags)
    validate_cover_image = field_validator("cover_image")(_blank_to_none)


class PostResponse(CustomModel):
    """Post with its author and interaction counts"""
    id: int
    title: str
    slug: str
    content: str = Field(..., description=CONTENT_DESCRIPTION)
    cover_image: Optional[str] = Field(None, description=COVER_IMAGE_DESCRIPTION)
    tags: List[str] = Field(default_factory=list, description=TAGS_DESCRIPTION)
    reading_time: int = Field(..., ge=1, description="Estimated reading time in minutes")
    author_id: int
    author: AuthorResponse
    likes_count: int = Field(0, ge=0)
    comments_count: int = Field(0, ge=0)
    created_at: datetime
    updated_at: Optional[datetime] = None


class PostDetailResponse(PostResponse):
    """Single post view with comments and the viewer's interaction state"""
    author: AuthorDetailResponse
    bookmarks_count: int = Field(0, ge=0)
    comments: List[CommentResponse] = Field(default_factory=list)
    is_liked: Optional[bool] = Field(None, description="Whether the session user liked the post")
    is_bookmarked: Optional[bool] = Field(None, description="Whether the session user bookmarked the post")


class PostDeleteResponse(CustomModel):
    success: bool = True


class LikeToggleResponse(CustomModel):
    liked: bool
    likes_count: int = Field(..., ge=0)


class BookmarkToggleResponse(CustomModel):
    bookmarked: bool
    bookmarks_count: int = Field(..., ge=0)
