"""
Schemas for Users module
"""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, EmailStr, Field, field_validator

from inkwell.auth.constants import MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from inkwell.models import CustomModel

AVATAR_DESC = "Avatar image URL"


def _avatar_field():
    return Field(
        None,
        validation_alias=AliasChoices("avatar", "avatar_url", "avatarUrl"),
        serialization_alias="avatar",
        description=AVATAR_DESC,
    )


class UserCreate(CustomModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Display name")
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, description="Password")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_LENGTH} bytes")
        return v


class UserResponse(CustomModel):
    """Returned on registration. Never carries password material."""
    id: int
    name: str
    email: str
    avatar: Optional[str] = _avatar_field()


class AuthorResponse(CustomModel):
    """Public author fields attached to posts and comments."""
    id: int
    name: str
    avatar: Optional[str] = _avatar_field()


class AuthorDetailResponse(AuthorResponse):
    bio: Optional[str] = None


class UserProfileResponse(AuthorDetailResponse):
    created_at: datetime
    posts_count: int = Field(0, ge=0)
