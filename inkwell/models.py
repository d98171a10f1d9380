from datetime import datetime
from zoneinfo import ZoneInfo
from typing import Any, Dict

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def datetime_to_gmt_str(dt: datetime) -> str:
    """Convert datetime to GMT string format"""
    if not dt.tzinfo:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.strftime("%Y-%m-%dT%H:%M:%S%z")


class CustomModel(BaseModel):
    """Custom base model with global configurations.

    Fields are snake_case in Python and camelCase on the wire; input
    accepts either form.
    """
    model_config = ConfigDict(
        json_encoders={datetime: datetime_to_gmt_str},
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def serializable_dict(self, **kwargs) -> Dict[str, Any]:
        """Return a dict which contains only serializable fields."""
        default_dict = self.model_dump(by_alias=True, **kwargs)
        return jsonable_encoder(default_dict)


# Import all SQLAlchemy models to ensure they are registered with Base.metadata
# This is needed for Alembic to detect all models
from inkwell.users.models import User  # noqa: E402,F401
from inkwell.posts.models import Post, PostLike, PostBookmark  # noqa: E402,F401
from inkwell.comments.models import Comment  # noqa: E402,F401
