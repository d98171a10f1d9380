from inkwell.models import CustomModel
from inkwell.users.schemas import UserCreate, UserResponse  # noqa: F401


class SessionIdentity(CustomModel):
    """The identity read from the caller's session token."""
    user_id: int
