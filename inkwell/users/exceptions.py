"""
Exceptions for Users module
"""
from inkwell.exceptions import NotFoundException


class UserNotFoundException(NotFoundException):
    def __init__(self, user_id: int = None):
        detail = f"User {user_id} not found" if user_id is not None else "User not found"
        super().__init__(detail=detail)
