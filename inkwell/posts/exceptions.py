from inkwell.exceptions import ForbiddenException, NotFoundException, ValidationException
from inkwell.posts.constants import INSUFFICIENT_PERMISSIONS, POST_NOT_FOUND


class PostNotFoundException(NotFoundException):
    def __init__(self, detail: str = POST_NOT_FOUND):
        super().__init__(detail=detail)


class InsufficientPermissionsException(ForbiddenException):
    def __init__(self, custom_message: str = None):
        super().__init__(detail=custom_message or INSUFFICIENT_PERMISSIONS)


class PostValidationException(ValidationException):
    def __init__(self, detail: str):
        super().__init__(detail=detail)
