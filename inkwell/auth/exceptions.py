from inkwell.auth.constants import TOKEN_MISSING, TOKEN_NOT_VALID, USER_ALREADY_EXISTS
from inkwell.exceptions import ConflictException, UnauthorizedException


class AuthException(UnauthorizedException):
    """Base exception for authentication errors"""
    pass


class TokenMissingException(AuthException):
    def __init__(self):
        super().__init__(
            detail={
                "message": TOKEN_MISSING,
                "code": "token_missing",
                "action": "login_required"
            }
        )


class TokenNotValidException(AuthException):
    def __init__(self):
        super().__init__(
            detail={
                "message": TOKEN_NOT_VALID,
                "code": "token_not_valid",
                "action": "login_required"
            }
        )


class UserAlreadyExistsException(ConflictException):
    def __init__(self, detail: str = USER_ALREADY_EXISTS):
        super().__init__(detail=detail)
