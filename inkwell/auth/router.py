"""
Router for Auth module with DI pattern
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.auth.dependencies import get_auth_service
from inkwell.auth.schemas import UserCreate, UserResponse
from inkwell.auth.service import AuthService
from inkwell.database import get_db
from inkwell.exceptions import InternalErrorException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse)
async def register(
    user_data: UserCreate,
    service: AuthService = Depends(get_auth_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new user

    - **name**: Display name
    - **email**: Email (unique)
    - **password**: Password (6-72 characters)

    Sessions are issued by the identity provider, not by this endpoint.
    """
    try:
        return await service.register_user(user_data, db)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Registration failed")
        raise InternalErrorException()
