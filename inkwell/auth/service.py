"""
Service layer for Auth module with instance methods
"""
import logging

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.auth.exceptions import UserAlreadyExistsException
from inkwell.users.models import User
from inkwell.users.schemas import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class AuthService:
    def get_password_hash(self, password: str) -> str:
        """Hash password using bcrypt"""
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            return False

    async def register_user(self, user_data: UserCreate, db: AsyncSession) -> UserResponse:
        """Register a new user"""
        result = await db.execute(
            select(User).where(User.email == user_data.email)
        )
        if result.scalar_one_or_none():
            raise UserAlreadyExistsException()

        db_user = User(
            name=user_data.name,
            email=user_data.email,
            hashed_password=self.get_password_hash(user_data.password),
        )
        db.add(db_user)
        try:
            await db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            await db.rollback()
            raise UserAlreadyExistsException()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(db_user)

        logger.info("Registered user %s", db_user.id)
        return UserResponse.model_validate(db_user)
