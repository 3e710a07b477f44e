"""
User service.

Business logic for registration and authentication.
"""

from datetime import timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.profiles import VariantRegistry
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin

logger = get_logger(__name__)


def split_full_name(full_name: Optional[str]) -> tuple[str, str]:
    """First word is the first name, the rest is the last name."""
    parts = (full_name or "").split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user and create the profile matching its role.

        Args:
            user_data: User registration data

        Returns:
            Created user

        Raises:
            HTTPException: If email already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = User(email=user_data.email, hashed_password=get_password_hash(user_data.password),
                    full_name=user_data.full_name, role=user_data.role.value, )
        user = self.repository.create(user)

        variant = VariantRegistry.get_or_raise(user.role)
        first_name, last_name = split_full_name(user.full_name)
        ProfileRepository(self.session, variant.model).create_if_absent(
            user.id, {"first_name": first_name, "last_name": last_name})

        logger.info("Registered %s account %s", user.role, user.id)
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Authenticate user and return access token.

        Args:
            login_data: User login credentials

        Returns:
            JWT access token

        Raises:
            HTTPException: If credentials are invalid
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.email }, expires_delta=access_token_expires)
        logger.debug("Issued access token for user %s", user.id)

        return Token(access_token=access_token, token_type="bearer")

    def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_email(email)
