"""
User repository.

Accounts are looked up by email, compared case-insensitively.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        """
        Insert *user*, storing its email lower-cased.

        Returns:
            The user with its generated id
        """
        user.email = user.email.lower()
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(func.lower(User.email) == email.lower())
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None
