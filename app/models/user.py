"""
User database model.

Defines the User table for authentication and role selection.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class UserRole(str, enum.Enum):
    """Account role chosen at registration.  Decides the profile variant."""
    PLAYER = "player"
    SCOUT = "scout"


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials and the account role.  Profile data lives in the
    role-specific profile table.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    full_name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default=UserRole.PLAYER.value, max_length=20, nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
