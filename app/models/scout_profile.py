"""
Scout profile database model.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ScoutProfile(SQLModel, table=True):
    """Public profile of a scout.  One row per scout account."""

    __tablename__ = "scout_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    first_name: str = Field(default="", max_length=100, nullable=False)
    last_name: str = Field(default="", max_length=100, nullable=False)
    bio: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None, max_length=100)
    organization: Optional[str] = Field(default=None, max_length=150)
    title: Optional[str] = Field(default=None, max_length=150)

    # Media
    photo_url: Optional[str] = Field(default=None, max_length=1024)
    cover_photo_url: Optional[str] = Field(default=None, max_length=1024)

    skills: list[str] = Field(default_factory=list,
                              sa_column=Column(JSON(none_as_null=True), nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
