"""
Scout experience database model.

Ordered child rows of a scout profile.  ``sort_order`` is rewritten from
list position on every save, so it is always dense and zero-based.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ScoutExperience(SQLModel, table=True):
    """A single entry of a scout's career history."""

    __tablename__ = "scout_experiences"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    organization: str = Field(default="", max_length=150, nullable=False)
    role: str = Field(default="", max_length=150, nullable=False)
    location: Optional[str] = Field(default=None, max_length=150)

    # Free-text labels, not validated as dates
    start_date: Optional[str] = Field(default=None, max_length=50)
    end_date: Optional[str] = Field(default=None, max_length=50)

    description: Optional[str] = Field(default=None)
    skills: Optional[list[str]] = Field(default=None, sa_column=Column(JSON(none_as_null=True), nullable=True))

    sort_order: int = Field(default=0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
