"""
Scout profile API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.experience import ExperienceDraft, ExperienceResponse


# Request schemas
class ScoutProfileUpdate(BaseModel):
    """Fields to change on the scout's draft.  Omitted fields keep their
    current value."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = None
    country: Optional[str] = Field(None, max_length=100)
    organization: Optional[str] = Field(None, max_length=150)
    title: Optional[str] = Field(None, max_length=150)
    photo_url: Optional[str] = Field(None, max_length=1024)
    cover_photo_url: Optional[str] = Field(None, max_length=1024)
    skills: Optional[list[str]] = None

    @field_validator("first_name", "last_name", "skills")
    @classmethod
    def reject_null(cls, value):
        """These columns can be omitted but never cleared."""
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ScoutProfileCommit(BaseModel):
    """Body of a scout save: profile changes plus, optionally, the full
    experience list.  When ``experiences`` is omitted the stored list is
    left alone; an empty list deletes every entry."""

    profile: ScoutProfileUpdate = Field(default_factory=ScoutProfileUpdate)
    experiences: Optional[list[ExperienceDraft]] = None


# Response schemas
class ScoutProfileResponse(BaseModel):
    """Schema for a scout profile with its experiences."""

    id: int
    user_id: int
    first_name: str
    last_name: str
    bio: Optional[str]
    country: Optional[str]
    organization: Optional[str]
    title: Optional[str]
    photo_url: Optional[str]
    cover_photo_url: Optional[str]
    skills: list[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    experiences: list[ExperienceResponse] = Field(default_factory=list)


class ScoutCard(BaseModel):
    """Directory entry for a scout."""

    user_id: int
    first_name: str
    last_name: str
    photo_url: Optional[str] = None
    organization: Optional[str] = None
    title: Optional[str] = None
    country: Optional[str] = None
