"""
Scout experience API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ExperienceDraft(BaseModel):
    """One entry of the experience list submitted on save.

    ``id`` is set for entries loaded from the server and left out for new
    ones.  Position in the submitted list becomes ``sort_order``.
    """

    id: Optional[int] = Field(None, description="Server id, omitted for new entries")
    organization: str = Field("", max_length=150)
    role: str = Field("", max_length=150)
    location: Optional[str] = Field(None, max_length=150)
    start_date: Optional[str] = Field(None, max_length=50, description="Free-text label, e.g. '2019'")
    end_date: Optional[str] = Field(None, max_length=50, description="Free-text label, e.g. 'present'")
    description: Optional[str] = None
    skills: Optional[list[str]] = None


class ExperienceResponse(BaseModel):
    """Schema for an experience entry in API responses."""

    id: int
    user_id: int
    organization: str
    role: str
    location: Optional[str]
    start_date: Optional[str]
    end_date: Optional[str]
    description: Optional[str]
    skills: Optional[list[str]]
    sort_order: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
