"""
Player profile API schemas.

Range checks on skill ratings and counters live here, at the API edge;
the sync layer stores whatever the draft holds.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class VideoHighlight(BaseModel):
    """A highlight link, with its embeddable form when it is a YouTube URL."""

    url: str
    youtube_id: Optional[str] = None
    embed_url: Optional[str] = None


# Request schemas
class PlayerProfileUpdate(BaseModel):
    """Fields to change on the player's draft.  Omitted fields keep their
    current value."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=1024)

    position: Optional[str] = Field(None, max_length=50)
    preferred_foot: Optional[str] = Field(None, max_length=20)
    nationality: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[str] = Field(None, max_length=20)
    height_cm: Optional[int] = Field(None, ge=0, le=300)
    weight_kg: Optional[int] = Field(None, ge=0, le=300)
    current_team: Optional[str] = Field(None, max_length=150)

    goals: Optional[int] = Field(None, ge=0)
    assists: Optional[int] = Field(None, ge=0)
    matches_played: Optional[int] = Field(None, ge=0)

    speed: Optional[int] = Field(None, ge=0, le=100)
    jumping: Optional[int] = Field(None, ge=0, le=100)
    endurance: Optional[int] = Field(None, ge=0, le=100)
    acceleration: Optional[int] = Field(None, ge=0, le=100)
    defense: Optional[int] = Field(None, ge=0, le=100)

    palmares: Optional[str] = Field(None, description="One achievement per line")
    career_description: Optional[str] = Field(None, description="Career narrative, one paragraph per line")

    instagram_url: Optional[str] = Field(None, max_length=512)
    tiktok_url: Optional[str] = Field(None, max_length=512)
    twitter_url: Optional[str] = Field(None, max_length=512)

    agent_name: Optional[str] = Field(None, max_length=150)
    agent_email: Optional[str] = Field(None, max_length=255)
    agent_phone: Optional[str] = Field(None, max_length=50)

    video_highlights: Optional[list[str]] = Field(None, description="Ordered video URLs, duplicates allowed")

    @field_validator("first_name", "last_name", "goals", "assists", "matches_played", "speed", "jumping",
                     "endurance", "acceleration", "defense", "video_highlights")
    @classmethod
    def reject_null(cls, value):
        """These columns can be omitted but never cleared."""
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


# Response schemas
class PlayerProfileResponse(BaseModel):
    """Schema for a player profile in API responses."""

    id: int
    user_id: int
    first_name: str
    last_name: str
    bio: Optional[str]
    photo_url: Optional[str]
    position: Optional[str]
    preferred_foot: Optional[str]
    nationality: Optional[str]
    date_of_birth: Optional[str]
    height_cm: Optional[int]
    weight_kg: Optional[int]
    current_team: Optional[str]
    goals: int
    assists: int
    matches_played: int
    speed: int
    jumping: int
    endurance: int
    acceleration: int
    defense: int
    palmares: Optional[str]
    career_description: Optional[str]
    instagram_url: Optional[str]
    tiktok_url: Optional[str]
    twitter_url: Optional[str]
    agent_name: Optional[str]
    agent_email: Optional[str]
    agent_phone: Optional[str]
    video_highlights: list[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    # Derived for display
    palmares_rows: list[str] = Field(default_factory=list)
    career_rows: list[str] = Field(default_factory=list)
    videos: list[VideoHighlight] = Field(default_factory=list)


class PlayerCard(BaseModel):
    """Directory entry for a player."""

    user_id: int
    first_name: str
    last_name: str
    photo_url: Optional[str] = None
    current_team: Optional[str] = None
    position: Optional[str] = None
    nationality: Optional[str] = None
