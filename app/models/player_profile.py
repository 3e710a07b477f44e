"""
Player profile database model.

One row per player account.  Skill ratings are shown on a 0-100 scale
by clients; the column itself is a plain integer.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class PlayerProfile(SQLModel, table=True):
    """Public profile of a player.

    ``user_id`` is unique: the profile is created once (at registration
    or on the owner's first fetch) and afterwards only updated.
    """

    __tablename__ = "player_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    # Identity
    first_name: str = Field(default="", max_length=100, nullable=False)
    last_name: str = Field(default="", max_length=100, nullable=False)
    bio: Optional[str] = Field(default=None)
    photo_url: Optional[str] = Field(default=None, max_length=1024)

    # Football details
    position: Optional[str] = Field(default=None, max_length=50)
    preferred_foot: Optional[str] = Field(default=None, max_length=20)
    nationality: Optional[str] = Field(default=None, max_length=100)
    date_of_birth: Optional[str] = Field(default=None, max_length=20)
    height_cm: Optional[int] = Field(default=None)
    weight_kg: Optional[int] = Field(default=None)
    current_team: Optional[str] = Field(default=None, max_length=150)

    # Season counters
    goals: int = Field(default=0)
    assists: int = Field(default=0)
    matches_played: int = Field(default=0)

    # Skill ratings
    speed: int = Field(default=0)
    jumping: int = Field(default=0)
    endurance: int = Field(default=0)
    acceleration: int = Field(default=0)
    defense: int = Field(default=0)

    # Newline-delimited free text
    palmares: Optional[str] = Field(default=None)
    career_description: Optional[str] = Field(default=None)

    # Social links
    instagram_url: Optional[str] = Field(default=None, max_length=512)
    tiktok_url: Optional[str] = Field(default=None, max_length=512)
    twitter_url: Optional[str] = Field(default=None, max_length=512)

    # Agent contact
    agent_name: Optional[str] = Field(default=None, max_length=150)
    agent_email: Optional[str] = Field(default=None, max_length=255)
    agent_phone: Optional[str] = Field(default=None, max_length=50)

    # Ordered list of video URLs, duplicates allowed
    video_highlights: list[str] = Field(default_factory=list,
                                        sa_column=Column(JSON(none_as_null=True), nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
