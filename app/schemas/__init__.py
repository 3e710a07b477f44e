"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token, TokenData
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.schemas.experience import ExperienceDraft, ExperienceResponse
from app.schemas.player_profile import (
    PlayerCard,
    PlayerProfileResponse,
    PlayerProfileUpdate,
    VideoHighlight,
)
from app.schemas.scout_profile import (
    ScoutCard,
    ScoutProfileCommit,
    ScoutProfileResponse,
    ScoutProfileUpdate,
)

__all__ = [
    "Token",
    "TokenData",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "ExperienceDraft",
    "ExperienceResponse",
    "PlayerCard",
    "PlayerProfileResponse",
    "PlayerProfileUpdate",
    "VideoHighlight",
    "ScoutCard",
    "ScoutProfileCommit",
    "ScoutProfileResponse",
    "ScoutProfileUpdate",
]
