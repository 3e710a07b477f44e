"""SQLModel database models."""

from app.models.user import User, UserRole
from app.models.player_profile import PlayerProfile
from app.models.scout_profile import ScoutProfile
from app.models.scout_experience import ScoutExperience

__all__ = [
    "User",
    "UserRole",
    "PlayerProfile",
    "ScoutProfile",
    "ScoutExperience",
]
