"""Business logic services."""

from app.services.user_service import UserService
from app.services.profile_service import PlayerProfileService, ProfileService, ScoutProfileService

__all__ = [
    "UserService",
    "ProfileService",
    "PlayerProfileService",
    "ScoutProfileService",
]
