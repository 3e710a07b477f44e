"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.experience import ExperienceRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "ExperienceRepository",
]
