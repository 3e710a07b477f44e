"""Player profile variant."""

from typing import Type

from sqlmodel import SQLModel

from app.models.player_profile import PlayerProfile
from app.profiles.base import ProfileVariant

# Skill rating columns, rendered as 0-100 gauges by clients
SKILL_FIELDS: tuple[str, ...] = ("speed", "jumping", "endurance", "acceleration", "defense")


class PlayerVariant(ProfileVariant):

    @property
    def variant_id(self) -> str:
        return "player"

    @property
    def model(self) -> Type[SQLModel]:
        return PlayerProfile

    @property
    def media_fields(self) -> dict[str, str]:
        return {"avatar": "photo_url"}

    @property
    def card_fields(self) -> tuple[str, ...]:
        return ("user_id", "first_name", "last_name", "photo_url", "current_team", "position", "nationality")

    @property
    def list_fields(self) -> tuple[str, ...]:
        return ("video_highlights",)
