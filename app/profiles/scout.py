"""Scout profile variant."""

from typing import Type

from sqlmodel import SQLModel

from app.models.scout_profile import ScoutProfile
from app.profiles.base import ProfileVariant


class ScoutVariant(ProfileVariant):

    @property
    def variant_id(self) -> str:
        return "scout"

    @property
    def model(self) -> Type[SQLModel]:
        return ScoutProfile

    @property
    def media_fields(self) -> dict[str, str]:
        return {"scout-avatar": "photo_url", "scout-cover": "cover_photo_url"}

    @property
    def card_fields(self) -> tuple[str, ...]:
        return ("user_id", "first_name", "last_name", "photo_url", "organization", "title", "country")

    @property
    def list_fields(self) -> tuple[str, ...]:
        return ("skills",)
