"""Profile variants.  Importing this package registers all of them."""

from app.profiles.base import ProfileVariant
from app.profiles.player import PlayerVariant
from app.profiles.registry import VariantRegistry
from app.profiles.scout import ScoutVariant

PLAYER = PlayerVariant()
SCOUT = ScoutVariant()

VariantRegistry.register(PLAYER)
VariantRegistry.register(SCOUT)

__all__ = [
    "ProfileVariant",
    "PlayerVariant",
    "ScoutVariant",
    "VariantRegistry",
    "PLAYER",
    "SCOUT",
]
