"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.player_profile import PlayerProfile  # noqa: F401
from app.models.scout_profile import ScoutProfile  # noqa: F401
from app.models.scout_experience import ScoutExperience  # noqa: F401
