"""Add player/scout profile tables and scout experiences

Revision ID: 002
Revises: 001
Create Date: 2026-10-18 12:15:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create player_profiles, scout_profiles and scout_experiences."""
    op.create_table('player_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('first_name', AutoString(length=100), nullable=False, server_default=''),
        sa.Column('last_name', AutoString(length=100), nullable=False, server_default=''),
        sa.Column('bio', AutoString(), nullable=True),
        sa.Column('photo_url', AutoString(length=1024), nullable=True),
        sa.Column('position', AutoString(length=50), nullable=True),
        sa.Column('preferred_foot', AutoString(length=20), nullable=True),
        sa.Column('nationality', AutoString(length=100), nullable=True),
        sa.Column('date_of_birth', AutoString(length=20), nullable=True),
        sa.Column('height_cm', sa.Integer(), nullable=True),
        sa.Column('weight_kg', sa.Integer(), nullable=True),
        sa.Column('current_team', AutoString(length=150), nullable=True),
        sa.Column('goals', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('assists', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('matches_played', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('speed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('jumping', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('endurance', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('acceleration', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('defense', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('palmares', AutoString(), nullable=True),
        sa.Column('career_description', AutoString(), nullable=True),
        sa.Column('instagram_url', AutoString(length=512), nullable=True),
        sa.Column('tiktok_url', AutoString(length=512), nullable=True),
        sa.Column('twitter_url', AutoString(length=512), nullable=True),
        sa.Column('agent_name', AutoString(length=150), nullable=True),
        sa.Column('agent_email', AutoString(length=255), nullable=True),
        sa.Column('agent_phone', AutoString(length=50), nullable=True),
        sa.Column('video_highlights', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_player_profiles_user_id'), 'player_profiles', ['user_id'], unique=True)

    op.create_table('scout_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('first_name', AutoString(length=100), nullable=False, server_default=''),
        sa.Column('last_name', AutoString(length=100), nullable=False, server_default=''),
        sa.Column('bio', AutoString(), nullable=True),
        sa.Column('country', AutoString(length=100), nullable=True),
        sa.Column('organization', AutoString(length=150), nullable=True),
        sa.Column('title', AutoString(length=150), nullable=True),
        sa.Column('photo_url', AutoString(length=1024), nullable=True),
        sa.Column('cover_photo_url', AutoString(length=1024), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_scout_profiles_user_id'), 'scout_profiles', ['user_id'], unique=True)

    op.create_table('scout_experiences', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('organization', AutoString(length=150), nullable=False, server_default=''),
        sa.Column('role', AutoString(length=150), nullable=False, server_default=''),
        sa.Column('location', AutoString(length=150), nullable=True),
        sa.Column('start_date', AutoString(length=50), nullable=True),
        sa.Column('end_date', AutoString(length=50), nullable=True),
        sa.Column('description', AutoString(), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_scout_experiences_user_id'), 'scout_experiences', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop profile tables."""
    op.drop_index(op.f('ix_scout_experiences_user_id'), table_name='scout_experiences')
    op.drop_table('scout_experiences')
    op.drop_index(op.f('ix_scout_profiles_user_id'), table_name='scout_profiles')
    op.drop_table('scout_profiles')
    op.drop_index(op.f('ix_player_profiles_user_id'), table_name='player_profiles')
    op.drop_table('player_profiles')
