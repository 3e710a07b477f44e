"""
Profile repository.

Handles database operations for the profile tables.  One class serves
every variant: it is bound to the variant's model at construction.
"""

import datetime
from typing import Any, Optional, Type

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select


class ProfileRepository:
    """Repository for a profile table keyed by ``user_id``."""

    def __init__(self, session: Session, model: Type[SQLModel]):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
            model: Profile table class (PlayerProfile, ScoutProfile)
        """
        self.session = session
        self.model = model

    def get_by_user_id(self, user_id: int) -> Optional[SQLModel]:
        statement = select(self.model).where(self.model.user_id == user_id)
        return self.session.exec(statement).first()

    def create(self, user_id: int, values: dict[str, Any]) -> SQLModel:
        """
        Insert a new profile for *user_id*.

        Raises:
            IntegrityError: if the user already has a profile
        """
        profile = self.model(user_id=user_id, **values)
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def create_if_absent(self, user_id: int, values: dict[str, Any]) -> tuple[SQLModel, bool]:
        """
        Insert a profile unless one exists.

        A concurrent insert for the same user hits the unique constraint on
        ``user_id``; that conflict is treated as a no-op and the winning
        row is returned.

        Returns:
            Tuple of (profile, created)
        """
        existing = self.get_by_user_id(user_id)
        if existing:
            return existing, False
        try:
            return self.create(user_id, values), True
        except IntegrityError:
            self.session.rollback()
            existing = self.get_by_user_id(user_id)
            if existing is None:
                raise
            return existing, False

    def update_by_user_id(self, user_id: int, values: dict[str, Any]) -> Optional[SQLModel]:
        """
        Overwrite the given columns of the profile of *user_id*.

        Returns:
            Updated profile, or None if the user has no profile
        """
        profile = self.get_by_user_id(user_id)
        if profile is None:
            return None
        for key, value in values.items():
            setattr(profile, key, value)
        profile.updated_at = datetime.datetime.utcnow()
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def list_ordered_by_first_name(self, search: Optional[str] = None, limit: int = 10) -> list[SQLModel]:
        """Profiles ordered by first name, optionally filtered by a
        case-insensitive substring of ``"first last"``."""
        statement = select(self.model)
        if search:
            full_name = func.lower(self.model.first_name + " " + self.model.last_name)
            statement = statement.where(full_name.contains(search.lower()))
        statement = statement.order_by(self.model.first_name).limit(limit)
        return list(self.session.exec(statement).all())

    def rollback(self) -> None:
        self.session.rollback()
