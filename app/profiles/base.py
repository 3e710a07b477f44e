"""
Abstract base class for profile variants.

A variant describes one profile table (player, scout):

- a unique identifier matching the account role
- the SQLModel table class
- which columns are media references and under which upload purpose
- which columns are lists edited item by item
- which columns appear on directory cards

Everything else about the load/edit/commit flow is shared and lives in
:class:`app.sync.profile_sync.ProfileSync`.
"""

from abc import ABC, abstractmethod
from typing import Any, Type

from sqlmodel import SQLModel

# Columns owned by the database or by the identity, never by the draft
SYSTEM_FIELDS: frozenset[str] = frozenset({"id", "user_id", "created_at", "updated_at"})


class ProfileVariant(ABC):
    """Record-shape capability for one profile table."""

    @property
    @abstractmethod
    def variant_id(self) -> str:
        """Identifier, equal to the account role, e.g. ``'player'``."""
        ...

    @property
    @abstractmethod
    def model(self) -> Type[SQLModel]:
        """SQLModel table class holding this variant."""
        ...

    @property
    @abstractmethod
    def media_fields(self) -> dict[str, str]:
        """Upload purpose -> column that stores the resulting URL."""
        ...

    @property
    @abstractmethod
    def card_fields(self) -> tuple[str, ...]:
        """Columns shown in directory listings."""
        ...

    # ------------------------------------------------------------------
    # Optional overrides with sensible defaults
    # ------------------------------------------------------------------

    @property
    def list_fields(self) -> tuple[str, ...]:
        """Columns holding ordered lists of strings.  Default none."""
        return ()

    @property
    def required_defaults(self) -> dict[str, Any]:
        """Values a freshly created record starts with."""
        return {"first_name": "", "last_name": ""}

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def editable_fields(self) -> tuple[str, ...]:
        """Every column except the system-owned ones, in model order."""
        return tuple(name for name in self.model.model_fields if name not in SYSTEM_FIELDS)

    def empty_record(self) -> dict[str, Any]:
        """Draft used when editing starts without a persisted record."""
        fields = self.model.model_fields
        record: dict[str, Any] = {
            name: fields[name].get_default(call_default_factory=True) for name in self.editable_fields
        }
        record.update(self.required_defaults)
        return record

    def to_record(self, profile: SQLModel) -> dict[str, Any]:
        """Plain-dict snapshot of a persisted row."""
        return profile.model_dump()
