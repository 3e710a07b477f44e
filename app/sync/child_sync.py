"""
Ordered child-collection synchronization.

Each save replaces the owner's whole child set with the draft list:
rows missing from the draft are deleted, the others are rewritten with
``sort_order`` equal to their draft position, and id-less drafts are
inserted.  The plan runs in a single transaction, so a failure leaves
the persisted set exactly as it was.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger
from app.db.repositories.experience import ExperienceRepository
from app.sync.errors import ReadFailure, WriteFailure
from app.sync.reconcile import reconcile_ordered_children

logger = get_logger(__name__)

EXPERIENCE_FIELDS: tuple[str, ...] = (
    "organization",
    "role",
    "location",
    "start_date",
    "end_date",
    "description",
    "skills",
)

# Fields a new draft must carry, even when empty
EXPERIENCE_REQUIRED: dict[str, Any] = {"organization": "", "role": ""}


def _record_key(record: dict[str, Any]):
    return record.get("id")


class ChildCollectionSync:
    """View list and draft list of one owner's experiences."""

    def __init__(self, repository: ExperienceRepository, fields: tuple[str, ...] = EXPERIENCE_FIELDS,
                 required: Optional[dict[str, Any]] = None, ):
        self.repository = repository
        self.fields = fields
        self.required = dict(EXPERIENCE_REQUIRED if required is None else required)

        self.user_id: Optional[int] = None
        self.view: list[dict[str, Any]] = []
        self.draft: list[dict[str, Any]] = []

    def load(self, user_id: int) -> list[dict[str, Any]]:
        """Fetch all rows of *user_id* by ascending ``sort_order``."""
        self.user_id = user_id
        try:
            rows = self.repository.get_all_by_user(user_id)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("Loading experiences of user %s failed: %s", user_id, e)
            raise ReadFailure("Could not load the experience list", cause=e) from e
        self.view = [row.model_dump() for row in rows]
        self.draft = copy.deepcopy(self.view)
        return copy.deepcopy(self.view)

    # ------------------------------------------------------------------
    # Draft editing (local only)
    # ------------------------------------------------------------------

    def add_draft(self) -> dict[str, Any]:
        entry: dict[str, Any] = {key: None for key in self.fields}
        entry.update(self.required)
        entry["id"] = None
        entry["sort_order"] = len(self.draft)
        self.draft.append(entry)
        return entry

    def update_draft(self, index: int, key: str, value: Any) -> None:
        if key not in self.fields:
            raise KeyError(f"'{key}' is not an editable field")
        self.draft[index][key] = value

    def remove_draft(self, index: int) -> None:
        del self.draft[index]

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, owner_id: int, draft_list: Optional[list[dict[str, Any]]] = None) -> list[dict[str, Any]]:
        """Make the persisted set of *owner_id* equal the draft list.

        Args:
            owner_id: Owner of the rows.
            draft_list: Replaces the current draft when given.

        Returns:
            The persisted rows after the save, ordered by ``sort_order``.

        Raises:
            ValueError: if the draft carries the same id twice.
            WriteFailure: if any statement fails; nothing is persisted.
        """
        if draft_list is not None:
            self.draft = copy.deepcopy(draft_list)

        try:
            persisted = [row.model_dump() for row in self.repository.get_all_by_user(owner_id)]
            plan = reconcile_ordered_children(persisted, self.draft, _record_key)
            self.repository.apply_plan(owner_id, plan, self.fields)
        except (SQLAlchemyError, LookupError) as e:
            self.repository.rollback()
            logger.error("Saving experiences of user %s failed, rolled back: %s", owner_id, e)
            raise WriteFailure("Could not save the experience list", cause=e) from e

        logger.info("Saved experiences of user %s: %d deleted, %d updated, %d inserted", owner_id,
                    len(plan.to_delete), len(plan.to_update), len(plan.to_insert))
        return self.load(owner_id)
