"""
Scout experience repository.

Besides plain reads, applies a whole reconciliation plan in a single
transaction.
"""

import datetime
from typing import Any

from sqlalchemy import delete
from sqlmodel import Session, select

from app.models.scout_experience import ScoutExperience
from app.sync.reconcile import ReconcilePlan


class ExperienceRepository:
    """Repository for ScoutExperience database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, entry_id: int):
        return self.session.get(ScoutExperience, entry_id)

    def get_all_by_user(self, user_id: int) -> list[ScoutExperience]:
        """All experiences of a user, ordered by ``sort_order``."""
        statement = (
            select(ScoutExperience)
            .where(ScoutExperience.user_id == user_id)
            .order_by(ScoutExperience.sort_order, ScoutExperience.id)
        )
        return list(self.session.exec(statement).all())

    def apply_plan(self, user_id: int, plan: ReconcilePlan[dict[str, Any]], fields: tuple[str, ...]) -> None:
        """
        Execute *plan* for *user_id* and commit once.

        Deletes first, then updates and inserts in draft order.  Nothing is
        committed if any statement fails; the caller rolls back.

        Args:
            user_id: Owner of the rows
            plan: Reconciliation plan over draft dicts
            fields: Columns copied from each draft dict
        """
        if plan.to_delete:
            self.session.execute(
                delete(ScoutExperience).where(
                    ScoutExperience.user_id == user_id,
                    ScoutExperience.id.in_(plan.to_delete),
                )
            )

        now = datetime.datetime.utcnow()
        for index, item in plan.to_update:
            row = self.session.get(ScoutExperience, item["id"])
            if row is None or row.user_id != user_id:
                raise LookupError(f"Experience {item['id']} does not belong to user {user_id}")
            for key in fields:
                setattr(row, key, item.get(key))
            row.sort_order = index
            row.updated_at = now
            self.session.add(row)
            self.session.flush()

        for index, item in plan.to_insert:
            row = ScoutExperience(user_id=user_id, sort_order=index, **{key: item.get(key) for key in fields})
            self.session.add(row)
            self.session.flush()

        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
