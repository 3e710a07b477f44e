"""
Ordered child-list reconciliation.

Turns a persisted list and a draft list into an explicit write plan.
The plan is a *full replacement*: every surviving row is rewritten with
its new position, whether or not its fields changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class ReconcilePlan(Generic[T]):
    """Writes needed to make the persisted set equal a draft list.

    ``to_update`` and ``to_insert`` hold ``(index, item)`` pairs in draft
    order; ``index`` is the ``sort_order`` the row must end up with.
    """

    to_delete: list[Hashable] = field(default_factory=list)
    to_update: list[tuple[int, T]] = field(default_factory=list)
    to_insert: list[tuple[int, T]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.to_delete or self.to_update or self.to_insert)

    @property
    def write_count(self) -> int:
        return len(self.to_update) + len(self.to_insert)


def reconcile_ordered_children(existing: Iterable[T], draft: Sequence[T],
                               key_fn: Callable[[T], Optional[Hashable]], ) -> ReconcilePlan[T]:
    """Plan the writes turning *existing* into *draft*.

    Args:
        existing: Items currently persisted (any order).
        draft: Desired items, in their final order.
        key_fn: Returns an item's persisted id, or ``None`` for an
            unsaved draft.

    Returns:
        :class:`ReconcilePlan` where ``to_delete`` lists persisted ids
        missing from the draft (in persisted order), drafts whose id is
        persisted are updates, and drafts without an id (or with an id
        that is no longer persisted) are inserts.

    Raises:
        ValueError: if the draft carries the same id twice.
    """
    persisted_keys = [key_fn(item) for item in existing]
    persisted = set(persisted_keys)

    plan: ReconcilePlan[T] = ReconcilePlan()
    seen: set[Hashable] = set()

    for index, item in enumerate(draft):
        key = key_fn(item)
        if key is None:
            plan.to_insert.append((index, item))
            continue
        if key in seen:
            raise ValueError(f"Duplicate id {key!r} in draft list")
        seen.add(key)
        if key in persisted:
            plan.to_update.append((index, item))
        else:
            # Row vanished since it was loaded: write it back as a new row
            plan.to_insert.append((index, item))

    plan.to_delete = [key for key in persisted_keys if key not in seen]
    return plan
