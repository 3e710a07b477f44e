"""Tests for the ordered child-list reconciliation planner.

Pure unit tests: items are plain dicts keyed by ``"id"``.
"""

import pytest

from app.sync.reconcile import ReconcilePlan, reconcile_ordered_children


def _key(item):
    return item.get("id")


def _items(*ids):
    return [{"id": i, "organization": f"org-{i}"} for i in ids]


# ======================================================================
# Plan contents
# ======================================================================


class TestReconcilePlan:

    def test_unchanged_list_rewrites_every_row(self):
        existing = _items(1, 2, 3)
        plan = reconcile_ordered_children(existing, existing, _key)
        assert plan.to_delete == []
        assert [(i, item["id"]) for i, item in plan.to_update] == [(0, 1), (1, 2), (2, 3)]
        assert plan.to_insert == []

    def test_removed_ids_are_deleted(self):
        existing = _items(1, 2, 3)
        draft = [{"id": 1}, {"id": 3, "organization": "edited"}]
        plan = reconcile_ordered_children(existing, draft, _key)
        assert plan.to_delete == [2]
        assert [(i, item["id"]) for i, item in plan.to_update] == [(0, 1), (1, 3)]

    def test_new_drafts_are_inserted_at_their_position(self):
        existing = _items(1)
        draft = [{"id": None, "organization": "A"}, {"id": 1}, {"organization": "C"}]
        plan = reconcile_ordered_children(existing, draft, _key)
        assert [i for i, _ in plan.to_insert] == [0, 2]
        assert [i for i, _ in plan.to_update] == [1]

    def test_reordering_changes_indexes_only(self):
        existing = _items(1, 2, 3)
        draft = list(reversed(existing))
        plan = reconcile_ordered_children(existing, draft, _key)
        assert [(i, item["id"]) for i, item in plan.to_update] == [(0, 3), (1, 2), (2, 1)]
        assert plan.to_delete == []

    def test_empty_draft_deletes_everything(self):
        plan = reconcile_ordered_children(_items(1, 2), [], _key)
        assert plan.to_delete == [1, 2]
        assert plan.write_count == 0

    def test_stale_id_is_inserted_again(self):
        """An id no longer persisted (deleted elsewhere) becomes a new row."""
        plan = reconcile_ordered_children(_items(1), [{"id": 1}, {"id": 99}], _key)
        assert [item["id"] for _, item in plan.to_insert] == [99]
        assert plan.to_delete == []

    def test_duplicate_id_in_draft_raises(self):
        with pytest.raises(ValueError, match="Duplicate id"):
            reconcile_ordered_children(_items(1), [{"id": 1}, {"id": 1}], _key)

    def test_empty_plan(self):
        plan = reconcile_ordered_children([], [], _key)
        assert isinstance(plan, ReconcilePlan)
        assert plan.is_empty

    def test_indexes_are_dense_over_mixed_list(self):
        existing = _items(5, 6)
        draft = [{"id": 6}, {"id": None}, {"id": 5}, {"id": None}]
        plan = reconcile_ordered_children(existing, draft, _key)
        indexes = sorted(i for i, _ in plan.to_update + plan.to_insert)
        assert indexes == [0, 1, 2, 3]
