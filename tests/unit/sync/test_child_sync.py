"""Tests for ChildCollectionSync over scout experiences."""

import pytest
from sqlalchemy.exc import OperationalError

from app.db.repositories.experience import ExperienceRepository
from app.sync.child_sync import ChildCollectionSync
from app.sync.errors import ReadFailure, WriteFailure
from app.sync.reconcile import ReconcilePlan


def _entry(organization, role="Scout", entry_id=None, **extra):
    entry = {
        "id": entry_id,
        "organization": organization,
        "role": role,
        "location": None,
        "start_date": None,
        "end_date": None,
        "description": None,
        "skills": None,
    }
    entry.update(extra)
    return entry


@pytest.fixture
def scout(make_user):
    return make_user(email="scout@pitchside.io", role="scout")


@pytest.fixture
def child_sync(session):
    return ChildCollectionSync(ExperienceRepository(session))


def _seed(child_sync, scout, *organizations):
    return child_sync.commit(scout.id, [_entry(o) for o in organizations])


# ======================================================================
# Load and draft editing
# ======================================================================


class TestDraft:

    def test_load_empty(self, child_sync, scout):
        assert child_sync.load(scout.id) == []
        assert child_sync.draft == []

    def test_add_draft_has_required_fields(self, child_sync, scout):
        child_sync.load(scout.id)
        entry = child_sync.add_draft()
        assert entry["id"] is None
        assert entry["organization"] == ""
        assert entry["role"] == ""
        assert entry["sort_order"] == 0

    def test_update_and_remove_draft(self, child_sync, scout):
        _seed(child_sync, scout, "Ajax", "Benfica")
        child_sync.update_draft(0, "location", "Amsterdam")
        child_sync.remove_draft(1)
        assert child_sync.draft[0]["location"] == "Amsterdam"
        assert len(child_sync.draft) == 1
        # view untouched until commit
        assert child_sync.view[0]["location"] is None
        assert len(child_sync.view) == 2

    def test_update_draft_unknown_key(self, child_sync, scout):
        _seed(child_sync, scout, "Ajax")
        with pytest.raises(KeyError):
            child_sync.update_draft(0, "user_id", 42)

    def test_load_failure_is_a_read_failure(self, child_sync, scout, monkeypatch):
        def broken(user_id):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(child_sync.repository, "get_all_by_user", broken)
        with pytest.raises(ReadFailure) as excinfo:
            child_sync.load(scout.id)
        assert excinfo.value.title == "Load failed"


# ======================================================================
# Commit
# ======================================================================


class TestCommit:

    def test_sort_order_follows_draft_position(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax", "Benfica", "Porto")
        assert [r["organization"] for r in rows] == ["Ajax", "Benfica", "Porto"]
        assert [r["sort_order"] for r in rows] == [0, 1, 2]

    def test_reorder_rewrites_sort_order(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax", "Benfica", "Porto")
        reordered = [rows[2], rows[0], rows[1]]
        result = child_sync.commit(scout.id, reordered)
        assert [r["organization"] for r in result] == ["Porto", "Ajax", "Benfica"]
        assert [r["sort_order"] for r in result] == [0, 1, 2]
        assert [r["id"] for r in result] == [rows[2]["id"], rows[0]["id"], rows[1]["id"]]

    def test_removed_entries_are_deleted(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax", "Benfica", "Porto")
        result = child_sync.commit(scout.id, [rows[0], rows[2]])
        assert [r["id"] for r in result] == [rows[0]["id"], rows[2]["id"]]
        assert [r["sort_order"] for r in result] == [0, 1]

    def test_empty_draft_deletes_everything(self, child_sync, scout):
        _seed(child_sync, scout, "Ajax", "Benfica")
        assert child_sync.commit(scout.id, []) == []

    def test_mixed_update_and_insert(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax")
        edited = dict(rows[0], role="Head scout")
        result = child_sync.commit(scout.id, [_entry("Celtic"), edited])
        assert [(r["organization"], r["role"]) for r in result] == [("Celtic", "Scout"), ("Ajax", "Head scout")]
        assert result[1]["id"] == rows[0]["id"]

    def test_commit_uses_current_draft(self, child_sync, scout):
        child_sync.load(scout.id)
        child_sync.add_draft()
        child_sync.update_draft(0, "organization", "Lazio")
        child_sync.update_draft(0, "skills", ["Set pieces"])
        result = child_sync.commit(scout.id)
        assert result[0]["organization"] == "Lazio"
        assert result[0]["skills"] == ["Set pieces"]

    def test_stale_id_is_inserted_as_new_row(self, child_sync, scout):
        result = child_sync.commit(scout.id, [_entry("Ajax", entry_id=9999)])
        assert len(result) == 1
        assert result[0]["organization"] == "Ajax"

    def test_duplicate_ids_raise(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax")
        with pytest.raises(ValueError):
            child_sync.commit(scout.id, [rows[0], dict(rows[0])])
        assert len(child_sync.load(scout.id)) == 1

    def test_failed_insert_rolls_back_everything(self, child_sync, scout):
        rows = _seed(child_sync, scout, "Ajax", "Benfica", "Porto")
        # drops two rows, renames one and inserts an invalid one
        broken = [dict(rows[0], organization="Renamed"), _entry(None)]

        with pytest.raises(WriteFailure) as excinfo:
            child_sync.commit(scout.id, broken)
        assert excinfo.value.detail == "Could not save the experience list"
        assert "NOT NULL" not in excinfo.value.detail

        persisted = child_sync.load(scout.id)
        assert [r["organization"] for r in persisted] == ["Ajax", "Benfica", "Porto"]
        assert [r["id"] for r in persisted] == [r["id"] for r in rows]

    def test_rows_of_other_users_untouched(self, child_sync, scout, make_user, session):
        other = make_user(email="other@pitchside.io", role="scout")
        other_sync = ChildCollectionSync(ExperienceRepository(session))
        other_sync.commit(other.id, [_entry("Feyenoord")])

        _seed(child_sync, scout, "Ajax")
        child_sync.commit(scout.id, [])
        assert [r["organization"] for r in other_sync.load(other.id)] == ["Feyenoord"]

    def test_apply_plan_rejects_foreign_rows(self, child_sync, scout, make_user, session):
        other = make_user(email="other@pitchside.io", role="scout")
        foreign = ChildCollectionSync(ExperienceRepository(session)).commit(other.id, [_entry("Feyenoord")])

        plan = ReconcilePlan(to_update=[(0, dict(foreign[0], organization="Hijacked"))])
        with pytest.raises(LookupError):
            child_sync.repository.apply_plan(scout.id, plan, child_sync.fields)
        child_sync.repository.rollback()

        assert child_sync.load(other.id)[0]["organization"] == "Feyenoord"
