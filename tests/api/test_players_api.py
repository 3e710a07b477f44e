"""API tests for player profiles."""

import json

from sqlalchemy.exc import OperationalError
from sqlmodel import select

from app.core.security import create_access_token
from app.db.repositories.profile import ProfileRepository
from app.models.player_profile import PlayerProfile


def _bearer(email):
    return {"Authorization": f"Bearer {create_access_token({'sub': email})}"}


def _put(client, headers, changes=None, files=None):
    return client.put("/api/v1/players/me", headers=headers, data={"payload": json.dumps(changes or {})},
                      files=files)


# ======================================================================
# Loading
# ======================================================================


class TestLoad:

    def test_owner_gets_profile_created_on_first_access(self, client, session, make_user):
        user = make_user(email="new@pitchside.io")
        response = client.get("/api/v1/players/me", headers=_bearer(user.email))
        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == user.id
        assert body["first_name"] == ""
        assert body["videos"] == []

        client.get("/api/v1/players/me", headers=_bearer(user.email))
        rows = session.exec(select(PlayerProfile).where(PlayerProfile.user_id == user.id)).all()
        assert len(rows) == 1

    def test_viewer_gets_404_and_nothing_is_created(self, client, session, make_user, register):
        target = make_user(email="target@pitchside.io")
        _, headers = register("viewer@pitchside.io")
        response = client.get(f"/api/v1/players/{target.id}", headers=headers)
        assert response.status_code == 404
        assert session.exec(select(PlayerProfile).where(PlayerProfile.user_id == target.id)).first() is None

    def test_viewer_reads_existing_profile(self, client, register):
        owner, owner_headers = register("owner@pitchside.io", full_name="Gica Hagi")
        _, headers = register("viewer@pitchside.io")
        response = client.get(f"/api/v1/players/{owner['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["first_name"] == "Gica"

    def test_requires_authentication(self, client):
        assert client.get("/api/v1/players/me").status_code == 401


# ======================================================================
# Saving
# ======================================================================


class TestSave:

    def test_save_and_reload(self, client, register):
        _, headers = register("ion@pitchside.io")
        changes = {
            "first_name": "Ion",
            "current_team": "FC Arges",
            "speed": 88,
            "goals": 14,
            "palmares": "Cup 2021\n\nLeague 2022",
            "video_highlights": ["https://youtu.be/dQw4w9WgXcQ", "https://example.com/clip.mp4"],
        }
        response = _put(client, headers, changes)
        assert response.status_code == 200, response.text

        body = client.get("/api/v1/players/me", headers=headers).json()
        for key, value in changes.items():
            assert body[key] == value
        assert body["palmares_rows"] == ["Cup 2021", "League 2022"]
        assert body["videos"][0]["youtube_id"] == "dQw4w9WgXcQ"
        assert body["videos"][0]["embed_url"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
        assert body["videos"][1]["youtube_id"] is None

    def test_omitted_fields_are_kept(self, client, register):
        _, headers = register("ion@pitchside.io", full_name="Ion Popescu")
        _put(client, headers, {"bio": "Winger"})
        body = client.get("/api/v1/players/me", headers=headers).json()
        assert body["bio"] == "Winger"
        assert body["last_name"] == "Popescu"

    def test_avatar_upload_sets_photo_url(self, client, blob_store, register):
        user, headers = register("ion@pitchside.io")
        response = _put(client, headers, {"first_name": "Ion"},
                        files={"avatar": ("face.png", b"png-bytes", "image/png")})
        assert response.status_code == 200
        assert response.json()["photo_url"] == f"https://cdn.pitchside.io/avatars/{user['id']}/avatar.png"
        assert blob_store.uploads == [(f"{user['id']}/avatar.png", True)]

    def test_upload_failure_saves_nothing(self, client, blob_store, register):
        _, headers = register("ion@pitchside.io", full_name="Ion Popescu")
        blob_store.fail_with = "Payload too large"
        response = _put(client, headers, {"first_name": "Changed"},
                        files={"avatar": ("face.png", b"png-bytes", "image/png")})
        assert response.status_code == 502
        assert response.json() == {"title": "Upload failed", "detail": "Payload too large"}

        blob_store.fail_with = None
        body = client.get("/api/v1/players/me", headers=headers).json()
        assert body["first_name"] == "Ion"
        assert body["photo_url"] is None

    def test_out_of_range_rating_rejected(self, client, register):
        _, headers = register("ion@pitchside.io")
        assert _put(client, headers, {"speed": 101}).status_code == 422

    def test_malformed_payload_rejected(self, client, register):
        _, headers = register("ion@pitchside.io")
        response = client.put("/api/v1/players/me", headers=headers, data={"payload": "{not json"})
        assert response.status_code == 422

    def test_scout_cannot_save_player_profile(self, client, register):
        _, headers = register("scout@pitchside.io", role="scout")
        assert _put(client, headers, {"first_name": "X"}).status_code == 403

    def test_missing_profile_is_inserted_on_save(self, client, session, make_user):
        user = make_user(email="late@pitchside.io")
        response = _put(client, _bearer(user.email), {"first_name": "Late"})
        assert response.status_code == 200
        assert response.json()["first_name"] == "Late"
        assert len(session.exec(select(PlayerProfile).where(PlayerProfile.user_id == user.id)).all()) == 1


class TestVideos:

    def test_upload_appends_to_highlights(self, client, blob_store, register):
        user, headers = register("ion@pitchside.io")
        _put(client, headers, {"video_highlights": ["https://youtu.be/dQw4w9WgXcQ"]})

        response = client.post("/api/v1/players/me/videos", headers=headers,
                               files={"video": ("goal.mp4", b"mp4-bytes", "video/mp4")})
        assert response.status_code == 201
        highlights = response.json()["video_highlights"]
        assert highlights[0] == "https://youtu.be/dQw4w9WgXcQ"
        assert highlights[1].startswith(f"https://cdn.pitchside.io/avatars/{user['id']}/")
        assert highlights[1].endswith(".mp4")
        path, overwrite = blob_store.uploads[-1]
        assert overwrite is False


# ======================================================================
# Directory
# ======================================================================


class TestDirectory:

    def test_ordered_by_first_name(self, client, register):
        register("c@pitchside.io", full_name="Costel Ionescu")
        register("a@pitchside.io", full_name="Andrei Marin")
        _, headers = register("b@pitchside.io", full_name="Bogdan Stan")
        cards = client.get("/api/v1/players", headers=headers).json()
        assert [c["first_name"] for c in cards] == ["Andrei", "Bogdan", "Costel"]
        assert set(cards[0]) == {"user_id", "first_name", "last_name", "photo_url", "current_team", "position",
                                 "nationality"}

    def test_search_matches_full_name(self, client, register):
        register("c@pitchside.io", full_name="Costel Ionescu")
        _, headers = register("a@pitchside.io", full_name="Andrei Marin")
        cards = client.get("/api/v1/players", params={"search": "EL ION"}, headers=headers).json()
        assert [c["first_name"] for c in cards] == ["Costel"]

    def test_limit(self, client, register):
        headers = None
        for i in range(3):
            _, headers = register(f"p{i}@pitchside.io", full_name=f"Player{i} Test")
        cards = client.get("/api/v1/players", params={"limit": 2}, headers=headers).json()
        assert len(cards) == 2

    def test_scouts_are_not_listed(self, client, register):
        register("s@pitchside.io", role="scout", full_name="Scout Person")
        _, headers = register("p@pitchside.io", full_name="Player Person")
        cards = client.get("/api/v1/players", headers=headers).json()
        assert [c["first_name"] for c in cards] == ["Player"]


# ======================================================================
# Rejected input and failures
# ======================================================================


class TestFailuresKeepProfileUsable:

    def test_null_highlights_rejected(self, client, register):
        _, headers = register("ion@pitchside.io")
        _put(client, headers, {"video_highlights": ["https://youtu.be/dQw4w9WgXcQ"]})

        response = _put(client, headers, {"video_highlights": None})
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][-1] == "video_highlights"

        again = client.get("/api/v1/players/me", headers=headers)
        assert again.status_code == 200
        assert again.json()["video_highlights"] == ["https://youtu.be/dQw4w9WgXcQ"]

    def test_null_counter_and_name_rejected(self, client, register):
        _, headers = register("ion@pitchside.io", full_name="Ion Popescu")
        _put(client, headers, {"goals": 7})

        assert _put(client, headers, {"goals": None}).status_code == 422
        assert _put(client, headers, {"first_name": None}).status_code == 422

        body = client.get("/api/v1/players/me", headers=headers).json()
        assert body["goals"] == 7
        assert body["first_name"] == "Ion"

    def test_omitted_nullable_field_can_be_cleared(self, client, register):
        _, headers = register("ion@pitchside.io")
        _put(client, headers, {"bio": "Winger"})
        response = _put(client, headers, {"bio": None})
        assert response.status_code == 200
        assert response.json()["bio"] is None

    def test_save_failure_hides_database_text(self, client, register, monkeypatch):
        _, headers = register("ion@pitchside.io")

        def broken(self, user_id, values):
            raise OperationalError("UPDATE player_profiles SET goals=?", {}, Exception("database is locked"))

        monkeypatch.setattr(ProfileRepository, "update_by_user_id", broken)
        response = _put(client, headers, {"goals": 3})
        assert response.status_code == 409
        assert response.json() == {"title": "Save failed", "detail": "Could not save the player profile"}

        monkeypatch.undo()
        assert client.get("/api/v1/players/me", headers=headers).status_code == 200

    def test_read_failure_is_503(self, client, register, monkeypatch):
        owner, _ = register("owner@pitchside.io")
        _, headers = register("viewer@pitchside.io")

        def broken(self, user_id):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(ProfileRepository, "get_by_user_id", broken)
        response = client.get(f"/api/v1/players/{owner['id']}", headers=headers)
        assert response.status_code == 503
        assert response.json()["title"] == "Load failed"

    def test_video_not_uploaded_when_profile_cannot_load(self, client, blob_store, register, monkeypatch):
        _, headers = register("ion@pitchside.io")

        def broken(self, user_id, values):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(ProfileRepository, "create_if_absent", broken)
        response = client.post("/api/v1/players/me/videos", headers=headers,
                               files={"video": ("goal.mp4", b"mp4-bytes", "video/mp4")})
        assert response.status_code == 409
        assert blob_store.uploads == []
