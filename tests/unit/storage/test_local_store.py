"""Tests for the filesystem blob store."""

import pytest

from app.storage.base import StorageError
from app.storage.local import LocalBlobStore


@pytest.fixture
def store(tmp_path):
    return LocalBlobStore(str(tmp_path), "avatars", "http://localhost:8000/media/")


class TestLocalBlobStore:

    def test_upload_writes_under_bucket(self, store, tmp_path):
        store.upload("7/avatar.png", b"png")
        assert (tmp_path / "avatars" / "7" / "avatar.png").read_bytes() == b"png"

    def test_public_url(self, store):
        assert store.get_public_url("7/avatar.png") == "http://localhost:8000/media/avatars/7/avatar.png"

    def test_existing_path_without_overwrite(self, store):
        store.upload("7/1700000000000.mp4", b"a")
        with pytest.raises(StorageError, match="already exists"):
            store.upload("7/1700000000000.mp4", b"b")

    def test_overwrite_replaces(self, store, tmp_path):
        store.upload("7/avatar.png", b"one")
        store.upload("7/avatar.png", b"two", overwrite=True)
        assert (tmp_path / "avatars" / "7" / "avatar.png").read_bytes() == b"two"

    @pytest.mark.parametrize("path", ["../escape.png", "/etc/passwd", "7/../../x"])
    def test_rejects_paths_outside_bucket(self, store, path):
        with pytest.raises(StorageError):
            store.upload(path, b"x")
