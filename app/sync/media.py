"""
Media upload helper.

Path conventions inside the bucket:

- singular, overwritable assets: ``{user_id}/{purpose}.{ext}``
  (avatar, cover photo)
- append-only assets: ``{user_id}/{timestamp}.{ext}`` (video uploads)

The public URL returned by the store is what gets written into the
profile record.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from app.core.logging import get_logger
from app.storage.base import BlobStore, StorageError
from app.sync.errors import UploadFailure

logger = get_logger(__name__)


@dataclass(frozen=True)
class PendingMedia:
    """A file chosen by the user, not yet uploaded."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def extension(self) -> str:
        """Text after the last dot of the file name (whole name if none)."""
        if not self.filename:
            return "bin"
        return self.filename.rsplit(".", 1)[-1]


def _millis() -> int:
    return int(time.time() * 1000)


class MediaUploader:
    """Uploads profile media to a :class:`BlobStore`."""

    def __init__(self, store: BlobStore, clock: Callable[[], int] = _millis):
        self.store = store
        self._clock = clock

    @staticmethod
    def singular_path(user_id: int, purpose: str, media: PendingMedia) -> str:
        return f"{user_id}/{purpose}.{media.extension}"

    def appended_path(self, user_id: int, media: PendingMedia) -> str:
        return f"{user_id}/{self._clock()}.{media.extension}"

    def upload_singular(self, user_id: int, purpose: str, media: PendingMedia) -> str:
        """Upload to the fixed path for *purpose*, replacing any previous file.

        Returns:
            Public URL of the stored file.

        Raises:
            UploadFailure: if the store rejects the upload.
        """
        return self._upload(self.singular_path(user_id, purpose, media), media, overwrite=True)

    def upload_appended(self, user_id: int, media: PendingMedia) -> str:
        """Upload to a fresh timestamped path.  Never overwrites."""
        return self._upload(self.appended_path(user_id, media), media, overwrite=False)

    def _upload(self, path: str, media: PendingMedia, overwrite: bool) -> str:
        try:
            self.store.upload(path, media.content, content_type=media.content_type, overwrite=overwrite)
        except StorageError as e:
            logger.warning("Upload of %s failed: %s", path, e)
            raise UploadFailure(str(e), cause=e) from e
        return self.store.get_public_url(path)
