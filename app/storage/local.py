"""
Filesystem blob store.

Writes files under ``<root>/<bucket>/<path>`` and serves them from
``<base_url>/<bucket>/<path>`` (the application mounts ``MEDIA_ROOT`` as
static files).
"""

from pathlib import Path, PurePosixPath
from typing import Optional

from app.core.logging import get_logger
from app.storage.base import BlobStore, StorageError

logger = get_logger(__name__)


class LocalBlobStore(BlobStore):
    """Blob store backed by a local directory."""

    def __init__(self, root: str, bucket: str, base_url: str):
        self.root = Path(root)
        self.bucket = bucket
        self.base_url = base_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise StorageError(f"Invalid storage path: '{path}'")
        return self.root / self.bucket / Path(*relative.parts)

    def upload(self, path: str, content: bytes, content_type: Optional[str] = None,
               overwrite: bool = False, ) -> None:
        target = self._resolve(path)
        if target.exists() and not overwrite:
            raise StorageError(f"The resource already exists: '{path}'")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise StorageError(f"Could not store '{path}': {e}") from e
        logger.info("Stored %d bytes at %s/%s", len(content), self.bucket, path)

    def get_public_url(self, path: str) -> str:
        return f"{self.base_url}/{self.bucket}/{path}"
