"""Blob storage backends for profile media."""

from app.storage.base import BlobStore, StorageError
from app.storage.local import LocalBlobStore

__all__ = [
    "BlobStore",
    "StorageError",
    "LocalBlobStore",
]
