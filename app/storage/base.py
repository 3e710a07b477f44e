"""
Abstract base class for blob stores.

A blob store keeps opaque files under slash-separated paths inside a
bucket and hands out a public URL for each path.  Retention and access
control belong to the store, not to this service.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Raised by a blob store when an upload cannot be completed."""


class BlobStore(ABC):
    """Interface every blob store backend implements."""

    @abstractmethod
    def upload(self, path: str, content: bytes, content_type: Optional[str] = None,
               overwrite: bool = False, ) -> None:
        """Store *content* at *path*.

        Raises:
            StorageError: if the path exists and *overwrite* is False, or
                the backend rejects the write.
        """
        ...

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """Deterministic public URL for *path*.  Valid as soon as
        :meth:`upload` has returned."""
        ...
