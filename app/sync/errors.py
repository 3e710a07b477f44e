"""
Sync error taxonomy.

There is no ``NotFound``: a missing profile is a normal load
result (:attr:`app.sync.profile_sync.LoadResult.found`), not a failure.
"""

from typing import Optional


class SyncError(Exception):
    """Base class for failures surfaced by the sync components.

    ``detail`` carries the collaborator's own message when there is one.
    """

    title = "Sync error"

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class UploadFailure(SyncError):
    """The blob store rejected or could not complete an upload.

    Raised before any database write of the same commit.
    """

    title = "Upload failed"


class ReadFailure(SyncError):
    """The record store could not be read.  Nothing was written."""

    title = "Load failed"


class WriteFailure(SyncError):
    """The record store rejected an insert, update or delete.

    ``detail`` is a fixed, user-facing message; the database error is
    kept in ``cause`` and logged, never sent to clients.
    """

    title = "Save failed"


class InvalidTransition(SyncError):
    """An operation was called in a state that does not allow it."""

    title = "Invalid operation"
