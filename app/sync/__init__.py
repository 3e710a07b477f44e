"""
Profile synchronization core.

:mod:`app.sync.profile_sync` and :mod:`app.sync.child_sync` sit on top of
the repositories and are imported from their modules directly.
"""

from app.sync.errors import InvalidTransition, ReadFailure, SyncError, UploadFailure, WriteFailure
from app.sync.media import MediaUploader, PendingMedia
from app.sync.reconcile import ReconcilePlan, reconcile_ordered_children
from app.sync.text import extract_youtube_id, text_rows, youtube_embed_url

__all__ = [
    "InvalidTransition",
    "ReadFailure",
    "SyncError",
    "UploadFailure",
    "WriteFailure",
    "MediaUploader",
    "PendingMedia",
    "ReconcilePlan",
    "reconcile_ordered_children",
    "extract_youtube_id",
    "text_rows",
    "youtube_embed_url",
]
