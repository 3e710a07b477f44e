"""
Single-profile synchronization.

:class:`ProfileSync` keeps one persisted profile record and one editable
draft apart.  The draft is a deep copy: nothing done to it is visible in
:attr:`ProfileSync.loaded` until :meth:`ProfileSync.commit` succeeds.

State machine
-------------

::

    VIEWING --begin_edit--> EDITING --commit--> COMMITTING --ok--> VIEWING
                                                    |
                                                    +--error--> EDITING

A commit uploads pending media first and only then writes the record.
Any failure leaves the draft and the pending media untouched so the same
commit can be retried.
"""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.auth_context import AuthContext
from app.core.logging import get_logger
from app.db.repositories.profile import ProfileRepository
from app.profiles.base import ProfileVariant
from app.sync.errors import InvalidTransition, ReadFailure, WriteFailure
from app.sync.media import MediaUploader, PendingMedia

logger = get_logger(__name__)


class SyncState(str, enum.Enum):
    VIEWING = "viewing"
    EDITING = "editing"
    COMMITTING = "committing"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of :meth:`ProfileSync.load`.

    ``record`` is ``None`` when the profile does not exist and creation
    was not allowed; that is a normal "no profile yet" state.
    """

    record: Optional[dict[str, Any]]
    created: bool = False

    @property
    def found(self) -> bool:
        return self.record is not None


class ProfileSync:
    """Load, edit and commit one profile of a given variant."""

    def __init__(self, variant: ProfileVariant, repository: ProfileRepository, uploader: MediaUploader):
        self.variant = variant
        self.repository = repository
        self.uploader = uploader

        self.user_id: Optional[int] = None
        self.loaded: Optional[dict[str, Any]] = None
        self.draft: Optional[dict[str, Any]] = None
        self.pending_media: dict[str, PendingMedia] = {}
        self.state = SyncState.VIEWING

        self._unsubscribe: Optional[Callable[[], None]] = None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def attach(self, auth: AuthContext) -> None:
        """Drop unsaved edits whenever the acting identity changes."""
        self.detach()
        self._unsubscribe = auth.subscribe(self._on_identity_change)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_identity_change(self, _user) -> None:
        if self.state is not SyncState.VIEWING:
            logger.info("Identity changed, discarding %s draft of user %s", self.variant.variant_id, self.user_id)
        self.cancel_edit()

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self, user_id: int, allow_create: bool) -> LoadResult:
        """Fetch the profile of *user_id*.

        Args:
            user_id: Profile owner.
            allow_create: True only when the caller owns the profile.  A
                missing profile is then created with empty required
                fields; otherwise nothing is written.

        Raises:
            ReadFailure: if the read fails and creation was not allowed.
            WriteFailure: if the read or the creation fails on an owner load.
        """
        self.user_id = user_id
        try:
            if allow_create:
                profile, created = self.repository.create_if_absent(user_id, self.variant.required_defaults)
            else:
                profile, created = self.repository.get_by_user_id(user_id), False
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("Loading %s profile of user %s failed: %s", self.variant.variant_id, user_id, e)
            if allow_create:
                raise WriteFailure(f"Could not create the {self.variant.variant_id} profile", cause=e) from e
            raise ReadFailure(f"Could not load the {self.variant.variant_id} profile", cause=e) from e

        if created:
            logger.info("Created empty %s profile for user %s", self.variant.variant_id, user_id)

        self.loaded = self.variant.to_record(profile) if profile is not None else None
        self.draft = None
        self.pending_media = {}
        self.state = SyncState.VIEWING
        return LoadResult(record=copy.deepcopy(self.loaded), created=created)

    # ------------------------------------------------------------------
    # Draft editing
    # ------------------------------------------------------------------

    def begin_edit(self) -> dict[str, Any]:
        """Start editing from the loaded record, or from an empty one."""
        if self.loaded is not None:
            self.draft = {key: copy.deepcopy(self.loaded.get(key)) for key in self.variant.editable_fields}
        else:
            self.draft = self.variant.empty_record()
        self.state = SyncState.EDITING
        return self.draft

    def cancel_edit(self) -> None:
        self.draft = None
        self.pending_media = {}
        self.state = SyncState.VIEWING

    def set_field(self, key: str, value: Any) -> None:
        """Set one draft field.  No validation happens here."""
        draft = self._require_draft()
        if key not in self.variant.editable_fields:
            raise KeyError(f"'{key}' is not an editable {self.variant.variant_id} field")
        draft[key] = value

    def add_to_list(self, key: str, value: str) -> None:
        """Append a stripped, non-blank *value* to a list field."""
        self._require_list_field(key)
        value = (value or "").strip()
        if not value:
            return
        draft = self._require_draft()
        draft[key] = list(draft.get(key) or []) + [value]

    def remove_from_list(self, key: str, index: int) -> None:
        self._require_list_field(key)
        draft = self._require_draft()
        items = list(draft.get(key) or [])
        del items[index]
        draft[key] = items

    def stage_media(self, purpose: str, media: PendingMedia) -> None:
        """Queue a file for upload on the next commit."""
        self._require_draft()
        if purpose not in self.variant.media_fields:
            raise KeyError(f"Unknown media purpose '{purpose}' for {self.variant.variant_id} profiles")
        self.pending_media[purpose] = media

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, draft: Optional[dict[str, Any]] = None,
               pending_media: Optional[dict[str, PendingMedia]] = None, ) -> dict[str, Any]:
        """Upload pending media, then write the draft in one statement.

        Args:
            draft: Replaces the current draft when given.
            pending_media: Purpose -> file, replaces the staged media when given.

        Returns:
            The committed record as now persisted.

        Raises:
            InvalidTransition: if not editing.
            UploadFailure: if an upload fails; nothing was written.
            WriteFailure: if the record store rejects the write.
        """
        if self.state is not SyncState.EDITING:
            raise InvalidTransition(f"Cannot commit while {self.state.value}")
        if self.user_id is None:
            raise InvalidTransition("Cannot commit before a profile was loaded")
        if draft is not None:
            unknown = set(draft) - set(self.variant.editable_fields)
            if unknown:
                raise KeyError(f"Not editable {self.variant.variant_id} fields: {sorted(unknown)}")
            self.draft = copy.deepcopy(draft)
        if pending_media is not None:
            for purpose, media in pending_media.items():
                self.stage_media(purpose, media)

        self.state = SyncState.COMMITTING
        try:
            profile = self._write(self._with_uploaded_media())
        except Exception:
            self.state = SyncState.EDITING
            raise

        self.loaded = self.variant.to_record(profile)
        self.draft = None
        self.pending_media = {}
        self.state = SyncState.VIEWING
        logger.info("Committed %s profile of user %s", self.variant.variant_id, self.user_id)
        return copy.deepcopy(self.loaded)

    def _with_uploaded_media(self) -> dict[str, Any]:
        """Working copy of the draft with uploaded media URLs folded in."""
        working = copy.deepcopy(self.draft)
        for purpose, media in self.pending_media.items():
            column = self.variant.media_fields[purpose]
            working[column] = self.uploader.upload_singular(self.user_id, purpose, media)
        return working

    def _write(self, values: dict[str, Any]):
        try:
            if self.loaded is not None:
                profile = self.repository.update_by_user_id(self.user_id, values)
                if profile is None:
                    raise WriteFailure(f"{self.variant.variant_id.capitalize()} profile of user "
                                       f"{self.user_id} no longer exists")
            else:
                profile = self.repository.create(self.user_id, values)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("Writing %s profile of user %s failed: %s", self.variant.variant_id, self.user_id, e)
            raise WriteFailure(f"Could not save the {self.variant.variant_id} profile", cause=e) from e
        return profile

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_draft(self) -> dict[str, Any]:
        if self.state is not SyncState.EDITING or self.draft is None:
            raise InvalidTransition("Not editing")
        return self.draft

    def _require_list_field(self, key: str) -> None:
        if key not in self.variant.list_fields:
            raise KeyError(f"'{key}' is not a list field of {self.variant.variant_id} profiles")
