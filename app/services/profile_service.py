"""
Profile services.

Wrap :class:`ProfileSync` and :class:`ChildCollectionSync` for the HTTP
layer: ownership checks, owner-vs-viewer loading, mapping records to
response schemas.  Upload and write failures are not caught here; they
reach the application's exception handlers as :class:`SyncError`.
"""

from typing import Any, Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.auth_context import AuthContext
from app.db.repositories.experience import ExperienceRepository
from app.db.repositories.profile import ProfileRepository
from app.profiles import PLAYER, SCOUT
from app.profiles.base import ProfileVariant
from app.schemas.experience import ExperienceDraft, ExperienceResponse
from app.schemas.player_profile import PlayerProfileResponse, PlayerProfileUpdate, VideoHighlight
from app.schemas.scout_profile import ScoutProfileResponse, ScoutProfileUpdate
from app.storage.base import BlobStore
from app.sync.child_sync import ChildCollectionSync
from app.sync.media import MediaUploader, PendingMedia
from app.sync.profile_sync import ProfileSync
from app.sync.text import extract_youtube_id, text_rows, youtube_embed_url


class ProfileService:
    """Service for one profile variant, acting on behalf of ``auth``."""

    def __init__(self, session: Session, variant: ProfileVariant, blob_store: BlobStore, auth: AuthContext):
        self.variant = variant
        self.auth = auth
        self.repository = ProfileRepository(session, variant.model)
        self.uploader = MediaUploader(blob_store)
        self.sync = ProfileSync(variant, self.repository, self.uploader)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_profile(self, user_id: int) -> dict[str, Any]:
        """Load a profile.  The owner gets it created on first access, a
        viewer gets a 404 when there is none yet."""
        result = self.sync.load(user_id, allow_create=self._can_own(user_id))
        if not result.found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                                detail=f"No {self.variant.variant_id} profile yet")
        return result.record

    def commit(self, user_id: int, changes: dict[str, Any],
               media: Optional[dict[str, PendingMedia]] = None, ) -> dict[str, Any]:
        """Apply *changes* to a fresh draft and commit it with *media*.

        A missing profile is inserted by the commit itself.
        """
        self._require_owner(user_id)
        self.sync.attach(self.auth)
        try:
            self.sync.load(user_id, allow_create=False)
            self.sync.begin_edit()
            for key, value in changes.items():
                self.sync.set_field(key, value)
            for purpose, pending in (media or {}).items():
                self.sync.stage_media(purpose, pending)
            return self.sync.commit()
        finally:
            self.sync.detach()

    def list_cards(self, search: Optional[str], limit: int) -> list[dict[str, Any]]:
        profiles = self.repository.list_ordered_by_first_name(search, limit)
        return [{key: getattr(p, key) for key in self.variant.card_fields} for p in profiles]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _can_own(self, user_id: int) -> bool:
        """Owner of *user_id* and holding the role of this variant."""
        return self.auth.is_owner(user_id) and self.auth.user.role == self.variant.variant_id

    def _require_owner(self, user_id: int) -> None:
        if not self.auth.is_owner(user_id):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the owner can edit a profile")
        if self.auth.user.role != self.variant.variant_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                detail=f"{self.variant.variant_id.capitalize()} profiles belong to "
                                       f"{self.variant.variant_id} accounts")


class PlayerProfileService(ProfileService):
    """Player profiles: avatar upload and video highlights."""

    def __init__(self, session: Session, blob_store: BlobStore, auth: AuthContext):
        super().__init__(session, PLAYER, blob_store, auth)

    def get(self, user_id: int) -> PlayerProfileResponse:
        return self._to_response(self.get_profile(user_id))

    def update(self, user_id: int, data: PlayerProfileUpdate,
               avatar: Optional[PendingMedia] = None, ) -> PlayerProfileResponse:
        media = {"avatar": avatar} if avatar else None
        record = self.commit(user_id, data.model_dump(exclude_unset=True), media)
        return self._to_response(record)

    def add_video(self, user_id: int, video: PendingMedia) -> PlayerProfileResponse:
        """Upload a video file to a new path and append its URL to the
        highlights.

        The profile is loaded first, so an unreachable record store leaves
        no uploaded file behind.
        """
        self._require_owner(user_id)
        self.sync.load(user_id, allow_create=True)
        self.sync.begin_edit()
        url = self.uploader.upload_appended(user_id, video)
        self.sync.add_to_list("video_highlights", url)
        return self._to_response(self.sync.commit())

    @staticmethod
    def _to_response(record: dict[str, Any]) -> PlayerProfileResponse:
        videos = [
            VideoHighlight(url=url, youtube_id=extract_youtube_id(url), embed_url=youtube_embed_url(url))
            for url in record.get("video_highlights") or []
        ]
        return PlayerProfileResponse(
            **record,
            palmares_rows=text_rows(record.get("palmares")),
            career_rows=text_rows(record.get("career_description")),
            videos=videos,
        )


class ScoutProfileService(ProfileService):
    """Scout profiles: avatar, cover photo and the experience list."""

    def __init__(self, session: Session, blob_store: BlobStore, auth: AuthContext):
        super().__init__(session, SCOUT, blob_store, auth)
        self.experiences = ChildCollectionSync(ExperienceRepository(session))

    def get(self, user_id: int) -> ScoutProfileResponse:
        record = self.get_profile(user_id)
        return self._to_response(record, self.experiences.load(user_id))

    def update(self, user_id: int, data: ScoutProfileUpdate, experiences: Optional[list[ExperienceDraft]] = None,
               avatar: Optional[PendingMedia] = None, cover: Optional[PendingMedia] = None, ) -> ScoutProfileResponse:
        """Commit the profile, then reconcile the experience list.

        The two writes are sequential: a failing experience save does not
        undo the profile save.
        """
        media = {}
        if avatar:
            media["scout-avatar"] = avatar
        if cover:
            media["scout-cover"] = cover

        record = self.commit(user_id, data.model_dump(exclude_unset=True), media)

        if experiences is None:
            rows = self.experiences.load(user_id)
        else:
            try:
                rows = self.experiences.commit(user_id, [e.model_dump() for e in experiences])
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
        return self._to_response(record, rows)

    @staticmethod
    def _to_response(record: dict[str, Any], experiences: list[dict[str, Any]]) -> ScoutProfileResponse:
        return ScoutProfileResponse(
            **record,
            experiences=[ExperienceResponse(**row) for row in experiences],
        )
