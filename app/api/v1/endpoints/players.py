"""
Player profile endpoints.

Directory listing, owner load-or-create, draft commit with avatar upload,
and video highlight uploads.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from app.api.dependencies import get_auth_context, get_blob_store, read_upload
from app.core.auth_context import AuthContext
from app.core.config import settings
from app.db.session import get_db
from app.schemas.player_profile import PlayerCard, PlayerProfileResponse, PlayerProfileUpdate
from app.services.profile_service import PlayerProfileService
from app.storage.base import BlobStore

router = APIRouter()


def get_player_service(db: Session = Depends(get_db), blob_store: BlobStore = Depends(get_blob_store),
                       auth: AuthContext = Depends(get_auth_context), ) -> PlayerProfileService:
    return PlayerProfileService(db, blob_store, auth)


@router.get("", summary="List players ordered by first name.", response_model=list[PlayerCard], )
def list_players(search: Optional[str] = Query(None, description="Case-insensitive name filter"),
                 limit: int = Query(settings.DIRECTORY_DEFAULT_LIMIT, ge=1, le=settings.DIRECTORY_MAX_LIMIT),
                 service: PlayerProfileService = Depends(get_player_service), ):
    return service.list_cards(search, limit)


@router.get("/me", summary="Get own player profile.", response_model=PlayerProfileResponse, )
def get_my_profile(service: PlayerProfileService = Depends(get_player_service)):
    """Creates an empty profile on first access."""
    return service.get(service.auth.user_id)


@router.put("/me", summary="Save own player profile.", response_model=PlayerProfileResponse, )
def update_my_profile(payload: str = Form("{}", description="PlayerProfileUpdate as JSON"),
                      avatar: Optional[UploadFile] = File(None),
                      service: PlayerProfileService = Depends(get_player_service), ):
    """
    Commit the draft.

    The avatar, when sent, is uploaded first and its URL replaces
    ``photo_url``; if the upload fails nothing is saved.
    """
    try:
        data = PlayerProfileUpdate.model_validate_json(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))
    return service.update(service.auth.user_id, data, avatar=read_upload(avatar))


@router.post("/me/videos", summary="Upload a highlight video.", response_model=PlayerProfileResponse,
             status_code=status.HTTP_201_CREATED, )
def upload_video(video: UploadFile = File(...), service: PlayerProfileService = Depends(get_player_service), ):
    return service.add_video(service.auth.user_id, read_upload(video))


@router.get("/{user_id}", summary="Get a player profile.", response_model=PlayerProfileResponse, )
def get_player(user_id: int, service: PlayerProfileService = Depends(get_player_service), ):
    """Read-only for viewers: a missing profile is a 404, never created."""
    return service.get(user_id)
