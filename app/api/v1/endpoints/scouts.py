"""
Scout profile endpoints.

Directory listing, profile with experiences, and the combined save of
profile, media and experience list.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from app.api.dependencies import get_auth_context, get_blob_store, read_upload
from app.core.auth_context import AuthContext
from app.core.config import settings
from app.db.session import get_db
from app.schemas.scout_profile import ScoutCard, ScoutProfileCommit, ScoutProfileResponse
from app.services.profile_service import ScoutProfileService
from app.storage.base import BlobStore

router = APIRouter()


def get_scout_service(db: Session = Depends(get_db), blob_store: BlobStore = Depends(get_blob_store),
                      auth: AuthContext = Depends(get_auth_context), ) -> ScoutProfileService:
    return ScoutProfileService(db, blob_store, auth)


@router.get("", summary="List scouts ordered by first name.", response_model=list[ScoutCard], )
def list_scouts(search: Optional[str] = Query(None, description="Case-insensitive name filter"),
                limit: int = Query(settings.DIRECTORY_MAX_LIMIT, ge=1, le=settings.DIRECTORY_MAX_LIMIT),
                service: ScoutProfileService = Depends(get_scout_service), ):
    return service.list_cards(search, limit)


@router.get("/me", summary="Get own scout profile.", response_model=ScoutProfileResponse, )
def get_my_profile(service: ScoutProfileService = Depends(get_scout_service)):
    return service.get(service.auth.user_id)


@router.put("/me", summary="Save own scout profile and experiences.", response_model=ScoutProfileResponse, )
def update_my_profile(payload: str = Form("{}", description="ScoutProfileCommit as JSON"),
                      avatar: Optional[UploadFile] = File(None), cover: Optional[UploadFile] = File(None),
                      service: ScoutProfileService = Depends(get_scout_service), ):
    """
    Commit profile changes, then replace the experience list.

    Experience entries keep their ``id`` when they already exist; their
    position in the list becomes their order.
    """
    try:
        data = ScoutProfileCommit.model_validate_json(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))
    return service.update(service.auth.user_id, data.profile, data.experiences, avatar=read_upload(avatar),
                          cover=read_upload(cover))


@router.get("/{user_id}", summary="Get a scout profile.", response_model=ScoutProfileResponse, )
def get_scout(user_id: int, service: ScoutProfileService = Depends(get_scout_service), ):
    """Read-only for viewers: a missing profile is a 404, never created."""
    return service.get(user_id)
