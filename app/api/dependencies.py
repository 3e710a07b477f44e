"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, database access and
media storage.
"""

from typing import Optional

from fastapi import Depends, HTTPException, UploadFile, status
from sqlmodel import Session

from app.core.auth_context import AuthContext
from app.core.config import settings
from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService
from app.storage.base import BlobStore
from app.storage.local import LocalBlobStore
from app.sync.media import PendingMedia


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    email = decode_access_token(token)
    if not email:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    user = UserService(db).get_user_by_email(email)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")
    return user


def get_auth_context(user: User = Depends(get_current_user)) -> AuthContext:
    """Acting identity for the request."""
    return AuthContext(user)


def get_blob_store() -> BlobStore:
    """Blob store for profile media."""
    return LocalBlobStore(root=settings.MEDIA_ROOT, bucket=settings.MEDIA_BUCKET, base_url=settings.MEDIA_BASE_URL)


def read_upload(upload: Optional[UploadFile]) -> Optional[PendingMedia]:
    """Turn a multipart file into a :class:`PendingMedia`, or None if absent."""
    if upload is None:
        return None
    return PendingMedia(filename=upload.filename or "", content=upload.file.read(),
                        content_type=upload.content_type)
