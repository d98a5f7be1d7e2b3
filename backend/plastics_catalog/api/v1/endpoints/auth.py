"""
Authentication dependencies and current-user endpoint

Login itself happens at the external identity provider. Each request
carries the provider's session token, either in the session cookie or as
a Bearer token; it is resolved into an Identity here and handed to
handlers explicitly through FastAPI dependencies.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from plastics_catalog.core.config import settings
from plastics_catalog.core.security import identity_from_token
from plastics_catalog.db.session import get_db
from plastics_catalog.exceptions import AuthenticationError
from plastics_catalog.models import User
from plastics_catalog.schemas.user import Identity, UserResponse
from plastics_catalog.services.user_service import upsert_user

router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


def _session_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Identity]:
    """
    Identity of the caller, or None for anonymous requests.

    Raises:
        AuthenticationError: If a token is present but invalid or expired
    """
    token = _session_token(request, credentials)
    if not token:
        return None

    identity = identity_from_token(token)
    if identity is None:
        raise AuthenticationError("Invalid or expired session")
    return identity


def get_current_identity(identity: Optional[Identity] = Depends(get_optional_identity)) -> Identity:
    """Identity of the caller; anonymous requests are rejected with 401"""
    if identity is None:
        raise AuthenticationError()
    return identity


def get_current_user(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> User:
    """
    Local user row for the caller, refreshed from the session claims.

    Usage:
        @router.post("/materials")
        def create(..., current_user: User = Depends(get_current_user)):
    """
    return upsert_user(db, identity)


@router.get("/user", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Get the authenticated user"""
    return current_user
