"""
Session token utilities

The identity provider signs a JWT for each session. This module verifies
those tokens and turns their claims into an Identity. create_session_token
mints tokens with the same shape for local development and tests.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

import jwt

from plastics_catalog.core.config import settings
from plastics_catalog.schemas.user import Identity


# ============================================================================
# TOKEN GENERATION
# ============================================================================

def create_session_token(
    user_id: str,
    *,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    profile_image_url: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed session token carrying identity claims

    Args:
        user_id: External user id, stored in the "sub" claim
        expires_delta: Optional custom lifetime

    Returns:
        JWT string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.SESSION_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)

    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "profile_image_url": profile_image_url,
        "exp": now + expires_delta,
        "iat": now,
        "jti": str(uuid.uuid4()),
    }
    if settings.AUTH_ISSUER:
        payload["iss"] = settings.AUTH_ISSUER
    if settings.AUTH_AUDIENCE:
        payload["aud"] = settings.AUTH_AUDIENCE

    return jwt.encode(payload, settings.AUTH_SECRET_KEY, algorithm=settings.AUTH_ALGORITHM)


# ============================================================================
# TOKEN VALIDATION
# ============================================================================

def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a session token

    Signature, expiry and (when configured) issuer and audience are checked.

    Returns:
        Token payload dict if valid, None if invalid/expired
    """
    try:
        return jwt.decode(
            token,
            settings.AUTH_SECRET_KEY,
            algorithms=[settings.AUTH_ALGORITHM],
            issuer=settings.AUTH_ISSUER,
            audience=settings.AUTH_AUDIENCE,
            options={"require": ["exp", "sub"]},
        )
    except jwt.InvalidTokenError:
        # Expired, tampered, malformed, wrong issuer/audience
        return None


def identity_from_token(token: str) -> Optional[Identity]:
    """
    Resolve a session token into an Identity

    Returns:
        Identity if the token is valid and names a subject, None otherwise
    """
    payload = decode_session_token(token)
    if payload is None:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    return Identity(
        user_id=str(user_id),
        email=payload.get("email"),
        first_name=payload.get("first_name"),
        last_name=payload.get("last_name"),
        profile_image_url=payload.get("profile_image_url"),
    )
