"""
User Service

Keeps the local user mirror in step with identity-provider claims.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import User
from plastics_catalog.schemas.user import Identity

logger = get_logger(__name__)

_MIRRORED_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def _release_email(db: Session, email: Optional[str], user_id: str) -> None:
    """Clear ``email`` from any other mirrored user; the provider has moved it"""
    if not email:
        return
    stale = db.query(User).filter(User.email == email, User.id != user_id).all()
    for other in stale:
        logger.info(
            "Email moved to another user; clearing stale mirror",
            extra={"user_id": other.id, "new_owner": user_id},
        )
        other.email = None
    if stale:
        db.flush()


def upsert_user(db: Session, identity: Identity) -> User:
    """
    Insert or refresh the local copy of a user from session claims.

    Writes only when something changed, so authenticated reads do not turn
    into an UPDATE per request.
    """
    user = get_user(db, identity.user_id)
    if user is None:
        _release_email(db, identity.email, identity.user_id)
        user = User(id=identity.user_id, **{f: getattr(identity, f) for f in _MIRRORED_FIELDS})
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Created by a concurrent request for the same user
            db.rollback()
            user = get_user(db, identity.user_id)
            if user is None:
                raise
            return user
        db.refresh(user)
        logger.info("User mirrored", extra={"user_id": user.id})
        return user

    changed = False
    for field in _MIRRORED_FIELDS:
        value = getattr(identity, field)
        if getattr(user, field) != value:
            if field == "email":
                _release_email(db, value, user.id)
            setattr(user, field, value)
            changed = True
    if changed:
        user.updated_at = datetime.utcnow()
        db.commit()
        db.refresh(user)
    return user
