"""
Favorite Service

Check / add / remove primitives behind the UI's favorite toggle. The
(user, material) pair is unique in the database, so add is idempotent even
when two requests race.
"""
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager

from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import Favorite, Material
from plastics_catalog.services.material_service import get_material

logger = get_logger(__name__)


def _find_favorite(db: Session, user_id: str, material_id: int):
    return db.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.material_id == material_id,
    ).first()


def is_favorite(db: Session, user_id: str, material_id: int) -> bool:
    """True if the user has favorited the material"""
    return _find_favorite(db, user_id, material_id) is not None


def add_favorite(db: Session, user_id: str, material_id: int) -> Favorite:
    """
    Favorite a material for a user.

    Returns the existing row when the pair is already favorited.

    Raises:
        MaterialNotFoundError: If the material does not exist
    """
    get_material(db, material_id)

    existing = _find_favorite(db, user_id, material_id)
    if existing:
        return existing

    favorite = Favorite(user_id=user_id, material_id=material_id)
    db.add(favorite)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent add of the same pair
        db.rollback()
        existing = _find_favorite(db, user_id, material_id)
        if existing is None:
            raise
        return existing

    db.refresh(favorite)
    logger.info("Favorite added", extra={"user_id": user_id, "material_id": material_id})
    return favorite


def remove_favorite(db: Session, user_id: str, material_id: int) -> bool:
    """
    Remove a favorite; a no-op when it does not exist.

    Returns:
        True if a row was deleted
    """
    deleted = db.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.material_id == material_id,
    ).delete(synchronize_session=False)
    db.commit()

    if deleted:
        logger.info("Favorite removed", extra={"user_id": user_id, "material_id": material_id})
    return bool(deleted)


def list_favorites(db: Session, user_id: str) -> List[Favorite]:
    """A user's favorites, newest first, with materials loaded"""
    return (
        db.query(Favorite)
        .join(Material, Favorite.material_id == Material.id)
        .options(contains_eager(Favorite.material))
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )
