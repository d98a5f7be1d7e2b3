"""
Review Service
"""
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from plastics_catalog.exceptions import ReviewNotFoundError
from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import Review, ReviewHelpful
from plastics_catalog.schemas.review import ReviewCreate
from plastics_catalog.services.material_service import get_material

logger = get_logger(__name__)


def list_reviews(db: Session, material_id: int) -> List[Review]:
    """Reviews of a material, newest first"""
    return (
        db.query(Review)
        .filter(Review.material_id == material_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


def create_review(db: Session, user_id: str, material_id: int, data: ReviewCreate) -> Review:
    """
    Add a review.

    Raises:
        MaterialNotFoundError: If the material does not exist
    """
    get_material(db, material_id)

    review = Review(user_id=user_id, material_id=material_id, **data.model_dump())
    db.add(review)
    db.commit()
    db.refresh(review)

    logger.info("Review created", extra={"review_id": review.id, "material_id": material_id})
    return review


def mark_helpful(db: Session, user_id: str, review_id: int) -> Review:
    """
    Record that a user found a review helpful.

    Each user counts once; repeated marks leave helpful_count unchanged.

    Raises:
        ReviewNotFoundError: If the review does not exist
    """
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise ReviewNotFoundError(review_id)

    already_marked = db.query(ReviewHelpful).filter(
        ReviewHelpful.review_id == review_id,
        ReviewHelpful.user_id == user_id,
    ).first()
    if already_marked:
        return review

    db.add(ReviewHelpful(review_id=review_id, user_id=user_id))
    review.helpful_count = Review.helpful_count + 1
    try:
        db.commit()
    except IntegrityError:
        # Concurrent mark by the same user; that request already counted it
        db.rollback()
    db.refresh(review)
    return review
