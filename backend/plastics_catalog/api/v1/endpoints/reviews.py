"""
Review API Endpoints

Listing and creating reviews live under /materials/{id}/reviews.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from plastics_catalog.api.v1.endpoints.auth import get_current_user
from plastics_catalog.db.session import get_db
from plastics_catalog.models import User
from plastics_catalog.schemas.review import ReviewResponse
from plastics_catalog.services import review_service

router = APIRouter()


@router.post("/{review_id}/helpful", response_model=ReviewResponse)
def mark_review_helpful(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Mark a review as helpful; each user is counted once"""
    return review_service.mark_helpful(db, current_user.id, review_id)
