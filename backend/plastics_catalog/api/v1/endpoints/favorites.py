"""
Favorites API Endpoints

All routes act on the authenticated user's own favorites.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from plastics_catalog.api.v1.endpoints.auth import get_current_user
from plastics_catalog.db.session import get_db
from plastics_catalog.logging_config import audit_log, get_client_ip
from plastics_catalog.models import User
from plastics_catalog.schemas.favorite import (
    FavoriteCheckResponse,
    FavoriteCreate,
    FavoriteResponse,
    FavoriteWithMaterial,
)
from plastics_catalog.services import favorite_service

router = APIRouter()


@router.get("", response_model=List[FavoriteWithMaterial])
def list_favorites(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The caller's favorites with their materials, newest first"""
    return favorite_service.list_favorites(db, current_user.id)


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    data: FavoriteCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Favorite a material. Adding an existing favorite returns it unchanged."""
    favorite = favorite_service.add_favorite(db, current_user.id, data.material_id)
    audit_log(
        "FAVORITE_ADDED",
        user_id=current_user.id,
        resource_type="favorite",
        resource_id=favorite.id,
        details={"material_id": data.material_id},
        ip_address=get_client_ip(request),
    )
    return favorite


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(
    material_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Remove a favorite; succeeds even if the material was not favorited"""
    if favorite_service.remove_favorite(db, current_user.id, material_id):
        audit_log(
            "FAVORITE_REMOVED",
            user_id=current_user.id,
            resource_type="favorite",
            details={"material_id": material_id},
            ip_address=get_client_ip(request),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{material_id}/check", response_model=FavoriteCheckResponse)
def check_favorite(
    material_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return FavoriteCheckResponse(
        is_favorite=favorite_service.is_favorite(db, current_user.id, material_id)
    )
